import csv
import re
from pathlib import Path
from typing import Dict, Iterator, List, Union

from loguru import logger
from multiformats import CID

from guild_lucite.constants import CSV_COLUMNS
from guild_lucite.exceptions import InvalidCsvError, InvalidRowError
from guild_lucite.models import InvestorRecord
from guild_lucite.utils import is_ethereum_address

_TOKEN_ID_RE = re.compile(r"[0-9]+")


def validate_investor_row(row: Dict[str, str]) -> List[str]:
    """
    Run every check on a CSV row and collect the failures.

    Args:
        row: Mapping of CSV column name to cell value

    Returns:
        List of human readable reasons, empty if the row is valid
    """
    errors = []

    token_id = row["tokenId"]
    if not _TOKEN_ID_RE.fullmatch(token_id) or int(token_id) == 0:
        errors.append("Invalid token ID")

    if not is_ethereum_address(row["address"]):
        errors.append("Invalid Ethereum Address")

    for column, label in (("imageCid", "image"), ("animationCid", "animation")):
        try:
            CID.decode(row[column])
        except Exception as e:
            errors.append(f"Invalid {label} CID: {type(e).__name__}: {e}")

    return errors


def _check_header(header: List[str]):
    unknown = [c for c in header if c not in CSV_COLUMNS]
    if unknown:
        raise InvalidCsvError(f"Unexpected column(s) in header: {', '.join(unknown)}")
    missing = [c for c in CSV_COLUMNS if c not in header]
    if missing:
        raise InvalidCsvError(f"Missing column(s) in header: {', '.join(missing)}")
    if len(set(header)) != len(header):
        raise InvalidCsvError("Duplicate column in header")


def iter_investor_csv(csv_path: Union[str, Path]) -> Iterator[InvestorRecord]:
    """
    Lazily parse and validate an investor CSV.

    Blank lines are skipped and do not count towards row numbers. Iteration
    stops with InvalidRowError at the first row that fails validation.

    Args:
        csv_path: Path to the CSV file, relative paths resolve from the
            current working directory

    Yields:
        InvestorRecord per data row, in file order

    Raises:
        InvalidCsvError: If the header or a row is structurally broken
        InvalidRowError: If a row holds an invalid address, CID or token id
    """
    with open(Path(csv_path), newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            raise InvalidCsvError(f"{csv_path} is empty, a header row is required")
        header = [c.strip() for c in header]
        _check_header(header)

        row_number = 0
        for cells in reader:
            if not any(c.strip() for c in cells):
                continue
            row_number += 1
            if len(cells) != len(header):
                raise InvalidCsvError(
                    f"Row {row_number} has {len(cells)} cells, expected {len(header)}"
                )
            row = dict(zip(header, cells))
            errors = validate_investor_row(row)
            if errors:
                raise InvalidRowError(row_number, row, errors)
            yield InvestorRecord(**row)


def read_investor_csv(csv_path: Union[str, Path]) -> List[InvestorRecord]:
    """
    Read the whole investor CSV, failing before anything is returned if
    any row is invalid.
    """
    investors = list(iter_investor_csv(csv_path))
    logger.info(f"Read {len(investors)} investors from {csv_path}")
    return investors

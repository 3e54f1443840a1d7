import json
from typing import List, Optional


class LuciteError(Exception):
    pass


class InvalidCsvError(LuciteError):
    """
    The investor CSV is structurally broken: missing header, unknown or
    missing columns, or a row with the wrong number of cells
    """

    pass


class InvalidRowError(InvalidCsvError):
    """
    A data row failed validation. All reasons found for the row are kept
    """

    row_number: int
    row: dict
    reasons: List[str]

    def __init__(self, row_number: int, row: dict, reasons: List[str]):
        self.row_number = row_number
        self.row = row
        self.reasons = reasons
        row_json = json.dumps(row, separators=(",", ":"), ensure_ascii=False)
        super().__init__(
            f"💥 Invalid Row [rowNumber={row_number}] [row={row_json}] \n"
            f" Reasons: \n " + "\n ".join(reasons)
        )


class PinningError(LuciteError):
    """
    Pinning service returned no content identifier for the token metadata
    """

    token_id: int
    error: Optional[str]

    def __init__(self, token_id: int, error: Optional[str] = None):
        self.token_id = token_id
        self.error = error
        super().__init__(
            f"Lucite Token {token_id} metadata could not be pinned: {error}"
        )


class MintError(LuciteError):
    """
    Mint transaction was rejected by the node or reverted on chain
    """

    token_id: int
    tx_hash: Optional[str] = None

    def __init__(self, message: str, token_id: int, tx_hash: Optional[str] = None):
        self.token_id = token_id
        self.tx_hash = tx_hash
        super().__init__(message)

"""Batch issuance of non-transferable Guild Lucite tokens."""

from guild_lucite.exceptions import InvalidCsvError, InvalidRowError, MintError, PinningError
from guild_lucite.investors import read_investor_csv
from guild_lucite.ledger import LuciteContract, PendingMint
from guild_lucite.metadata import generate_investor_metadata
from guild_lucite.minter import LuciteMinter, mint_investor_tokens_from_csv
from guild_lucite.models import InvestorRecord, LuciteMetadata, MintOutcome, PinResult
from guild_lucite.pinata import PinataClient
from guild_lucite.settings import Settings

__all__ = [
    "read_investor_csv",
    "generate_investor_metadata",
    "LuciteContract",
    "PendingMint",
    "LuciteMinter",
    "mint_investor_tokens_from_csv",
    "PinataClient",
    "Settings",
    "InvestorRecord",
    "LuciteMetadata",
    "MintOutcome",
    "PinResult",
    "InvalidCsvError",
    "InvalidRowError",
    "MintError",
    "PinningError",
]

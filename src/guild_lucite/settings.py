import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator
from web3 import Web3

from guild_lucite.constants import DESCRIPTION
from guild_lucite.utils import is_ethereum_address


class Settings(BaseModel):
    """Runtime configuration, usually read from the environment / .env file."""

    model_config = ConfigDict(frozen=True)

    rpc_url: str
    contract_address: str
    private_key: Optional[str] = None
    pinata_api_key: Optional[str] = None
    pinata_api_secret: Optional[str] = None
    description: str = DESCRIPTION
    log_level: str = "INFO"

    @field_validator("contract_address")
    @classmethod
    def checksum_contract_address(cls, v: str) -> str:
        if not is_ethereum_address(v):
            raise ValueError(f"Invalid contract address: {v!r}")
        return Web3.to_checksum_address(v)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> "Settings":
        """
        Build settings from environment variables.

        A .env file (default: nearest one from the working directory) is
        loaded first without overriding variables that are
        already set. Keyword overrides that are not None win over both.
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        values = {
            "rpc_url": os.getenv("RPC_URL"),
            "contract_address": os.getenv("MINTING_CONTRACT_ADDRESS"),
            "private_key": os.getenv("MINTER_PRIVATE_KEY"),
            "pinata_api_key": os.getenv("PINATA_API_KEY"),
            "pinata_api_secret": os.getenv("PINATA_API_SECRET"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        description_file = os.getenv("LUCITE_DESCRIPTION_FILE")
        if description_file:
            values["description"] = Path(description_file).read_text(encoding="utf-8")
        values.update(overrides)
        return cls(**{k: v for k, v in values.items() if v is not None})

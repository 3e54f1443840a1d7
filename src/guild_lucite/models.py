from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from guild_lucite.constants import PIN_CID_VERSION


class InvestorRecord(BaseModel):
    """One validated row of the investor CSV."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token_id: str = Field(alias="tokenId")
    address: str
    image_cid: str = Field(alias="imageCid")
    animation_cid: str = Field(alias="animationCid")


class LuciteMetadata(BaseModel):
    """Token metadata document pinned to IPFS and referenced by tokenURI."""

    model_config = ConfigDict(frozen=True)

    attributes: List[Dict[str, str]]
    description: str
    image: str  # gateway URL of the still image
    background_color: str  # hex without leading "#"
    name: str
    animation_url: str  # gateway URL of the animation
    tokenId: int


class PinataMetadata(BaseModel):
    name: str


class PinataOptions(BaseModel):
    cidVersion: int = PIN_CID_VERSION


class PinOptions(BaseModel):
    """Pinata request options sent alongside the pinned content."""

    pinataMetadata: Optional[PinataMetadata] = None
    pinataOptions: PinataOptions = PinataOptions()


@dataclass
class PinResult:
    ipfs_hash: Optional[str] = None
    pin_size: Optional[int] = None
    timestamp: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.ipfs_hash)

    @classmethod
    def failed(cls, error: str) -> "PinResult":
        return cls(error=error)


class MintStatus(str, Enum):
    MINTED = "minted"
    SKIPPED = "skipped"


@dataclass
class MintOutcome:
    token_id: int
    address: str
    status: MintStatus
    token_uri: Optional[str] = None
    tx_hash: Optional[str] = None

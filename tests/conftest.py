from pathlib import Path

import pytest
from loguru import logger

from guild_lucite.exceptions import MintError
from guild_lucite.models import InvestorRecord, PinResult

DATA_DIR = Path(__file__).parent / "data"

INVESTOR_ADDRESS = "0x7cD5d32aA6531225b8aC02a06e06BB2cC589EED2"
SECOND_INVESTOR_ADDRESS = "0x1E5F187187A625A4EcdDb24cD54463742dD34024"
PINNED_CID = "bafkreiario54qi4fhjnuw2kd67wd2myyn5ihpjbdgbbmlf3xpmloto2c4i"


class FakePendingMint:
    def __init__(self, ledger: "FakeLuciteContract", recipient, token_id, token_uri):
        self._ledger = ledger
        self._mint = (recipient, token_id, token_uri)
        self.tx_hash = f"0x{token_id:064x}"

    async def wait(self, timeout=None):
        recipient, token_id, token_uri = self._mint
        self._ledger.owners[token_id] = recipient
        self._ledger.uris[token_id] = token_uri
        return {"status": 1}


class FakeLuciteContract:
    """In-memory stand-in for the deployed Lucite contract."""

    def __init__(self):
        self.owners = {}
        self.uris = {}
        self.submissions = []
        self.fail_on = set()
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    async def owner_of(self, token_id):
        return self.owners.get(token_id)

    async def token_uri(self, token_id):
        return self.uris[token_id]

    async def safe_mint(self, recipient, token_id, token_uri):
        if token_id in self.owners or token_id in self.fail_on:
            raise MintError(f"Mint of token {token_id} rejected", token_id=token_id)
        self.submissions.append((recipient, token_id, token_uri))
        return FakePendingMint(self, recipient, token_id, token_uri)


class FakePinner:
    def __init__(self, result: PinResult = None):
        self.result = result or PinResult(ipfs_hash=PINNED_CID)
        self.pinned = []

    async def pin_json(self, document, options=None):
        self.pinned.append((document, options))
        return self.result


@pytest.fixture
def ledger() -> FakeLuciteContract:
    return FakeLuciteContract()


@pytest.fixture
def pinner() -> FakePinner:
    return FakePinner()


@pytest.fixture
def investor() -> InvestorRecord:
    return InvestorRecord(
        tokenId="1",
        address=INVESTOR_ADDRESS,
        imageCid="Qmehv9WE1EpHMCVead1aRuEMzhBnDoQXZzYThtXhR1kyaH",
        animationCid="QmTKE8VTAcy2axUUC2hpuhsvPQZ2tySemeQwFByQ8AzUw3",
    )


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(str(m)), format="{message}")
    yield messages
    logger.remove(handler_id)

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Union

from loguru import logger

from guild_lucite.constants import DESCRIPTION
from guild_lucite.exceptions import PinningError
from guild_lucite.investors import read_investor_csv
from guild_lucite.ledger import LuciteContract
from guild_lucite.metadata import gateway_url, generate_investor_metadata, pin_options_for
from guild_lucite.models import InvestorRecord, MintOutcome, MintStatus
from guild_lucite.pinata import PinataClient

if TYPE_CHECKING:
    from guild_lucite.settings import Settings


class LuciteMinter:
    """
    Issues Lucites to investors one at a time.

    There is no local progress log: a token that already has an owner on
    chain is skipped, so re-running the same CSV after a failure resumes
    from the first unminted token.
    """

    def __init__(
        self,
        contract: LuciteContract,
        pinner: PinataClient,
        description: str = DESCRIPTION,
    ):
        self._contract = contract
        self._pinner = pinner
        self._description = description

    async def issue(self, investor: InvestorRecord) -> MintOutcome:
        """
        Mint the Lucite for a single investor unless it already exists.

        Raises:
            PinningError: If the metadata could not be pinned
            MintError: If the mint was rejected or reverted
        """
        token_id = int(investor.token_id)

        owner = await self._contract.owner_of(token_id)
        if owner is not None:
            logger.warning(
                f"⏩ Lucite Token {token_id} already assigned to investor at address "
                f"{owner}. Skipping to next investor."
            )
            return MintOutcome(token_id=token_id, address=owner, status=MintStatus.SKIPPED)
        logger.info(f"✅ Lucite Token {token_id} not yet assigned. Continuing...")

        metadata = generate_investor_metadata(investor, self._description)
        logger.info(f"🔧 Lucite Token {token_id} metadata generated")

        pinned = await self._pinner.pin_json(metadata, pin_options_for(token_id))
        if not pinned.ok:
            raise PinningError(token_id, pinned.error)
        logger.info(f"🚀 Lucite Token {token_id} metadata pinned to pinata.")

        token_uri = gateway_url(pinned.ipfs_hash)
        pending = await self._contract.safe_mint(investor.address, token_id, token_uri)
        logger.info(
            f"📦️ Lucite Token {token_id} minted ({pending.tx_hash}). "
            f"Waiting for block transaction..."
        )
        await pending.wait()
        logger.info(f"🚚 Lucite Token {token_id} delivered to {investor.address}!")

        return MintOutcome(
            token_id=token_id,
            address=investor.address,
            status=MintStatus.MINTED,
            token_uri=token_uri,
            tx_hash=pending.tx_hash,
        )

    async def issue_all(self, investors: Iterable[InvestorRecord]) -> List[MintOutcome]:
        """
        Mint Lucites for all investors strictly in order.

        Each investor is fully confirmed before the next one starts. The
        first failure stops the batch; tokens minted before it stay minted.

        Args:
            investors: Validated investor records

        Returns:
            One MintOutcome per investor
        """
        outcomes = []
        for investor in investors:
            outcomes.append(await self.issue(investor))
        minted = sum(1 for o in outcomes if o.status == MintStatus.MINTED)
        logger.info(f"Minted {minted} Lucites, skipped {len(outcomes) - minted}")
        return outcomes


async def mint_investor_tokens_from_csv(
    csv_path: Union[str, Path], settings: "Settings"
) -> List[MintOutcome]:
    """
    Read the investor CSV and mint every missing Lucite.

    The CSV is validated in full before anything is sent to the chain. The
    RPC and Pinata sessions are closed when the batch ends or fails.
    """
    investors = read_investor_csv(csv_path)
    async with LuciteContract(
        settings.rpc_url, settings.contract_address, settings.private_key
    ) as contract, PinataClient(
        settings.pinata_api_key, settings.pinata_api_secret
    ) as pinner:
        minter = LuciteMinter(contract, pinner, settings.description)
        return await minter.issue_all(investors)

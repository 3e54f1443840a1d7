"""Command line entry points for minting Lucites."""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from guild_lucite.exceptions import LuciteError
from guild_lucite.ledger import LuciteContract
from guild_lucite.minter import mint_investor_tokens_from_csv
from guild_lucite.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guild-lucite", description="Mint Guild Lucite tokens"
    )
    parser.add_argument("--env-file", help="Path to a .env file (default: ./.env)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    batch = subparsers.add_parser(
        "mint-from-csv", help="Mint Lucite tokens in batch from a CSV"
    )
    batch.add_argument("--csv", required=True, help="Path to the CSV file")
    batch.add_argument(
        "--contract",
        help="Address of the deployed contract. Defaults to MINTING_CONTRACT_ADDRESS",
    )

    single = subparsers.add_parser("mint", help="Mint a single Lucite token")
    single.add_argument("--recipient", required=True, help="Address of the recipient")
    single.add_argument(
        "--id", required=True, type=int, help="Token id, must not be already assigned"
    )
    single.add_argument(
        "--uri", required=True, help="URI of the metadata JSON for the token"
    )
    single.add_argument(
        "--contract",
        help="Address of the deployed contract. Defaults to MINTING_CONTRACT_ADDRESS",
    )
    return parser


async def _mint_single(settings: Settings, args: argparse.Namespace):
    async with LuciteContract(
        settings.rpc_url, settings.contract_address, settings.private_key
    ) as contract:
        pending = await contract.mint_lucite(args.recipient, args.id, args.uri)
        await pending.wait()
    logger.info(f"Lucite Token {args.id} delivered to {args.recipient}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env(args.env_file, contract_address=args.contract)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper())

    try:
        if args.command == "mint-from-csv":
            asyncio.run(mint_investor_tokens_from_csv(args.csv, settings))
        elif args.command == "mint":
            asyncio.run(_mint_single(settings, args))
    except LuciteError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

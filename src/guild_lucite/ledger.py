from typing import Optional, Union

from eth_account import Account as EthAccount
from loguru import logger
from web3 import AsyncWeb3, Web3
from web3.exceptions import ContractLogicError, Web3Exception

from guild_lucite.constants import LUCITE_ABI, TIMEOUT_WAIT_RECEIPT
from guild_lucite.exceptions import MintError


class PendingMint:
    """Handle on a submitted safeMint transaction."""

    def __init__(self, w3: AsyncWeb3, tx_hash: str, token_id: int):
        self._w3 = w3
        self.tx_hash = tx_hash
        self.token_id = token_id

    async def wait(self, timeout: float = TIMEOUT_WAIT_RECEIPT):
        """
        Wait until the transaction is mined.

        Args:
            timeout: Seconds to wait for the receipt

        Returns:
            Transaction receipt

        Raises:
            MintError: If the transaction reverted
            web3.exceptions.TimeExhausted: If no receipt arrived in time
        """
        receipt = await self._w3.eth.wait_for_transaction_receipt(
            self.tx_hash, timeout=timeout
        )
        if receipt["status"] != 1:
            raise MintError(
                f"Mint transaction {self.tx_hash} for token {self.token_id} reverted",
                token_id=self.token_id,
                tx_hash=self.tx_hash,
            )
        return receipt


class LuciteContract:
    """
    Client for the deployed GuildLuciteToken (ERC-721) contract.

    Only the contract owner can mint, so write methods need the owner's
    private key. Read methods work without one.
    """

    def __init__(
        self,
        rpc_addr: Union[str, AsyncWeb3],
        contract_address: str,
        private_key: Optional[str] = None,
    ):
        """
        Initialize contract client.

        Args:
            rpc_addr: JSON-RPC endpoint URL or a ready AsyncWeb3 instance
            contract_address: Address of the deployed Lucite contract
            private_key: Hex private key of the issuer (contract owner)
        """
        if isinstance(rpc_addr, AsyncWeb3):
            self._w3 = rpc_addr
        else:
            self._w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_addr))
        self.contract_address = Web3.to_checksum_address(contract_address)
        self._contract = self._w3.eth.contract(
            address=self.contract_address, abi=LUCITE_ABI
        )
        self._issuer = EthAccount.from_key(private_key) if private_key else None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.shutdown()

    async def shutdown(self):
        """Close the HTTP sessions opened by the web3 provider."""
        await self._w3.provider.disconnect()

    @property
    def issuer_address(self) -> Optional[str]:
        if self._issuer is None:
            return None
        return self._issuer.address

    async def owner_of(self, token_id: int) -> Optional[str]:
        """
        Get the current holder of a token.

        ERC-721 has no "token exists" call, ownerOf() reverts for tokens
        that were never minted. That revert is returned as None.

        Args:
            token_id: Token id to look up

        Returns:
            Checksummed owner address, or None if the token is unassigned
        """
        try:
            return await self._contract.functions.ownerOf(int(token_id)).call()
        except ContractLogicError:
            return None

    async def token_uri(self, token_id: int) -> str:
        return await self._contract.functions.tokenURI(int(token_id)).call()

    async def safe_mint(
        self, recipient: str, token_id: int, token_uri: str
    ) -> PendingMint:
        """
        Sign and submit a safeMint transaction from the issuer account.

        The nonce is taken from the issuer's pending transaction count, so
        callers must not have two submissions in flight at once.

        Args:
            recipient: Address receiving the token
            token_id: Token id to mint
            token_uri: URI of the token metadata

        Returns:
            PendingMint handle for the submitted transaction

        Raises:
            ValueError: If no private key is configured
            MintError: If the node rejects the transaction, e.g. the caller is
                not the contract owner or the token is already minted
        """
        if self._issuer is None:
            raise ValueError("You must provide a private key to mint tokens")
        token_id = int(token_id)
        try:
            nonce = await self._w3.eth.get_transaction_count(
                self._issuer.address, "pending"
            )
            tx = await self._contract.functions.safeMint(
                Web3.to_checksum_address(recipient), token_id, token_uri
            ).build_transaction({"from": self._issuer.address, "nonce": nonce})
            signed = self._issuer.sign_transaction(tx)
            tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        except (Web3Exception, ValueError) as e:
            raise MintError(
                f"Mint of token {token_id} to {recipient} rejected: {e}",
                token_id=token_id,
            ) from e
        return PendingMint(self._w3, Web3.to_hex(tx_hash), token_id)

    async def mint_lucite(
        self, recipient: str, token_id: int, token_uri: str
    ) -> PendingMint:
        """Mint a single Lucite with an already pinned token URI."""
        pending = await self.safe_mint(recipient, token_id, token_uri)
        logger.info(f"Mint transaction hash: {pending.tx_hash}")
        return pending

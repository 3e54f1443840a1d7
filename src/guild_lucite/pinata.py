import asyncio
import json
from typing import Optional, Union

import aiohttp
from loguru import logger
from pydantic import BaseModel

from guild_lucite.constants import PINATA_API_URL, TIMEOUT_WAIT_PINATA
from guild_lucite.models import PinOptions, PinResult


class PinataClient(object):
    """
    Async client for the Pinata pinning service.

    Pins JSON documents to IPFS so the metadata referenced by a tokenURI
    stays available. Errors are never raised from pin_json(), they come back
    as a failed PinResult.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        api_url: str = PINATA_API_URL,
        timeout=TIMEOUT_WAIT_PINATA,
    ):
        """
        Initialize Pinata client.

        Args:
            api_key: Pinata API key
            api_secret: Pinata API secret
            api_url: Base URL of the Pinata API
            timeout: Request timeout in seconds
        """
        self._api_url = api_url.rstrip("/")
        self._headers = {
            "pinata_api_key": api_key or "",
            "pinata_secret_api_key": api_secret or "",
        }
        self.timeout = timeout
        self._client: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.startup()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.shutdown()

    async def startup(self):
        self._client = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers=self._headers,
        )

    async def shutdown(self):
        if self._client and not self._client.closed:
            await self._client.close()

    async def _session(self) -> aiohttp.ClientSession:
        if not self._client or self._client.closed:
            await self.startup()
        return self._client

    async def test_authentication(self) -> bool:
        """
        Check the API key pair against Pinata.

        Returns:
            True if Pinata accepted the credentials
        """
        client = await self._session()
        async with client.get(f"{self._api_url}/data/testAuthentication") as r:
            return r.status == 200

    async def pin_json(
        self, document: Union[BaseModel, dict], options: Optional[PinOptions] = None
    ) -> PinResult:
        """
        Pin a JSON document to IPFS.

        Args:
            document: Metadata document (pydantic model or plain dict)
            options: Pinata metadata and options, CID version 1 by default

        Returns:
            PinResult carrying the IPFS hash, or the error if pinning failed
        """
        if isinstance(document, BaseModel):
            document = document.model_dump()
        options = options or PinOptions()
        body = {"pinataContent": document}
        body.update(options.model_dump(exclude_none=True))

        try:
            client = await self._session()
            async with client.post(
                f"{self._api_url}/pinning/pinJSONToIPFS", json=body
            ) as r:
                text = await r.text()
                if r.status != 200:
                    logger.error(f"Pinata error {r.status}: {text}")
                    return PinResult.failed(f"Status: {r.status}, {text}")
                data = json.loads(text)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Pinata request failed: {e!r}")
            return PinResult.failed(repr(e))

        if not isinstance(data, dict) or not data.get("IpfsHash"):
            logger.error(f"Pinata returned no IpfsHash: {data}")
            return PinResult.failed(f"No IpfsHash in response: {data}")
        return PinResult(
            ipfs_hash=data["IpfsHash"],
            pin_size=data.get("PinSize"),
            timestamp=data.get("Timestamp"),
        )

import re

from web3 import Web3

_HEX_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")


def is_ethereum_address(value) -> bool:
    """
    Check an Ethereum address the way web3.js isAddress() does.

    An all-lowercase or all-uppercase hex address is accepted as is, a
    mixed-case one must carry a valid EIP-55 checksum.
    """
    if not isinstance(value, str) or not _HEX_ADDRESS_RE.fullmatch(value):
        return False
    body = value[2:]
    if body == body.lower() or body == body.upper():
        return True
    return Web3.is_checksum_address(value)

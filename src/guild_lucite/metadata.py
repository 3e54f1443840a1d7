from guild_lucite.constants import (
    BACKGROUND_COLOR,
    DESCRIPTION,
    IPFS_GATEWAY_URL,
    PIN_NAME_PREFIX,
    ROUND_ATTRIBUTE,
    TOKEN_NAME_PREFIX,
)
from guild_lucite.models import InvestorRecord, LuciteMetadata, PinataMetadata, PinOptions


def gateway_url(cid: str) -> str:
    return f"{IPFS_GATEWAY_URL}{cid}"


def generate_investor_metadata(
    investor: InvestorRecord, description: str = DESCRIPTION
) -> LuciteMetadata:
    """
    Build the metadata document for an investor's Lucite.

    Args:
        investor: Validated CSV record, token_id must be a decimal integer
        description: Long-form description shared by every token

    Returns:
        LuciteMetadata with media links pointing at the IPFS gateway
    """
    return LuciteMetadata(
        attributes=[dict(ROUND_ATTRIBUTE)],
        description=description,
        image=gateway_url(investor.image_cid),
        background_color=BACKGROUND_COLOR,
        name=f"{TOKEN_NAME_PREFIX}{investor.token_id}",
        animation_url=gateway_url(investor.animation_cid),
        tokenId=int(investor.token_id, 10),
    )


def pin_options_for(token_id) -> PinOptions:
    """Pinata options labelling the pin for the dashboard, e.g. PreSeed42."""
    return PinOptions(pinataMetadata=PinataMetadata(name=f"{PIN_NAME_PREFIX}{token_id}"))

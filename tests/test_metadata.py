from guild_lucite.constants import DESCRIPTION
from guild_lucite.metadata import generate_investor_metadata, pin_options_for
from guild_lucite.models import InvestorRecord

from .conftest import SECOND_INVESTOR_ADDRESS


def test_generate_investor_metadata(investor):
    metadata = generate_investor_metadata(investor)

    assert metadata.model_dump() == {
        "attributes": [{"trait_type": "Round", "value": "Pre-Seed"}],
        "description": DESCRIPTION,
        "image": "https://ipfs.io/ipfs/Qmehv9WE1EpHMCVead1aRuEMzhBnDoQXZzYThtXhR1kyaH",
        "animation_url": "https://ipfs.io/ipfs/QmTKE8VTAcy2axUUC2hpuhsvPQZ2tySemeQwFByQ8AzUw3",
        "background_color": "5632E4",
        "name": "Guild Lucite #1",
        "tokenId": 1,
    }


def test_generate_investor_metadata_is_deterministic(investor):
    first = generate_investor_metadata(investor)
    second = generate_investor_metadata(investor)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_metadata_differs_only_in_token_fields(investor):
    other = InvestorRecord(
        tokenId="2",
        address=SECOND_INVESTOR_ADDRESS,
        imageCid="QmeTkDQ18hpqU6CKFZbHK7zL1steqdoMfqoasF2QUPU5g4",
        animationCid="QmdgWKBNYn9q1HU8wiRv1NYxkJEFMRsUaDwNHMH1DqYgEM",
    )

    a = generate_investor_metadata(investor).model_dump()
    b = generate_investor_metadata(other).model_dump()

    changed = {k for k in a if a[k] != b[k]}
    assert changed == {"tokenId", "name", "image", "animation_url"}


def test_description_is_configurable(investor):
    metadata = generate_investor_metadata(investor, description="Thanks!")

    assert metadata.description == "Thanks!"


def test_pin_options_for():
    options = pin_options_for(7357)

    assert options.model_dump(exclude_none=True) == {
        "pinataMetadata": {"name": "PreSeed7357"},
        "pinataOptions": {"cidVersion": 1},
    }

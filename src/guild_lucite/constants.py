"""Constants for Guild Lucite issuance."""

IPFS_GATEWAY_URL = "https://ipfs.io/ipfs/"

PINATA_API_URL = "https://api.pinata.cloud"

# Pinata dashboard label prefix, e.g. "PreSeed42"
PIN_NAME_PREFIX = "PreSeed"
PIN_CID_VERSION = 1

TOKEN_NAME_PREFIX = "Guild Lucite #"
BACKGROUND_COLOR = "5632E4"
ROUND_ATTRIBUTE = {"trait_type": "Round", "value": "Pre-Seed"}

CSV_COLUMNS = ("tokenId", "address", "imageCid", "animationCid")

TIMEOUT_WAIT_PINATA = 60
TIMEOUT_WAIT_RECEIPT = 120

DESCRIPTION = """Thank you for being part of our journey with Guild!

This Lucite Deal Gift digitally commemorates our journey together. It's a modernization on the old concept of Lucite Deal Gifts, often found within the boardrooms of companies as a trophy of a past deal. At Guild, we're reimagining old dynamics and changing the narrative for the better - in order to elevate communities across geographies. The re-imagination of this old Lucite concept into something new is representative of our exploration of pushing boundaries in ways that are both innovative and relevant. We will continue to seek new opportunities to benefit communities and the people within them.

The artwork was created by digital artist Fabricio Rosa Marques. It is inspired by a "school of fish, as eggs" to represent the knowledge-transfer aspect of communities on Guild as well as the infancy of participation within the Pre-Seed round. Fabricio used various techniques to capture that inspiration within the motion and refraction of this piece.

Marcel Cutts worked on the smart contract itself. He explored various technologies before settling on the Ethereum blockchain and tooling to best accommodate the non-transferability characteristic of this NFT. Being able to restrict transfers on the ERC721 spec where transference is built-in required innovative structuring of various aspects of the delivery of this piece.

This Lucite Deal Gift is issued specifically to wallets associated with authorized individuals. Holders of this Lucite Deal Gift are unable to transfer it to an address other than that associated with the guildhost.eth ENS address. Any transfer from that Guild-controlled address onwards would require an appropriate reason to be provided (e.g. changing of wallet addresses for the same individual). This Lucite Deal Gift is nothing more than a commemorative gift in recognition of a past deal. It is not a security as it is not an asset (it holds no value) and is not tradeable."""

# ERC-721 fragment of the GuildLuciteToken contract used by the minter
LUCITE_ABI = [
    {
        "inputs": [{"internalType": "uint256", "name": "tokenId", "type": "uint256"}],
        "name": "ownerOf",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "tokenId", "type": "uint256"}],
        "name": "tokenURI",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            {"internalType": "string", "name": "uri", "type": "string"},
        ],
        "name": "safeMint",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

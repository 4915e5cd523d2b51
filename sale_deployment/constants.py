from datetime import datetime, timezone

#
# Networks
#

DEVELOPMENT = "development"
SEPOLIA = "sepolia"
MAINNET = "mainnet"

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]

#
# Contracts
#

TOKEN_CONTRACT = "CHIPToken"
SALE_CONTRACT = "CHIPSale"

#
# Sale
#

RATE = 10000
SALE_DURATION = 30 * 24 * 60 * 60  # 30 days

# Fixed mainnet sale window
MAINNET_SALE_START = datetime(2018, 4, 1, tzinfo=timezone.utc)
MAINNET_SALE_END = datetime(2099, 1, 1, tzinfo=timezone.utc)

# accounts[1] of the default test mnemonic
DEVELOPMENT_ADMIN = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

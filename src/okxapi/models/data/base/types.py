from typing_extensions import Literal


# ================================================================================
# ====== V5 INSTRUMENTS
# ================================================================================


INSTTYPE = Literal[
    "SPOT",
    "MARGIN",
    "SWAP",
    "FUTURES",
    "OPTION",
]

# instruments that have an underlying (uly)
DERIVATIVE_INSTTYPE = Literal[
    "SWAP",
    "FUTURES",
    "OPTION",
]

# market tickers
TICKER_INSTTYPE = Literal[
    "SPOT",
    "SWAP",
    "FUTURES",
    "OPTION",
]

# account positions
POSITION_INSTTYPE = Literal[
    "MARGIN",
    "SWAP",
    "FUTURES",
    "OPTION",
]

# algo orders
ALGO_INSTTYPE = Literal[
    "SPOT",
    "SWAP",
    "FUTURES",
    "MARGIN",
]

DELIVERY_INSTTYPE = Literal[
    "FUTURES",
    "OPTION",
]


# ================================================================================
# ====== V5 ORDERS
# ================================================================================


ORDERTYPE = Literal[
    "market",
    "limit",
    "post_only",
    "fok",
    "ioc",
    "optimal_limit_ioc",
]

PENDING_ORDERSTATE = Literal[
    "live",
    "partially_filled",
]

HISTORY_ORDERSTATE = Literal[
    "canceled",
    "filled",
]

ORDERCATEGORY = Literal[
    "twap",
    "adl",
    "full_liquidation",
    "partial_liquidation",
    "delivery",
    "ddh",
]

ALGO_ORDERTYPE = Literal[
    "conditional",
    "oco",
    "trigger",
    "move_order_stop",
    "iceberg",
    "twap",
]

ALGO_ORDERSTATE = Literal[
    "effective",
    "canceled",
    "order_failed",
]


# ================================================================================
# ====== V5 ACCOUNT
# ================================================================================


MARGINMODE = Literal[
    "isolated",
    "cross",
]

CONTRACTTYPE = Literal[
    "linear",
    "inverse",
]

ACCOUNT_BILLTYPE = Literal[
    1,   # Transfer
    2,   # Trade
    3,   # Delivery
    4,   # Auto token conversion
    5,   # Liquidation
    6,   # Margin transfer
    7,   # Interest deduction
    8,   # Funding fee
    9,   # ADL
    10,  # Clawback
    11,  # System token conversion
    12,  # Strategy transfer
    13,  # ddh
]

ACCOUNT_BILLSUBTYPE = Literal[
    1,   # Buy
    2,   # Sell
    3,   # Open long
    4,   # Open short
    5,   # Close long
    6,   # Close short
    9,   # Interest deduction for Market loans
    11,  # Transfer in
    12,  # Transfer out
    14,  # Interest deduction for VIP loans
    100, # Partial liquidation close long
    101, # Partial liquidation close short
    102, # Partial liquidation buy
    103, # Partial liquidation sell
    104, # Liquidation long
    105, # Liquidation short
    106, # Liquidation buy
    107, # Liquidation sell
    110, # Auto buy / Liquidation transfer in
    111, # Auto sell / Liquidation transfer out
    112, # Delivery long
    113, # Delivery short
    117, # Delivery/Exercise clawback
    118, # System token conversion transfer in
    119, # System token conversion transfer out
    125, # ADL close long
    126, # ADL close short
    127, # ADL buy
    128, # ADL sell
    131, # ddh buy
    132, # ddh sell
    160, # Manual margin increase
    161, # Manual margin decrease
    162, # Auto margin increase
    170, # Exercised
    171, # Counterparty exercised
    172, # Expired OTM
    173, # Funding fee expense
    174, # Funding fee income
    200, # System transfer in
    201, # Manually transfer in
    202, # System transfer out
    203, # Manually transfer out
]


# ================================================================================
# ====== V5 FUNDING
# ================================================================================


ASSET_BILLTYPE = Literal[
    1, 2, 13, 18, 19, 20, 21, 28, 33, 34, 37, 38, 41, 42, 47, 48, 49,
    50, 51, 52, 53, 54, 55, 56, 59, 60, 61, 62, 63, 68, 69,
    72, 73, 74, 75, 76, 77, 78, 79, 80, 81, 82, 83, 84, 85, 86, 87, 88, 89,
    90, 91, 92, 93, 94, 95, 96, 97, 98, 99,
    102, 103, 104, 105, 106, 107, 108, 109, 110, 111, 112, 113, 114, 115,
    116, 117, 118, 119, 120, 121, 122, 123, 124, 125, 126, 127, 128, 129,
    130, 131, 150, 151,
]

# 0: within account, 1: master to sub-account, 2: sub-account to master
TRANSFERTYPE = Literal[0, 1, 2]

# 0: waiting for confirmation, 1: deposit credited, 2: deposit successful
DEPOSITSTATE = Literal[0, 1, 2]

# -3: pending cancel, -2: canceled, -1: failed, 0: pending, 1: sending, 2: sent,
# 3: awaiting email verification, 4: awaiting manual verification, 5: awaiting identity verification
WITHDRAWALSTATE = Literal[-3, -2, -1, 0, 1, 2, 3, 4, 5]

# 6: funding account (default), 1: spot account
LIGHTNING_ACCOUNT = Literal[6, 1]

SUBACCOUNT_ENABLE = Literal["true", "false"]


# ================================================================================
# ====== V3
# ================================================================================


# -2: Failed, -1: Canceled, 0: Open, 1: Partially Filled, 2: Fully Filled,
# 3: Submitting, 4: Canceling, 6: Incomplete (open + partially filled), 7: Complete (canceled + fully filled)
V3_ORDERSTATE = Literal["-2", "-1", "0", "1", "2", "3", "4", "6", "7"]

# 1: Pending, 2: Effective, 3: Cancelled, 4: Partially effective, 5: Paused, 6: Order failed
V3_ALGOSTATUS = Literal["1", "2", "3", "4", "5", "6"]

# Fee Schedule Tier
V3_FEECATEGORY = Literal["1", "2", "4"]

# 0: outstanding, 1: repaid
V3_LOANSTATUS = Literal["0", "1"]

# 0: Total account assets, 1: spot, 3: futures, 5: margin, 6: Funding Account, 9: swap,
# 12: option, 14: mining account, 15: USDT-margined futures, 16: USDT-margined perpetual swap
V3_ACCOUNTTYPE = Literal["0", "1", "3", "5", "6", "9", "12", "14", "15", "16"]

V3_VALUATION_CURRENCY = Literal["BTC", "USD", "CNY", "JPY", "KRW", "RUB"]

V3_SPOT_BILLTYPE = Literal[
    "1", "2", "7", "8", "18", "19", "20", "21", "22", "25", "26", "29", "30", "31",
    "32", "33", "34", "35", "36", "37", "39", "40", "41", "42", "43", "44", "46",
    "47", "48", "49", "50", "51", "52", "53", "54", "55", "56", "57", "58", "59",
    "60", "61", "62", "63", "64", "65", "66", "67",
]

V3_FUNDING_BILLTYPE = Literal[
    "1", "2", "13", "18", "19", "20", "21", "28", "29", "30", "31", "32", "33",
    "34", "37", "38", "41", "42", "43", "44", "47", "48", "49", "50", "51", "52",
    "53", "54", "55", "56", "57", "58", "59", "60", "61", "62", "63", "66", "67",
    "68", "69", "70", "71",
]

V3_SWAP_BILLTYPE = Literal[
    "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "14", "15", "16",
    "17", "18", "19", "20", "21", "22",
]

V3_MARGIN_BILLTYPE = Literal[
    "3", "4", "5", "7", "8", "9", "10", "12", "14", "15", "16", "19", "24", "59",
    "61", "62",
]

"""Gates - индивидуальные гейты Gatekeeper системы.

- GATE 0: Sale Phase
- GATE 1: Eligibility (owner / whitelist)
- GATE 2: Request Size / Bulk Limit
- GATE 3: Wallet Quota
- GATE 4: Supply Capacity
- GATE 5: Payment Amount
"""

from .gate_00_sale_phase import Gate00SalePhase, Gate00Result
from .gate_01_eligibility import Gate01Eligibility, Gate01Result
from .gate_02_bulk_limit import Gate02BulkLimit, Gate02Result
from .gate_03_wallet_quota import Gate03WalletQuota, Gate03Result, QuotaKind
from .gate_04_supply_capacity import Gate04SupplyCapacity, Gate04Result
from .gate_05_payment import Gate05Payment, Gate05Result

__all__ = [
    "Gate00SalePhase",
    "Gate00Result",
    "Gate01Eligibility",
    "Gate01Result",
    "Gate02BulkLimit",
    "Gate02Result",
    "Gate03WalletQuota",
    "Gate03Result",
    "QuotaKind",
    "Gate04SupplyCapacity",
    "Gate04Result",
    "Gate05Payment",
    "Gate05Result",
]

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

CURRENCY_QUANTUM = Decimal("0.01")
HOURS_QUANTUM = Decimal("0.01")

OVERTIME_MULTIPLIER = Decimal("1.5")

# Flat-percentage statutory contributions (employee share, simplified).
SSS_RATE = Decimal("0.045")
PHILHEALTH_RATE = Decimal("0.045")
PAG_IBIG_RATE = Decimal("0.02")
PAG_IBIG_CAP = Decimal("100")

MAX_DAILY_HOURS = Decimal("24")
MAX_SALARY_RATE = Decimal("99999999.99")

DEFAULT_LIST_LIMIT = 500

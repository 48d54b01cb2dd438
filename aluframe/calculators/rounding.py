"""
Market-unit rounding for aluminium sections.

Suppliers bill partial feet in two tiers rather than continuously:
up to 6" over a whole foot bills as +0.6 ft, anything longer as a full foot.
"""

import math

HALF_TIER_FT = 0.6
FULL_TIER_FT = 1.0
HALF_TIER_LIMIT_IN = 6.0


def round_to_market_feet(inches: float, exact_foot: bool = False) -> float:
    """
    Convert a length in inches to billable feet.

    Exactly 6" of remainder stays in the lower tier (18" → 1.6 ft, not 2.0).
    With exact_foot=True a length that lands on a whole foot is billed
    as-is (24" → 2.0 ft); without it the lower tier still applies (24" → 2.6 ft).
    """
    ft = inches / 12.0
    whole = math.floor(ft)

    if exact_foot and ft == whole:
        return ft

    remainder_in = (ft - whole) * 12
    if remainder_in <= HALF_TIER_LIMIT_IN:
        return whole + HALF_TIER_FT
    return whole + FULL_TIER_FT

"""
Collar-type formula tables.

Each table maps collar type → list of (role, Formula). These encode shop
fabrication geometry: the small constants (+3, +6, +9, +12) are joint and
overlap allowances in inches. A collar type missing from a table produces
no collar rows.
"""

from .sections import Formula as F

# Sliding panel windows (three/two panel, 3-glass-part variants).
# Roles: 30F/30C = 30-series frame/coupled, 26F/26C = 26-series frame/coupled.
PANEL_COLLAR_TABLE = {
    1:  [("30F", F(h=2, w=1, c=9)), ("26F", F(w=1, c=3))],
    2:  [("30C", F(h=2, w=1)), ("26C", F(w=1))],
    3:  [("30C", F(w=1)), ("30F", F(h=2, c=6)), ("26F", F(w=1, c=3))],
    4:  [("30C", F(h=1)), ("30F", F(h=1, w=1, c=6)), ("26F", F(w=1, c=3))],
    5:  [("30F", F(h=2, w=1, c=9)), ("26C", F(w=1))],
    6:  [("30C", F(h=1)), ("30F", F(h=1, w=1, c=6)), ("26F", F(w=1, c=3))],
    7:  [("30C", F(h=1, w=1)), ("30F", F(h=1, c=3)), ("26F", F(w=1, c=3))],
    8:  [("30C", F(h=1)), ("30F", F(h=1, w=1, c=6)), ("26C", F(w=1))],
    9:  [("30C", F(h=2)), ("30F", F(w=1, c=3)), ("26F", F(w=1, c=3))],
    10: [("30C", F(w=1)), ("30F", F(h=2, c=6)), ("26C", F(w=1))],
    11: [("30C", F(h=2)), ("30F", F(w=1, c=3)), ("26C", F(w=1))],
    12: [("30C", F(h=1, w=1)), ("30F", F(h=1, c=3)), ("26C", F(w=1))],
    13: [("30C", F(h=2, w=1)), ("26F", F(w=1, c=3))],
    14: [("30C", F(h=1, w=1)), ("30F", F(h=1, c=3)), ("26F", F(w=1))],
}

# Fixed and openable windows. Roles: F = D54F (collar), A = D54A (plain).
OPENING_COLLAR_TABLE = {
    1:  [("F", F(h=2, w=2, c=12))],
    2:  [("A", F(h=2, w=2))],
    3:  [("F", F(h=2, w=1, c=9)), ("A", F(w=1))],
    4:  [("F", F(h=1, w=2, c=9)), ("A", F(h=1))],
    5:  [("F", F(h=2, w=1, c=9)), ("A", F(w=1))],
    6:  [("F", F(h=1, w=2, c=9)), ("A", F(h=1))],
    7:  [("F", F(h=1, w=1, c=6)), ("A", F(h=1, w=1))],
    8:  [("F", F(h=1, w=1, c=6)), ("A", F(h=1, w=1))],
    9:  [("F", F(h=2, c=6)), ("A", F(w=2))],
    10: [("F", F(w=2, c=6)), ("A", F(h=2))],
    11: [("F", F(w=1, c=3)), ("A", F(h=2, w=1))],
    12: [("F", F(h=3)), ("A", F(h=1, w=2))],
    13: [("F", F(w=1, c=3)), ("A", F(h=2, w=1))],
    14: [("F", F(h=1, c=3)), ("A", F(h=1, w=2))],
}

# Single and double doors. Roles map to D54F / D54A.
DOOR_COLLAR_TABLE = {
    1: [("F", F(h=2, w=1, c=9))],
    2: [("A", F(h=2, w=1))],
    3: [("F", F(h=1, w=1, c=6)), ("A", F(h=1))],
    4: [("F", F(h=2, c=6)), ("A", F(w=1))],
    5: [("F", F(h=1, w=1, c=6)), ("A", F(h=1))],
    6: [("F", F(h=1, c=3)), ("A", F(h=1, w=1))],
    7: [("F", F(h=1, c=3)), ("A", F(h=1, w=1))],
    8: [("F", F(w=1, c=3)), ("A", F(h=2))],
}

# Quadrant (4-corner) arch windows. Roles map to D50F / D50A.
QUADRANT_ARCH_COLLAR_TABLE = {
    1: [("F", F(h=2, w=1, c=9)), ("A", F(w=1))],
    2: [("A", F(h=2, w=2))],
    3: [("F", F(h=1, w=1, c=6)), ("A", F(h=1, w=1))],
    4: [("F", F(h=2, c=6)), ("A", F(w=2))],
    5: [("F", F(h=1, w=1, c=6)), ("A", F(w=1))],
    6: [("F", F(w=1, c=3)), ("A", F(h=3, w=1))],
    7: [("F", F(h=1, c=3)), ("A", F(h=1, w=2))],
    8: [("F", F(h=1, c=3)), ("A", F(h=1, w=2))],
}


def collar_rows(table: dict, collar_type: int) -> list:
    """Rows for a collar type; unknown types fall back to no rows."""
    return table.get(collar_type, [])

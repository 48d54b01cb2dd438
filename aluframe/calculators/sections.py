"""
Section codes and linear length formulas.

Every collar-table row is a Formula: h × height + w × width + c (inches).
Rows name a role ("30F", "26C", "F", "A"...) rather than a section code so the
same table can serve DC-series and M-series naming.
"""

import enum
from typing import NamedTuple


class SectionCode(str, enum.Enum):
    # Sliding panel frame (DC series)
    DC30F = "DC30F"
    DC30C = "DC30C"
    DC30A = "DC30A"
    DC26F = "DC26F"
    DC26C = "DC26C"
    DC26A = "DC26A"
    # Sliding panel frame (M series)
    M30 = "M30"
    M30F = "M30F"
    M30C = "M30C"
    M30A = "M30A"
    M26 = "M26"
    M26F = "M26F"
    M26C = "M26C"
    M26A = "M26A"
    # Sash members
    M23 = "M23"
    M24 = "M24"
    M28 = "M28"
    # Net / screen
    D29 = "D29"
    # Door, fixed and casement profiles
    D40 = "D40"
    D41 = "D41"
    D46 = "D46"
    D50 = "D50"
    D50F = "D50F"
    D50A = "D50A"
    D52 = "D52"
    D54 = "D54"
    D54F = "D54F"
    D54A = "D54A"


class Formula(NamedTuple):
    """Length in inches as h × height + w × width + c."""
    h: float = 0
    w: float = 0
    c: float = 0

    def evaluate(self, height: float, width: float) -> float:
        return self.h * height + self.w * width + self.c


# --- Role → section code maps ---

PANEL_DC_NAMES = {
    "30F": SectionCode.DC30F,
    "30C": SectionCode.DC30C,
    "26F": SectionCode.DC26F,
    "26C": SectionCode.DC26C,
}

# Coupled members drop the "C" suffix in the M series for plain panel windows
PANEL_M_SERIES_NAMES = {
    "30F": SectionCode.M30F,
    "30C": SectionCode.M30,
    "26F": SectionCode.M26F,
    "26C": SectionCode.M26,
}

D54_NAMES = {"F": SectionCode.D54F, "A": SectionCode.D54A}

D50_NAMES = {"F": SectionCode.D50F, "A": SectionCode.D50A}


def prefixed_names(prefix30: str, prefix26: str) -> dict:
    """Role map built by suffixing F/C onto the 30 and 26 series prefixes."""
    return {
        "30F": SectionCode(prefix30 + "F"),
        "30C": SectionCode(prefix30 + "C"),
        "26F": SectionCode(prefix26 + "F"),
        "26C": SectionCode(prefix26 + "C"),
    }


def evaluate_rows(rows, names: dict, height: float, width: float) -> dict:
    """Evaluate (role, Formula) rows into {section code: inches}."""
    return {
        names[role].value: formula.evaluate(height, width)
        for role, formula in rows
    }

"""
Corner window calculators — two panes meeting at a corner post.

FixCornerWindow — fixed glazing on both sides, one continuous D54 frame.
SlideCornerWindow — sliding sashes on one or both sides (5 layouts);
30/26-series frame with F (collar) or A (plain) suffix, sash members,
and a D29 net track sized by which panes slide.

Area sums both widths: height × (left + right).
"""

from typing import NamedTuple, Optional

from pydantic import Field

from ..exceptions import InvalidInputError
from .base import BaseFrameCalculator, FrameInputs, TeeInputs
from .sections import SectionCode

# Collar allowances on the full-perimeter frame members
FIX_CORNER_COLLAR_IN = 18
SLIDE_CORNER_COLLAR_30_IN = 12.0
SLIDE_CORNER_COLLAR_26_IN = 6.0


class CornerFormula(NamedTuple):
    """Length as h × height + wl × left + wr × right + n × d29 width."""
    h: float = 0
    wl: float = 0
    wr: float = 0
    n: float = 0

    def evaluate(self, height: float, left: float, right: float, d29_width: float = 0.0) -> float:
        return self.h * height + self.wl * left + self.wr * right + self.n * d29_width


# subtype → (label, 30-series member, D29 net track)
SLIDE_CORNER_SUBTYPES = {
    1: ("Left Side Fix",    CornerFormula(h=2, wl=2, wr=2), CornerFormula(h=2, wr=1)),
    2: ("Right Side Fix",   CornerFormula(h=2, wl=2, wr=2), CornerFormula(h=2, wl=1)),
    3: ("Center Fix",       CornerFormula(h=2, wl=1, wr=1), CornerFormula(h=4, wl=1, wr=1)),
    4: ("Center Fix (Far)", CornerFormula(h=2, wl=1, wr=1), CornerFormula(h=4, n=4)),
    5: ("Center Slide",     CornerFormula(h=2, wl=1, wr=1), CornerFormula(h=4, wl=1, wr=1)),
}


class CornerInputs(FrameInputs):
    height: float = Field(gt=0)
    left_width: float = Field(gt=0)
    right_width: float = Field(gt=0)
    has_collar: bool = False


class FixCornerInputs(CornerInputs, TeeInputs):
    pass


class SlideCornerInputs(CornerInputs):
    subtype: int = Field(default=1, ge=1, le=5)
    has_collar: bool = True
    d29_width: Optional[float] = Field(default=None, gt=0)


class _CornerCalculator(BaseFrameCalculator):

    def compute_area(self, inputs) -> float:
        return self.sq_ft_from_dimensions(inputs.height, inputs.left_width + inputs.right_width)


class FixCornerWindow(_CornerCalculator):

    shape = "fix_corner_window"
    Inputs = FixCornerInputs

    def label_for(self, inputs) -> str:
        return "Fix Corner Window"

    def compute_sections(self, inputs) -> dict:
        h = inputs.height
        run = (h * 2) + ((inputs.left_width + inputs.right_width) * 2)
        sections = {}

        if inputs.has_collar:
            sections[SectionCode.D54F.value] = run + FIX_CORNER_COLLAR_IN
        else:
            sections[SectionCode.D54A.value] = run

        if inputs.include_tee:
            sections[SectionCode.D40.value] = inputs.tee
            sections[SectionCode.D41.value] = run + (inputs.tee * 2)
        else:
            sections[SectionCode.D41.value] = run

        return sections


class SlideCornerWindow(_CornerCalculator):

    shape = "slide_corner_window"
    Inputs = SlideCornerInputs

    def __init__(self, include_d29: bool = True, prefix30: str = "DC30", prefix26: str = "DC26"):
        super().__init__()
        self.include_d29 = include_d29
        self.prefix30 = prefix30
        self.prefix26 = prefix26

    def check_inputs(self, inputs) -> None:
        if self.include_d29 and inputs.subtype == 4 and inputs.d29_width is None:
            raise InvalidInputError(
                f"Invalid input for {self.shape}",
                details=[{"field": "d29_width",
                          "message": "d29_width is required for the center fix (far) layout"}],
            )

    def label_for(self, inputs) -> str:
        label = SLIDE_CORNER_SUBTYPES[inputs.subtype][0]
        return "Slide Corner Window - %s" % label

    def compute_sections(self, inputs) -> dict:
        h, wl, wr = inputs.height, inputs.left_width, inputs.right_width
        suffix = "F" if inputs.has_collar else "A"
        c30 = SLIDE_CORNER_COLLAR_30_IN if inputs.has_collar else 0.0
        c26 = SLIDE_CORNER_COLLAR_26_IN if inputs.has_collar else 0.0
        sections = {}

        _, frame30, net = SLIDE_CORNER_SUBTYPES[inputs.subtype]
        sections[SectionCode(self.prefix30 + suffix).value] = frame30.evaluate(h, wl, wr) + c30
        sections[SectionCode(self.prefix26 + suffix).value] = wl + wr + c26
        if self.include_d29:
            sections[SectionCode.D29.value] = net.evaluate(h, wl, wr, inputs.d29_width or 0.0)

        sections[SectionCode.M23.value] = h * (4 if inputs.subtype == 5 else 2)
        sections[SectionCode.M28.value] = h * (2 if inputs.subtype in (1, 2) else 4)
        sections[SectionCode.M24.value] = (wl + wr) * 2

        return sections

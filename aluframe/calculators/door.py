"""
Single and double door calculator.

D54 frame by collar type (1-8). The D50 leaf frame runs the full perimeter
of each leaf; with a D46 bottom rail the leaf bottom is cut from D46
instead, so only one width of D50 is needed.
"""

from pydantic import Field

from .base import BaseFrameCalculator, HeightWidthInputs, TeeInputs
from .collar_tables import DOOR_COLLAR_TABLE, collar_rows
from .sections import D54_NAMES, SectionCode, evaluate_rows


class DoorInputs(HeightWidthInputs, TeeInputs):
    collar_type: int = Field(ge=1, le=8)
    include_d46: bool = False


class DoorWindow(BaseFrameCalculator):

    shape = "door"
    Inputs = DoorInputs
    collar_range = (1, 8)

    def __init__(self, is_double: bool = False):
        super().__init__()
        self.is_double = is_double

    def label_for(self, inputs) -> str:
        return "Double Door" if self.is_double else "Single Door"

    def compute_sections(self, inputs) -> dict:
        h, w = inputs.height, inputs.width

        sections = evaluate_rows(collar_rows(DOOR_COLLAR_TABLE, inputs.collar_type), D54_NAMES, h, w)

        if inputs.include_d46:
            sections[SectionCode.D46.value] = w
            sections[SectionCode.D50.value] = (h * 4) + w if self.is_double else (h * 2) + w
        else:
            sections[SectionCode.D50.value] = (h * 4) + (w * 2) if self.is_double else (h + w) * 2

        if inputs.include_tee:
            sections[SectionCode.D52.value] = inputs.tee

        return sections

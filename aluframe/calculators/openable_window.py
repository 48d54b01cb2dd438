"""
Openable (casement) window calculator.

D54 outer frame by collar type, D50 sash around the full perimeter,
plus a D29 net frame of the same perimeter when a net is fitted.
"""

from pydantic import Field

from .base import BaseFrameCalculator, HeightWidthInputs
from .collar_tables import OPENING_COLLAR_TABLE, collar_rows
from .sections import D54_NAMES, SectionCode, evaluate_rows


class OpenableWindowInputs(HeightWidthInputs):
    collar_type: int = Field(ge=1, le=14)
    has_net: bool = False


class OpenableWindow(BaseFrameCalculator):

    shape = "openable_window"
    Inputs = OpenableWindowInputs
    collar_range = (1, 14)

    def label_for(self, inputs) -> str:
        return "Openable Window (%s)" % ("with Net" if inputs.has_net else "without Net")

    def compute_sections(self, inputs) -> dict:
        h, w = inputs.height, inputs.width

        sections = evaluate_rows(collar_rows(OPENING_COLLAR_TABLE, inputs.collar_type), D54_NAMES, h, w)

        sections[SectionCode.D50.value] = (h + w) * 2
        if inputs.has_net:
            sections[SectionCode.D29.value] = (h + w) * 2

        return sections

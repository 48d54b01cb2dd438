"""
Arch window calculators.

QuadrantArchWindow — 4-corner (quadrant) arch, D50 frame by collar type 1-8.
RoundArchWindow — round top arch priced on the arch length plus width;
height is only used for the glass/labor area.

Both carry a D41 bead with an optional D40 tee.
"""

from pydantic import Field

from .base import BaseFrameCalculator, HeightWidthInputs, TeeInputs
from .collar_tables import QUADRANT_ARCH_COLLAR_TABLE, collar_rows
from .sections import D50_NAMES, SectionCode, evaluate_rows

# Extra stock for bending the arch
ARCH_ALLOWANCE_IN = 12


class QuadrantArchInputs(HeightWidthInputs, TeeInputs):
    collar_type: int = Field(ge=1, le=8)


class RoundArchInputs(HeightWidthInputs, TeeInputs):
    arch_length: float = Field(gt=0, description="Arch length in inches")
    has_collar: bool = False


class QuadrantArchWindow(BaseFrameCalculator):

    shape = "quadrant_arch_window"
    Inputs = QuadrantArchInputs
    collar_range = (1, 8)

    def label_for(self, inputs) -> str:
        return "Qadial Arch (4-corner) Window"

    def compute_sections(self, inputs) -> dict:
        h, w = inputs.height, inputs.width

        sections = evaluate_rows(
            collar_rows(QUADRANT_ARCH_COLLAR_TABLE, inputs.collar_type), D50_NAMES, h, w
        )

        perimeter = (h + w) * 2
        if inputs.include_tee:
            sections[SectionCode.D40.value] = inputs.tee
            sections[SectionCode.D41.value] = perimeter + (inputs.tee * 2)
        else:
            sections[SectionCode.D41.value] = perimeter

        return sections


class RoundArchWindow(BaseFrameCalculator):

    shape = "round_arch_window"
    Inputs = RoundArchInputs

    def label_for(self, inputs) -> str:
        return "Round Arch Window"

    def compute_sections(self, inputs) -> dict:
        arch, w = inputs.arch_length, inputs.width
        sections = {}

        if inputs.has_collar:
            sections[SectionCode.D50F.value] = arch + ARCH_ALLOWANCE_IN
            sections[SectionCode.D50A.value] = w
        else:
            sections[SectionCode.D50A.value] = arch + w + ARCH_ALLOWANCE_IN

        bead = arch + w + ARCH_ALLOWANCE_IN
        if inputs.include_tee:
            sections[SectionCode.D40.value] = inputs.tee
            sections[SectionCode.D41.value] = bead + (inputs.tee * 2)
        else:
            sections[SectionCode.D41.value] = bead

        return sections

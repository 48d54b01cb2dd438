"""
Fixed window calculators.

FixedWindow — rectangular fixed glazing, D54 frame by collar type,
D41 glazing bead around the perimeter.
RandomFixedWindow — free-form fixed glazing priced on a single running
length; no area (nothing rectangular to measure).

Both accept an optional tee (D52 divider). A tee adds its length twice
to the D41 bead, once for each side of the divider.
"""

from pydantic import Field

from .base import BaseFrameCalculator, HeightWidthInputs, TeeInputs
from .collar_tables import OPENING_COLLAR_TABLE, collar_rows
from .sections import D54_NAMES, SectionCode, evaluate_rows


class FixedWindowInputs(HeightWidthInputs, TeeInputs):
    collar_type: int = Field(ge=1, le=14)


class RandomFixedWindowInputs(TeeInputs):
    length: float = Field(gt=0, description="Total running length in inches")


class FixedWindow(BaseFrameCalculator):

    shape = "fixed_window"
    Inputs = FixedWindowInputs
    collar_range = (1, 14)

    def label_for(self, inputs) -> str:
        return "Fixed Window with Tee" if inputs.include_tee else "Fixed Window"

    def compute_sections(self, inputs) -> dict:
        h, w = inputs.height, inputs.width

        sections = evaluate_rows(collar_rows(OPENING_COLLAR_TABLE, inputs.collar_type), D54_NAMES, h, w)

        perimeter = (h + w) * 2
        if inputs.include_tee:
            sections[SectionCode.D52.value] = inputs.tee
            sections[SectionCode.D41.value] = perimeter + (inputs.tee * 2)
        else:
            sections[SectionCode.D41.value] = perimeter

        return sections


class RandomFixedWindow(BaseFrameCalculator):

    shape = "random_fixed_window"
    Inputs = RandomFixedWindowInputs

    def label_for(self, inputs) -> str:
        if inputs.include_tee:
            return "Random Design Fixed Window (with Tee)"
        return "Random Design Fixed Window"

    def compute_area(self, inputs) -> float:
        return 0.0

    def compute_sections(self, inputs) -> dict:
        length = inputs.length
        sections = {SectionCode.D54.value: length}

        if inputs.include_tee:
            sections[SectionCode.D52.value] = inputs.tee
            sections[SectionCode.D41.value] = length + (inputs.tee * 2)
        else:
            sections[SectionCode.D41.value] = length

        return sections

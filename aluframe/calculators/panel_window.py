"""
Sliding panel window calculators.

FlexiblePanelWindow — three panel (with D29 net track, DC naming) or
two panel (no D29, M-series naming).
TripleGlassPanelWindow — the same frames split into three glass parts:
heavier sash (M28 doubled) and a D29 net sized by net type.
"""

from typing import Optional

from pydantic import Field, model_validator

from .base import BaseFrameCalculator, HeightWidthInputs
from .collar_tables import PANEL_COLLAR_TABLE, collar_rows
from .sections import (
    PANEL_DC_NAMES, PANEL_M_SERIES_NAMES, SectionCode, evaluate_rows, prefixed_names,
)


class PanelInputs(HeightWidthInputs):
    collar_type: int = Field(ge=1, le=14)


class TripleGlassInputs(PanelInputs):
    # 1 single net (auto width), 2 double net (auto width),
    # 3 custom single net, 4 custom double net
    net_type: int = Field(default=2, ge=1, le=4)
    net_width: Optional[float] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _custom_net_needs_width(self):
        if self.net_type in (3, 4) and self.net_width is None:
            raise ValueError("net_width is required for custom net types 3 and 4")
        return self


class FlexiblePanelWindow(BaseFrameCalculator):

    shape = "panel_window"
    Inputs = PanelInputs
    collar_range = (1, 14)
    exact_foot_rounding = True

    def __init__(self, include_d29: bool = True, use_m_series: bool = False):
        super().__init__()
        self.include_d29 = include_d29
        self.use_m_series = use_m_series

    def label_for(self, inputs) -> str:
        return "Three Panel Window" if self.include_d29 else "Two Panel Window"

    def compute_sections(self, inputs) -> dict:
        h, w = inputs.height, inputs.width
        names = PANEL_M_SERIES_NAMES if self.use_m_series else PANEL_DC_NAMES

        sections = evaluate_rows(collar_rows(PANEL_COLLAR_TABLE, inputs.collar_type), names, h, w)

        # Sash members
        sections[SectionCode.M23.value] = h * 2
        sections[SectionCode.M28.value] = h * 2
        sections[SectionCode.M24.value] = w * 2

        if self.include_d29:
            sections[SectionCode.D29.value] = (h * 2) + w

        return sections


class TripleGlassPanelWindow(BaseFrameCalculator):

    shape = "triple_glass_panel_window"
    Inputs = TripleGlassInputs
    collar_range = (1, 14)

    def __init__(self, include_d29: bool = True, prefix30: str = "DC30", prefix26: str = "DC26"):
        super().__init__()
        self.include_d29 = include_d29
        self.prefix30 = prefix30
        self.prefix26 = prefix26

    def capture(self, fields: dict) -> "TripleGlassPanelWindow":
        # Net details only apply when the frame carries a D29 net track
        if not self.include_d29:
            fields = {k: v for k, v in fields.items() if k not in ("net_type", "net_width")}
        return super().capture(fields)

    def label_for(self, inputs) -> str:
        return "Three Panel and 3 Glass Part Window"

    def compute_sections(self, inputs) -> dict:
        h, w = inputs.height, inputs.width
        names = prefixed_names(self.prefix30, self.prefix26)

        sections = evaluate_rows(collar_rows(PANEL_COLLAR_TABLE, inputs.collar_type), names, h, w)

        sections[SectionCode.M23.value] = h * 2
        sections[SectionCode.M28.value] = h * 4
        sections[SectionCode.M24.value] = w * 2

        if self.include_d29:
            d29 = self._net_length(inputs)
            if d29 is not None:
                sections[SectionCode.D29.value] = d29

        return sections

    def _net_length(self, inputs) -> Optional[float]:
        h, w = inputs.height, inputs.width
        n = inputs.net_width or 0.0
        if inputs.net_type == 1:
            return (h + (w / 3)) * 2
        if inputs.net_type == 2:
            return (h * 4) + w
        if inputs.net_type == 3:
            return (h * 2) + (n * 2)
        if inputs.net_type == 4:
            return (h * 4) + (n * 4)
        return None

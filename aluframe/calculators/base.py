"""
Abstract base class for all frame-shape calculators.

Lifecycle: the registry builds a calculator with its construction-time
flags (D29, M-series naming, double door...), capture() validates and
stores the dimensions exactly once, then sections()/area()/display_label()
can be queried any number of times.

Output: SectionRequirement dict {section code: inches}, sorted by code.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..exceptions import InvalidInputError
from .rounding import round_to_market_feet

logger = logging.getLogger(__name__)


# --- Input models ---

class FrameInputs(BaseModel):
    """Validated dimensions + flags for one component. Immutable once built."""
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)


class HeightWidthInputs(FrameInputs):
    height: float = Field(gt=0, description="Height in inches")
    width: float = Field(gt=0, description="Width in inches")


class TeeInputs(FrameInputs):
    """Mixin for shapes with an optional tee (divider) member."""
    include_tee: bool = False
    tee: Optional[float] = Field(default=None, gt=0, description="Tee length in inches")

    @model_validator(mode="after")
    def _tee_required(self):
        if self.include_tee and self.tee is None:
            raise ValueError("tee length is required when include_tee is set")
        return self


class BaseFrameCalculator(ABC):
    """All frame-shape calculators inherit from this."""

    shape: str = ""
    Inputs: type = FrameInputs
    # (min, max) collar type accepted at capture, None when the shape has no collar type
    collar_range: Optional[tuple] = None
    # Bill exact-foot lengths unrounded (only plain panel windows do this)
    exact_foot_rounding: bool = False

    def __init__(self):
        self._inputs = None

    # --- Capture ---

    def capture(self, fields: dict) -> "BaseFrameCalculator":
        """Validate and store dimensions/flags. May only be called once."""
        if self._inputs is not None:
            raise InvalidInputError(f"{self.shape}: dimensions already captured")
        try:
            inputs = self.Inputs.model_validate(fields)
        except ValidationError as e:
            raise InvalidInputError(
                f"Invalid input for {self.shape}",
                details=[
                    {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                    for err in e.errors()
                ],
            ) from e
        self.check_inputs(inputs)
        self.check_finite(inputs)
        self._inputs = inputs
        logger.debug("Captured %s inputs: %s", self.shape, inputs)
        return self

    def check_inputs(self, inputs) -> None:
        """Validation that depends on construction-time flags. Raise InvalidInputError."""

    def check_finite(self, inputs) -> None:
        """Reject dimensions whose section lengths or area overflow to inf."""
        lengths = self.compute_sections(inputs)
        overflowed = sorted(name for name, inches in lengths.items() if not math.isfinite(inches))
        if overflowed:
            raise InvalidInputError(
                f"Invalid input for {self.shape}",
                details=[{"field": name, "message": "section length is not a finite number"}
                         for name in overflowed],
            )
        if not math.isfinite(self.compute_area(inputs)):
            raise InvalidInputError(
                f"Invalid input for {self.shape}",
                details=[{"field": "area", "message": "area is not a finite number"}],
            )

    @property
    def inputs(self):
        if self._inputs is None:
            raise InvalidInputError(f"{self.shape}: dimensions have not been captured")
        return self._inputs

    @property
    def is_captured(self) -> bool:
        return self._inputs is not None

    # --- Queries ---

    def sections(self) -> dict:
        """Required section lengths in inches, keyed and ordered by section code."""
        return dict(sorted(self.compute_sections(self.inputs).items()))

    def area(self) -> float:
        """Glazed area in square feet."""
        return self.compute_area(self.inputs)

    def display_label(self) -> str:
        return self.label_for(self.inputs)

    def round_length(self, inches: float) -> float:
        """Billable feet for a section length under this shape's rounding rule."""
        return round_to_market_feet(inches, exact_foot=self.exact_foot_rounding)

    # --- Per-shape formulas ---

    @abstractmethod
    def compute_sections(self, inputs) -> dict:
        """Return {section code: inches} for validated inputs."""

    @abstractmethod
    def label_for(self, inputs) -> str:
        """Human-readable shape label."""

    def compute_area(self, inputs) -> float:
        """Default area: height × width in square feet."""
        return self.sq_ft_from_dimensions(inputs.height, inputs.width)

    # --- Helper methods for all calculators ---

    def sq_ft_from_dimensions(self, height_in: float, width_in: float) -> float:
        """Calculate square footage from dimensions in inches."""
        return (height_in / 12.0) * (width_in / 12.0)

    def describe(self) -> dict:
        """Catalog entry for this calculator (used by the shapes endpoint)."""
        return {
            "shape": self.shape,
            "collar_range": list(self.collar_range) if self.collar_range else None,
            "fields": list(self.Inputs.model_fields.keys()),
        }

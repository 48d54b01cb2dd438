"""
Shape registry — maps shape selectors (1-14) to frame calculators.

Several selectors share a calculator class and differ only in the
construction-time flags passed to it (D29 net track, M-series naming,
single vs double door).
"""

from functools import partial

from ..exceptions import UnsupportedShapeError
from .arch_window import QuadrantArchWindow, RoundArchWindow
from .base import BaseFrameCalculator
from .corner_window import FixCornerWindow, SlideCornerWindow
from .door import DoorWindow
from .fixed_window import FixedWindow, RandomFixedWindow
from .openable_window import OpenableWindow
from .panel_window import FlexiblePanelWindow, TripleGlassPanelWindow

# selector → (menu name, factory)
SHAPE_REGISTRY: dict = {
    1:  ("Three Panel Window", partial(FlexiblePanelWindow, include_d29=True, use_m_series=False)),
    2:  ("Two Panel Window (M section)", partial(FlexiblePanelWindow, include_d29=False, use_m_series=True)),
    3:  ("Three Panel Window (3 glass part)",
         partial(TripleGlassPanelWindow, include_d29=True, prefix30="DC30", prefix26="DC26")),
    4:  ("Two Panel Window (3 glass part & M section)",
         partial(TripleGlassPanelWindow, include_d29=False, prefix30="M30", prefix26="M26")),
    5:  ("Fixed Window", FixedWindow),
    6:  ("Random Design Fixed Window", RandomFixedWindow),
    7:  ("Openable Window", OpenableWindow),
    8:  ("Single Door", partial(DoorWindow, is_double=False)),
    9:  ("Double Door", partial(DoorWindow, is_double=True)),
    10: ("Qadial Top Arch", QuadrantArchWindow),
    11: ("Round Top Arch", RoundArchWindow),
    12: ("Fix Corner Window", FixCornerWindow),
    13: ("Slide Corner Window",
         partial(SlideCornerWindow, include_d29=True, prefix30="DC30", prefix26="DC26")),
    14: ("Slide Corner Window (M section)",
         partial(SlideCornerWindow, include_d29=False, prefix30="M30", prefix26="M26")),
}


def create_component(selector: int) -> BaseFrameCalculator:
    """Returns a fresh, un-captured calculator for a selector, or raises UnsupportedShapeError."""
    if selector not in SHAPE_REGISTRY:
        raise UnsupportedShapeError(selector, list_shapes())
    _, factory = SHAPE_REGISTRY[selector]
    return factory()


def build_batch(selector: int, items: list) -> list:
    """Create one calculator per fields dict and capture its inputs."""
    return [create_component(selector).capture(fields) for fields in items]


def has_shape(selector: int) -> bool:
    """Check if a calculator exists for a selector."""
    return selector in SHAPE_REGISTRY


def list_shapes() -> list:
    """List all registered shape selectors."""
    return list(SHAPE_REGISTRY.keys())


def describe_shapes() -> list:
    """Catalog of every selector with its accepted fields and collar range."""
    catalog = []
    for selector, (name, factory) in SHAPE_REGISTRY.items():
        entry = factory().describe()
        entry.update({"selector": selector, "name": name})
        catalog.append(entry)
    return catalog

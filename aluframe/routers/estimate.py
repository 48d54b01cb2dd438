"""
Estimate API — batch flow for one frame shape at a time.

POST /api/estimate/sections — Capture dimensions, return each component's
                              sections and the batch's required section codes
POST /api/estimate/price    — Price a batch against one shared rate table,
                              add it to the caller's session totals
POST /api/estimate/summary  — Final cost summary (glass, labor, hardware, discount)

Stateless: session totals travel in the request and come back updated.
"""

import logging

from fastapi import APIRouter

from .. import schemas
from ..calculators.registry import build_batch
from ..config import settings
from ..pricing_engine import PricingEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimate", tags=["estimate"])

# Stateless, shared across requests
engine = PricingEngine()


@router.post("/sections", response_model=schemas.SectionsResponse)
def batch_sections(request: schemas.BatchRequest):
    """
    Phase 1: build the batch and report which section codes need a rate.
    The caller asks for one rate per code, never per component.
    """
    components = build_batch(request.shape, request.items)
    return {
        "shape": request.shape,
        "components": [
            {
                "label": c.display_label(),
                "sections": c.sections(),
                "area_sq_ft": round(c.area(), 2),
            }
            for c in components
        ],
        "required_sections": sorted(engine.required_section_names(components)),
    }


@router.post("/price", response_model=schemas.PriceResponse)
def batch_price(request: schemas.PriceRequest):
    """
    Phase 2: price every component against the shared rate table.
    Sections with no rate are skipped and listed in missing_rates.
    """
    components = build_batch(request.shape, request.items)
    batch = engine.price_batch(components, request.rates)
    if batch["missing_rates"]:
        logger.info("Batch for shape %s priced without rates for %s",
                    request.shape, batch["missing_rates"])

    session = engine.add_batch_to_session(request.session.model_dump(), batch)
    return {"shape": request.shape, "session": session, **batch}


@router.post("/summary", response_model=schemas.FinalSummary)
def final_summary(request: schemas.SummaryRequest):
    """Final cost summary — rates not supplied fall back to configured defaults."""
    summary = engine.final_summary(
        request.session.model_dump(),
        glass_rate=_or_default(request.glass_rate, settings.GLASS_RATE_DEFAULT),
        labor_rate=_or_default(request.labor_rate, settings.LABOR_RATE_DEFAULT),
        hardware_rate=_or_default(request.hardware_rate, settings.HARDWARE_RATE_DEFAULT),
        discount_pct=_or_default(request.discount_pct, settings.DISCOUNT_PCT_DEFAULT),
    )
    summary["currency"] = settings.CURRENCY_LABEL
    return summary


def _or_default(value, default: float) -> float:
    return default if value is None else value

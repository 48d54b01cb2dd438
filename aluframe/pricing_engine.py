"""
Pricing Engine.

Two-phase batch pricing: collect the union of section codes every
component in a batch needs, resolve one rate per code, then price each
component against that shared rate table.
Pure math — rounded feet × rate, summed per component and per batch.

Input: captured frame calculators + RateTable {section code: rate per ft}
Output: PricedComponent / PricedBatch dicts, EstimateSession totals
"""

import logging
import math

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def empty_session() -> dict:
    """Running totals for an estimating session with nothing added yet."""
    return {"aluminium_total": 0.0, "total_sq_ft": 0.0, "window_count": 0}


class PricingEngine:
    """
    Prices frame components against a shared rate table and rolls batch
    results into session totals.
    """

    def required_section_names(self, components: list) -> set:
        """Union of section codes needed by every component in a batch."""
        names = set()
        for component in components:
            names.update(component.sections().keys())
        return names

    def missing_rate_names(self, components: list, rates: dict) -> list:
        """Section codes the batch needs that have no rate yet, sorted."""
        return sorted(self.required_section_names(components) - set(rates))

    def price_component(self, component, rates: dict) -> dict:
        """
        Price one component's sections.

        Returns:
            {
                "label": str,
                "area_sq_ft": float,
                "items": [{section, inches, feet, rounded_feet, rate, amount}, ...],
                "missing_rates": [section, ...],
                "total": float,
            }
        Sections without a rate are left out of items and total and
        reported in missing_rates instead.
        """
        self.check_rates(rates)
        items = []
        missing = []

        for name, inches in component.sections().items():
            rounded_feet = component.round_length(inches)
            rate = rates.get(name)
            if rate is None:
                logger.warning("Rate missing for section: %s", name)
                missing.append(name)
                continue

            item = self.make_line_item(name, inches, rounded_feet, rate)
            if not math.isfinite(item["amount"]):
                raise InvalidInputError(
                    "Line amount is not a finite number",
                    details=[{"field": name, "message": "rate too large for this length"}],
                )
            items.append(item)

        return {
            "label": component.display_label(),
            "area_sq_ft": round(component.area(), 2),
            "items": items,
            "missing_rates": missing,
            "total": self._calculate_items_total(items),
        }

    def price_batch(self, components: list, rates: dict) -> dict:
        """
        Price every component of a batch against one rate table.

        Returns:
            {
                "components": [PricedComponent, ...],
                "required_sections": [section, ...],
                "missing_rates": [section, ...],
                "aluminium_total": float,
                "total_sq_ft": float,
                "window_count": int,
            }
        """
        priced = [self.price_component(component, rates) for component in components]
        aluminium_total = round(sum(p["total"] for p in priced), 2)
        total_sq_ft = sum(component.area() for component in components)

        logger.info(
            "Priced batch of %d component(s): aluminium %.2f, %.2f sq ft",
            len(components), aluminium_total, total_sq_ft,
        )

        return {
            "components": priced,
            "required_sections": sorted(self.required_section_names(components)),
            "missing_rates": self.missing_rate_names(components, rates),
            "aluminium_total": aluminium_total,
            "total_sq_ft": round(total_sq_ft, 2),
            "window_count": len(components),
        }

    def check_rates(self, rates: dict) -> None:
        """Rates must be finite and non-negative."""
        non_finite = sorted(name for name, rate in rates.items() if not math.isfinite(rate))
        if non_finite:
            raise InvalidInputError(
                "Rates must be finite numbers",
                details=[{"field": name, "message": "rate is not a finite number"} for name in non_finite],
            )
        negative = sorted(name for name, rate in rates.items() if rate < 0)
        if negative:
            raise InvalidInputError(
                "Rates must be non-negative",
                details=[{"field": name, "message": "negative rate"} for name in negative],
            )

    def make_line_item(self, name: str, inches: float, rounded_feet: float, rate: float) -> dict:
        """Build a priced section line."""
        return {
            "section": name,
            "inches": round(inches, 2),
            "feet": round(inches / 12.0, 2),
            "rounded_feet": round(rounded_feet, 2),
            "rate": rate,
            "amount": round(rounded_feet * rate, 2),
        }

    def _calculate_items_total(self, items: list) -> float:
        """Sum of all line amounts."""
        return round(sum(item["amount"] for item in items), 2)

    # --- Session totals ---

    def add_batch_to_session(self, session: dict, batch: dict) -> dict:
        """Return new session totals with a priced batch added. Input is not modified."""
        return {
            "aluminium_total": round(session["aluminium_total"] + batch["aluminium_total"], 2),
            "total_sq_ft": round(session["total_sq_ft"] + batch["total_sq_ft"], 2),
            "window_count": session["window_count"] + batch["window_count"],
        }

    def final_summary(self, session: dict, glass_rate: float, labor_rate: float,
                      hardware_rate: float, discount_pct: float) -> dict:
        """
        Final cost summary for everything added in a session.

        Discount applies to aluminium only; glass and labor are per sq ft,
        hardware is per window.
        """
        if session["window_count"] <= 0:
            raise InvalidInputError("No windows added yet to calculate summary.")

        aluminium = session["aluminium_total"]
        sq_ft = session["total_sq_ft"]

        glass = glass_rate * sq_ft
        labor = labor_rate * sq_ft
        hardware = hardware_rate * session["window_count"]
        discount = (discount_pct / 100.0) * aluminium
        discounted_aluminium = aluminium - discount
        net = discounted_aluminium + glass + labor + hardware

        return {
            "aluminium_before_discount": round(aluminium, 2),
            "discount_pct": discount_pct,
            "discount": round(discount, 2),
            "aluminium_after_discount": round(discounted_aluminium, 2),
            "glass": round(glass, 2),
            "labor": round(labor, 2),
            "hardware": round(hardware, 2),
            "net_total": round(net, 2),
            "total_sq_ft": round(sq_ft, 2),
            "window_count": session["window_count"],
        }

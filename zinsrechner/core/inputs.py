"""Input edits as the calculator form applies them.

An edit that does not parse into a finite number is dropped and the last
valid value stays in place. Every field is clamped to the range
the form allows (sliders for years and rate, non-negative bounded amounts)
before anything reaches the engine.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional, Tuple

from zinsrechner.core.calculator import Projection, build_projection
from zinsrechner.core.formatting import Locale
from zinsrechner.core.projection import ScenarioInputs, round_half_up

logger = logging.getLogger(__name__)

MIN_YEARS = 1
MAX_YEARS = 122
MIN_INTEREST_RATE = 0.0
MAX_INTEREST_RATE = 100.0
MIN_AMOUNT = 0.0
# keeps (1 + r)^122 * amount well inside float range
MAX_AMOUNT = 1e15

# camelCase form names -> model attributes
FIELD_NAMES: Dict[str, str] = {
    "initialCapital": "initial_capital",
    "monthlyContribution": "monthly_contribution",
    "years": "years",
    "interestRate": "interest_rate",
}


class UnknownFieldError(ValueError):
    def __init__(self, field: str):
        super().__init__(f"unknown scenario field: {field!r}")
        self.field = field


def parse_number(raw: Any) -> Optional[float]:
    """Return a finite float for ``raw`` or None. Accepts a German decimal comma."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().replace(" ", "")
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_years(value: float) -> int:
    return int(clamp(round_half_up(value), MIN_YEARS, MAX_YEARS))


def clamp_interest_rate(value: float) -> float:
    return clamp(value, MIN_INTEREST_RATE, MAX_INTEREST_RATE)


def clamp_amount(value: float) -> float:
    return clamp(value, MIN_AMOUNT, MAX_AMOUNT)


class CalculatorState:
    """Owns the current scenario and recomputes the projection after each edit."""

    def __init__(self, scenario: ScenarioInputs, locale: Locale = "de"):
        self.scenario = scenario
        self.locale = locale

    def apply_edit(self, field: str, raw: Any) -> bool:
        """Apply one form edit. Returns False when the edit was ignored."""
        attr = FIELD_NAMES.get(field, field)
        if attr not in FIELD_NAMES.values():
            raise UnknownFieldError(field)

        value = parse_number(raw)
        if value is None:
            logger.warning("ignoring unparsable %s edit: %r", field, raw)
            return False

        if attr == "years":
            value = clamp_years(value)
        elif attr == "interest_rate":
            value = clamp_interest_rate(value)
        else:
            value = clamp_amount(value)

        self.scenario = self.scenario.model_copy(update={attr: value})
        return True

    def recalculate(self) -> Projection:
        return build_projection(self.scenario, self.locale)

    def edit(self, field: str, raw: Any) -> Tuple[bool, Projection]:
        accepted = self.apply_edit(field, raw)
        return accepted, self.recalculate()

"""Number and currency formatting for display."""

from __future__ import annotations

from typing import Dict, List, Literal, Tuple

Locale = Literal["de", "en"]

SUPPORTED_LOCALES: Tuple[str, ...] = ("de", "en")

# Values at or above the first threshold switch to compact notation.
COMPACT_THRESHOLD = 1e6

_SCALE_WORDS: Dict[str, List[Tuple[float, str]]] = {
    # German long scale
    "de": [
        (1e24, "Quadrillionen"),
        (1e21, "Trilliarden"),
        (1e18, "Trillionen"),
        (1e15, "Billiarden"),
        (1e12, "Billionen"),
        (1e9, "Milliarden"),
        (1e6, "Millionen"),
    ],
    "en": [
        (1e24, "septillion"),
        (1e21, "sextillion"),
        (1e18, "quintillion"),
        (1e15, "quadrillion"),
        (1e12, "trillion"),
        (1e9, "billion"),
        (1e6, "million"),
    ],
}


def format_number(value: float, decimals: int = 2, locale: Locale = "de") -> str:
    """Group thousands and fix the decimals using the locale's separators."""
    text = f"{value:,.{decimals}f}"
    if locale == "de":
        return text.replace(",", "_").replace(".", ",").replace("_", ".")
    return text


def _with_symbol(number: str, locale: Locale) -> str:
    if locale == "de":
        return f"{number} €"
    if number.startswith("-"):
        return f"-€{number[1:]}"
    return f"€{number}"


def _rounded(value: float) -> float:
    # same rounding the two-decimal display applies
    return float(f"{value:.2f}")


def format_currency(amount: float, locale: Locale = "de") -> str:
    """
    Euro amount for display.

    Below one million: grouped with two decimals ("12.345,00 €").
    From one million up: two-decimal mantissa plus a scale word
    ("1,23 Millionen €" / "€1.23 million").
    The scale is picked on the value as it will be printed, so 999.999,996
    reads "1,00 Millionen €" rather than "1.000.000,00 €".
    """
    if _rounded(amount) >= COMPACT_THRESHOLD:
        for threshold, word in _SCALE_WORDS[locale]:
            if _rounded(amount / threshold) >= 1:
                mantissa = format_number(amount / threshold, 2, locale)
                return _with_symbol(f"{mantissa} {word}", locale)
    return _with_symbol(format_number(amount, 2, locale), locale)


def format_rate(rate: float, locale: Locale = "de") -> str:
    """Percentage value without trailing zeros (8.6 -> "8,6" in German)."""
    text = f"{rate:.2f}".rstrip("0").rstrip(".")
    if locale == "de":
        return text.replace(".", ",")
    return text

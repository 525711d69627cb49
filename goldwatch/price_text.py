"""Display texts for a gold price quote."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from goldwatch.prices import Price

Color = tuple[int, int, int, int]

_GREY: Color = (155, 155, 155, 255)
_GREEN: Color = (0, 180, 0, 255)
_RED: Color = (180, 0, 0, 255)


class Alignment(enum.Enum):
    """Horizontal placement of a text."""

    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


@dataclass(frozen=True)
class PriceText:
    """A line of text with its RGBA colour (None for the default) and alignment."""

    text: str
    color: Color | None
    alignment: Alignment


def price_texts(price: Price, currency: str) -> tuple[PriceText, PriceText, PriceText]:
    """Return the open, current and change texts for a quote."""
    color = _RED if price.price < price.previous_close else _GREEN
    return (
        PriceText(
            f"Open: ${price.previous_close:.4f} {currency}", None, Alignment.LEADING
        ),
        PriceText(f"Current: ${price.price:.4f} {currency}", color, Alignment.CENTER),
        PriceText(f"Change: ${price.change:.4f} {currency}", color, Alignment.TRAILING),
    )


def unreachable_texts() -> tuple[PriceText, PriceText, PriceText]:
    """Return the texts shown when no quote could be fetched."""
    return (
        PriceText("Open: Unreachable", _GREY, Alignment.LEADING),
        PriceText("Current: Unreachable", _GREY, Alignment.CENTER),
        PriceText("Change: Unreachable", _GREY, Alignment.TRAILING),
    )
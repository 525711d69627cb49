"""Holdings table rows and validation of the add-holding form."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterable
from datetime import datetime, timezone

from goldwatch.repository import Holding

HEADER = ("ID", "Amount", "Price", "Date", "Delete")

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _to_float32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def holding_rows(holdings: Iterable[Holding]) -> list[list[str]]:
    """Return the table rows for the holdings, header row first."""
    rows = [list(HEADER)]
    for holding in holdings:
        dollars = _to_float32(holding.purchase_price / 100)
        rows.append(
            [
                str(holding.id),
                f"{holding.amount} toz",
                "$%2f " % dollars,
                holding.purchase_date.strftime("%Y-%m-%d"),
                "Delete",
            ]
        )
    return rows


def validate_date(text: str) -> datetime:
    """Parse a YYYY-MM-DD date as midnight UTC; raise ValueError if malformed."""
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"invalid date {text!r}: expected YYYY-MM-DD")
    try:
        parsed = datetime.strptime(text, "%Y-%m-%d")
    except ValueError as exc:
        raise ValueError(f"invalid date {text!r}: {exc}") from None
    return parsed.replace(tzinfo=timezone.utc)


def validate_int(text: str) -> int:
    """Parse a decimal integer; raise ValueError if malformed or out of range."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer {text!r} out of range")
    return value


def validate_float(text: str) -> float:
    """Parse a single-precision number; raise ValueError if malformed or too large."""
    if not text or not text.isascii() or "_" in text or text != text.strip():
        raise ValueError(f"invalid number {text!r}")
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"invalid number {text!r}") from None
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return _to_float32(value)
    except OverflowError:
        raise ValueError(f"number {text!r} out of range") from None


def parse_holding_form(amount: str, price: str, date: str) -> Holding:
    """Build a holding from the form's text fields; the price becomes cents."""
    return Holding(
        amount=validate_int(amount),
        purchase_date=validate_date(date),
        purchase_price=int(validate_float(price) * 100),
    )
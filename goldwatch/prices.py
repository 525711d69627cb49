"""Fetching the current gold price."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

import requests

log = logging.getLogger(__name__)

_PRICE_URL = "https://data-asg.goldprice.org/dbXRates/{currency}"


@dataclass(frozen=True)
class Price:
    """Gold price quote in one currency."""

    currency: str
    price: float
    change: float
    previous_close: float
    time: datetime


class GoldPrices:
    """Client for the gold price service."""

    def __init__(
        self, currency: str = "USD", session: requests.Session | None = None
    ) -> None:
        self.currency = currency
        self.session = session if session is not None else requests.Session()

    @property
    def url(self) -> str:
        return _PRICE_URL.format(currency=self.currency)

    def get_prices(self) -> Price:
        """Fetch the latest quote; raises on network or parse errors."""
        try:
            response = self.session.get(self.url)
        except requests.RequestException:
            log.exception("error contacting goldprice.org")
            raise
        try:
            data = response.json()
        except ValueError:
            log.exception("error unmarshalling")
            raise
        items = data.get("items") if isinstance(data, dict) else None
        if not items:
            raise ValueError("no price items in response")
        item = items[0]
        return Price(
            currency=self.currency,
            price=float(item.get("xauPrice", 0.0)),
            change=float(item.get("chgXau", 0.0)),
            previous_close=float(item.get("xauClose", 0.0)),
            time=datetime.now(),
        )
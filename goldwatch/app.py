"""The gold watcher application and its command line."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sqlite3
import sys
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from goldwatch.holdings import holding_rows as _holding_rows
from goldwatch.holdings import parse_holding_form
from goldwatch.price_text import PriceText, price_texts, unreachable_texts
from goldwatch.prices import GoldPrices
from goldwatch.repository import (
    Holding,
    Repository,
    RepositoryError,
    SQLiteRepository,
)

log = logging.getLogger(__name__)

CURRENCIES = ("USD", "CAD", "EUR", "GBP")
DEFAULT_CURRENCY = "CAD"
_CHART_URL = "https://goldprice.org/charts/gold_3d_b_o_{currency}_x.png"
_DEFAULT_DATA_DIR = Path.home() / ".goldwatch"
_PREFERENCES_FILE = "preferences.json"


class GoldWatcher:
    """Prices, chart and holdings for one currency."""

    def __init__(
        self,
        repository: Repository,
        session: requests.Session | None = None,
        currency: str = "USD",
    ) -> None:
        self.repository = repository
        self.session = session if session is not None else requests.Session()
        self.currency = currency

    def current_holdings(self) -> list[Holding]:
        """Return every stored holding."""
        try:
            return self.repository.all_holdings()
        except (RepositoryError, sqlite3.Error):
            log.exception("could not load holdings")
            raise

    def holding_rows(self) -> list[list[str]]:
        """Return the holdings table, header row first; only the header on error."""
        try:
            holdings = self.current_holdings()
        except (RepositoryError, sqlite3.Error):
            holdings = []
        return _holding_rows(holdings)

    def price_texts(self) -> tuple[PriceText, PriceText, PriceText]:
        """Return the open, current and change texts, or the unreachable ones."""
        client = GoldPrices(self.currency, self.session)
        try:
            price = client.get_prices()
        except (requests.RequestException, ValueError, TypeError, KeyError):
            return unreachable_texts()
        return price_texts(price, self.currency)

    def add_holding(self, amount: str, price: str, date: str) -> Holding:
        """Validate the form fields and store the holding."""
        holding = parse_holding_form(amount, price, date)
        return self.repository.insert_holding(holding)

    def delete_holding(self, holding_id: int) -> None:
        """Remove the holding with the given id."""
        self.repository.delete_holding(holding_id)

    def set_currency(self, currency: str) -> None:
        """Switch to one of the supported currencies."""
        if currency not in CURRENCIES:
            raise ValueError(
                f"unsupported currency {currency!r}; choose from {', '.join(CURRENCIES)}"
            )
        self.currency = currency

    def chart_url(self) -> str:
        """Return the address of the price chart for the current currency."""
        return _CHART_URL.format(currency=self.currency.lower())

    def download_chart(self, url: str, filename: str | Path) -> Path:
        """Download an image and store it as PNG; return the file's path."""
        response = self.session.get(url)
        if response.status_code != 200:
            raise requests.HTTPError("received wrong response code", response=response)
        with Image.open(BytesIO(response.content)) as image:
            image.load()
            path = Path(filename)
            image.save(path, format="PNG")
        return path


def resolve_db_path(default_dir: str | Path) -> Path:
    """Return the database path from DB_PATH, or sql.db in the default directory."""
    env_path = os.environ.get("DB_PATH", "")
    if env_path:
        return Path(env_path)
    path = Path(default_dir) / "sql.db"
    log.info("No DB_PATH environment variable, using default path: %s", path)
    return path


def connect_db(path: str | Path) -> sqlite3.Connection:
    """Open the SQLite database at the path."""
    return sqlite3.connect(str(path))


def _load_preferences(path: Path) -> dict:
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_preferences(path: Path, preferences: dict) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(preferences, handle)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="goldwatch", description="Track gold prices and holdings.")
    parser.add_argument("--data-dir", type=Path, default=None, help="directory for data files")
    parser.add_argument("--currency", choices=CURRENCIES, default=None)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("prices", help="show the current gold price")
    sub.add_parser("holdings", help="list stored holdings")
    add = sub.add_parser("add", help="add a holding")
    add.add_argument("amount", help="amount in toz")
    add.add_argument("price", help="purchase price")
    add.add_argument("date", help="purchase date, YYYY-MM-DD")
    delete = sub.add_parser("delete", help="delete a holding")
    delete.add_argument("id", type=int)
    chart = sub.add_parser("chart", help="download the price chart")
    chart.add_argument("--output", default="gold.png")
    pref = sub.add_parser("set-currency", help="store the preferred currency")
    pref.add_argument("value")
    return parser


def _run(app: GoldWatcher, args: argparse.Namespace, prefs_path: Path, prefs: dict) -> int:
    if args.command == "prices":
        for text in app.price_texts():
            print(text.text)
    elif args.command == "holdings":
        for row in app.holding_rows():
            print("  ".join(row).rstrip())
    elif args.command == "add":
        holding = app.add_holding(args.amount, args.price, args.date)
        print(f"added holding {holding.id}")
    elif args.command == "delete":
        app.delete_holding(args.id)
        print(f"deleted holding {args.id}")
    elif args.command == "chart":
        path = app.download_chart(app.chart_url(), args.output)
        print(f"chart saved to {path}")
    elif args.command == "set-currency":
        app.set_currency(args.value)
        prefs["currency"] = args.value
        _save_preferences(prefs_path, prefs)
        print(f"currency set to {args.value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s\t%(asctime)s %(message)s")

    data_dir = args.data_dir if args.data_dir is not None else _DEFAULT_DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    prefs_path = data_dir / _PREFERENCES_FILE
    prefs = _load_preferences(prefs_path)
    currency = args.currency or prefs.get("currency", DEFAULT_CURRENCY)

    conn = connect_db(resolve_db_path(data_dir))
    try:
        repository = SQLiteRepository(conn)
        repository.migrate()
        app = GoldWatcher(repository, currency=currency)
        try:
            return _run(app, args, prefs_path, prefs)
        except (
            ValueError,
            RepositoryError,
            requests.RequestException,
            UnidentifiedImageError,
            OSError,
        ) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    finally:
        conn.close()


if __name__ == "__main__":
    sys.exit(main())
# goldwatch

Keep an eye on the gold price and on what you own.

goldwatch fetches the current spot price of gold, the previous close and the
change since then, in one of USD, CAD, EUR or GBP. It can download the
three-day price chart as a PNG file. Your purchases go into a small SQLite
database, where you can list them, add new ones and delete old ones.

## Installation

```
pip install goldwatch
```

To run the test suite as well:

```
pip install "goldwatch[test]"
pytest
```

## Command line

Every call names one command:

```
goldwatch prices                         # open, current and change lines
goldwatch holdings                       # the holdings table
goldwatch add 2 1850.50 2022-01-01       # amount in toz, price, date
goldwatch delete 3                       # delete the holding with id 3
goldwatch chart --output gold.png        # download the price chart
goldwatch set-currency EUR               # remember the preferred currency
```

Options placed before the command:

- `--data-dir DIR` – where the preferences file and, by default, the database
  are kept. Defaults to `~/.goldwatch`, which is created if missing.
- `--currency {USD,CAD,EUR,GBP}` – the currency for this call only.

The currency is taken from `--currency`, else from the `preferences.json` file
that `set-currency` writes in the data directory, else CAD.

The database is the file named by the `DB_PATH` environment variable; when
that is not set, `sql.db` in the data directory is used. Its table is created
on first use.

On a bad input, a missing holding, a network failure or an unreadable image
the command prints `error: ...` to standard error and exits with status 1.
When the price service cannot be reached, `prices` prints
`Open: Unreachable`, `Current: Unreachable` and `Change: Unreachable` instead.

## Using it from Python

```python
from goldwatch.app import GoldWatcher, connect_db
from goldwatch.repository import SQLiteRepository

repo = SQLiteRepository(connect_db("./sql.db"))
repo.migrate()

watcher = GoldWatcher(repo, None, "USD")

watcher.add_holding("2", "1850.50", "2022-01-01")
for row in watcher.holding_rows():
    print(row)

for text in watcher.price_texts():
    print(text.text, text.color, text.alignment)
```

- `GoldWatcher.price_texts()` returns three `goldwatch.price_text.PriceText`
  values (open, current, change), each with `text`, an RGBA `color` (or `None`
  for the default) and an `Alignment`. Prices are shown with four decimals,
  e.g. `Current: $3331.8950 USD`. The current and change lines are green when
  the price is at or above the previous close and red when it is below; the
  unreachable lines are grey.
- `GoldWatcher.holding_rows()` returns the table as lists of strings, the
  header `ID, Amount, Price, Date, Delete` first. If the holdings cannot be
  loaded, only the header row is returned.
- `GoldWatcher.chart_url()` and `download_chart(url, filename)` fetch the
  chart and save it as PNG; a status other than 200 raises
  `requests.HTTPError`.
- `GoldWatcher.set_currency()` accepts only USD, CAD, EUR and GBP and raises
  `ValueError` otherwise.
- `goldwatch.prices.GoldPrices(currency, session).get_prices()` returns a
  `Price` with `price`, `change`, `previous_close` and the time it was fetched.

Prices are stored in cents, and a holding's amount is counted in troy ounces.

Holding form input is checked by `goldwatch.holdings.parse_holding_form`. It
expects a whole number of ounces, a decimal price and a date in `YYYY-MM-DD`
form (taken as midnight UTC), and raises `ValueError` when any of them is
malformed. `validate_int`, `validate_float` and `validate_date` check a single
field.

`goldwatch.repository` holds the `Holding` record, the abstract `Repository`,
`SQLiteRepository` and `StubRepository`, a fixed-content store useful in
tests. Deleting or updating a holding that does not exist raises
`DeleteFailedError` or `UpdateFailedError`; looking up a missing id raises
`HoldingNotFoundError`. All three derive from `RepositoryError`.

## What it does not do

goldwatch is a command-line tool and library only. It has no graphical window,
and it does not refresh prices in the background: each `prices` call fetches
the quote once.
from datetime import datetime, timezone

import pytest

from goldwatch.holdings import (
    HEADER,
    holding_rows,
    parse_holding_form,
    validate_date,
    validate_float,
    validate_int,
)
from goldwatch.repository import Holding, StubRepository


def test_rows_from_stub_repository_have_header_and_two_entries():
    rows = holding_rows(StubRepository().all_holdings())
    assert len(rows) == 3
    assert rows[0] == ["ID", "Amount", "Price", "Date", "Delete"]


def test_header_constant_matches_first_row():
    assert holding_rows([])[0] == list(HEADER)
    assert len(holding_rows([])) == 1


def test_row_formatting():
    holding = Holding(
        amount=2, purchase_date=datetime(2022, 1, 1), purchase_price=1000, id=7
    )
    assert holding_rows([holding])[1] == [
        "7",
        "2 toz",
        "$10.000000 ",
        "2022-01-01",
        "Delete",
    ]


def test_row_price_uses_single_precision():
    holding = Holding(
        amount=1, purchase_date=datetime(2023, 5, 6), purchase_price=123456, id=1
    )
    assert holding_rows([holding])[1][2] == "$1234.560059 "


def test_every_row_has_five_columns():
    rows = holding_rows(StubRepository().all_holdings())
    assert all(len(row) == 5 for row in rows)


def test_validate_date_accepts_iso_date():
    assert validate_date("2022-01-01") == datetime(2022, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("text", ["2022-1-1", "2022-13-01", "2022-02-30", "abc", "", " 2022-01-01"])
def test_validate_date_rejects(text):
    with pytest.raises(ValueError):
        validate_date(text)


@pytest.mark.parametrize("text,expected", [("1", 1), ("-5", -5), ("+3", 3), ("007", 7)])
def test_validate_int_accepts(text, expected):
    assert validate_int(text) == expected


@pytest.mark.parametrize("text", ["1.5", " 1", "1_000", "", "abc", "99999999999999999999"])
def test_validate_int_rejects(text):
    with pytest.raises(ValueError):
        validate_int(text)


def test_validate_float_accepts():
    assert validate_float("1000") == 1000.0
    assert validate_float("2.5") == 2.5


@pytest.mark.parametrize("text", ["abc", "", "1_0", " 1", "1e39"])
def test_validate_float_rejects(text):
    with pytest.raises(ValueError):
        validate_float(text)


def test_parse_holding_form_from_toolbar_values():
    holding = parse_holding_form("1", "1000", "2022-01-01")
    assert holding.amount == 1
    assert holding.purchase_price == 100000
    assert holding.purchase_date == datetime(2022, 1, 1, tzinfo=timezone.utc)


def test_parse_holding_form_price_in_cents():
    assert parse_holding_form("2", "10.10", "2022-01-01").purchase_price == 1010


def test_parse_holding_form_rejects_bad_amount():
    with pytest.raises(ValueError):
        parse_holding_form("one", "1000", "2022-01-01")
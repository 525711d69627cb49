from datetime import datetime

from goldwatch.price_text import Alignment, price_texts, unreachable_texts
from goldwatch.prices import Price


def _price(current=3331.895, change=46.5375, previous=3285.3575):
    return Price(
        currency="USD",
        price=current,
        change=change,
        previous_close=previous,
        time=datetime(2025, 4, 24),
    )


def test_price_texts():
    open_, current, change = price_texts(_price(), "USD")
    assert open_.text == "Open: $3285.3575 USD"
    assert current.text == "Current: $3331.8950 USD"
    assert change.text == "Change: $46.5375 USD"


def test_rising_price_is_green():
    open_, current, change = price_texts(_price(), "USD")
    assert open_.color is None
    assert current.color == (0, 180, 0, 255)
    assert change.color == (0, 180, 0, 255)


def test_falling_price_is_red():
    _, current, change = price_texts(_price(current=3000.0, change=-285.3575), "EUR")
    assert current.color == (180, 0, 0, 255)
    assert change.color == (180, 0, 0, 255)
    assert current.text == "Current: $3000.0000 EUR"


def test_alignments():
    texts = price_texts(_price(), "USD")
    assert [t.alignment for t in texts] == [
        Alignment.LEADING,
        Alignment.CENTER,
        Alignment.TRAILING,
    ]


def test_unreachable_texts():
    open_, current, change = unreachable_texts()
    assert open_.text == "Open: Unreachable"
    assert current.text == "Current: Unreachable"
    assert change.text == "Change: Unreachable"
    assert {open_.color, current.color, change.color} == {(155, 155, 155, 255)}
    assert change.alignment is Alignment.TRAILING
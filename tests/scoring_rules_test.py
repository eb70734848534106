"""Point rules: each rule scored in isolation against a receipt that earns nothing else."""

import json
from pathlib import Path

import pytest

from src.receipt import Item, Receipt, receipt_from_payload
from src.scoring import compute_points, compute_points_breakdown

RECEIPTS_DIR = Path(__file__).resolve().parent.parent / "receipts"


def _receipt(**overrides) -> Receipt:
    """Baseline receipt worth 0 points; overrides switch on individual rules."""
    fields = {
        "retailer": "",
        "purchase_date": "2022-01-02",
        "purchase_time": "13:00",
        "items": (),
        "total": "10.10",
    }
    fields.update(overrides)
    return Receipt(**fields)


def _load(name: str) -> Receipt:
    return receipt_from_payload(json.loads((RECEIPTS_DIR / name).read_text(encoding="utf-8")))


def test_baseline_receipt_scores_zero():
    assert compute_points(_receipt()) == 0


@pytest.mark.parametrize(
    "retailer, expected",
    [
        ("Target", 6),
        ("M&M Corner Market", 14),
        ("Café 24/7!", 7),
        ("   ---   ", 0),
        ("١٢٣", 3),  # Arabic-Indic decimal digits
        ("½²", 0),  # numeric but not letters or decimal digits
    ],
)
def test_retailer_counts_letters_and_digits(retailer, expected):
    assert compute_points(_receipt(retailer=retailer)) == expected


@pytest.mark.parametrize(
    "total, expected",
    [
        ("100.00", 75),
        ("0.00", 75),
        ("10.10", 0),
        ("10.25", 25),
        ("10.50", 25),
        ("35.35", 0),
        ("1e2", 75),
    ],
)
def test_total_round_dollar_and_quarter_bonus(total, expected):
    assert compute_points(_receipt(total=total)) == expected


@pytest.mark.parametrize("count, expected", [(0, 0), (1, 0), (2, 5), (3, 5), (4, 10), (7, 15)])
def test_five_points_per_item_pair(count, expected):
    # "ab" trims to length 2, so the description rule never fires
    items = tuple(Item("ab", "1.00") for _ in range(count))
    assert compute_points(_receipt(items=items)) == expected


def test_description_length_multiple_of_three_earns_price_points():
    """'Emils Cheese Pizza' has 18 characters: ceil(12.25 * 0.2) = 3."""
    receipt = _receipt(items=(Item("Emils Cheese Pizza", "12.25"),))
    assert compute_points(receipt) == 3


def test_description_is_trimmed_before_measuring():
    receipt = _receipt(items=(Item("   Klarbrunn 12-PK 12 FL OZ  ", "12.00"),))
    assert compute_points(receipt) == 3


def test_whitespace_only_description_qualifies():
    """'   ' trims to length 0, and 0 is a multiple of 3."""
    receipt = _receipt(items=(Item("   ", "12.25"),))
    assert compute_points(receipt) == 3


def test_non_qualifying_item_price_is_never_parsed():
    """A malformed price on an item that does not qualify is not an error."""
    receipt = _receipt(items=(Item("Mountain Dew 12PK", "not-a-price"),))
    assert compute_points(receipt) == 0


@pytest.mark.parametrize(
    "purchase_date, expected",
    [("2022-01-01", 6), ("2022-01-31", 6), ("2022-01-02", 0), ("2022-02-28", 0)],
)
def test_odd_purchase_day(purchase_date, expected):
    assert compute_points(_receipt(purchase_date=purchase_date)) == expected


@pytest.mark.parametrize(
    "purchase_time, expected",
    [
        ("13:59", 0),
        ("14:00", 0),
        ("14:01", 10),
        ("15:00", 10),
        ("15:59", 10),
        ("16:00", 0),
        ("16:01", 0),
    ],
)
def test_afternoon_window_is_exclusive(purchase_time, expected):
    assert compute_points(_receipt(purchase_time=purchase_time)) == expected


def test_target_receipt_totals_28():
    receipt = _load("target.json")
    assert compute_points(receipt) == 28
    assert compute_points_breakdown(receipt) == {
        "retailer": 6,
        "round_dollar": 0,
        "quarter": 0,
        "item_pairs": 10,
        "item_descriptions": 6,
        "odd_day": 6,
        "afternoon": 0,
    }


def test_corner_market_receipt_totals_109():
    receipt = _load("corner-market.json")
    assert compute_points(receipt) == 109
    breakdown = compute_points_breakdown(receipt)
    assert breakdown["retailer"] == 14
    assert breakdown["round_dollar"] + breakdown["quarter"] == 75
    assert breakdown["item_pairs"] == 10
    assert breakdown["afternoon"] == 10


def test_breakdown_sums_to_points():
    receipt = _load("corner-market.json")
    assert sum(compute_points_breakdown(receipt).values()) == compute_points(receipt)

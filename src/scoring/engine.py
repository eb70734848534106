"""Deterministic receipt points engine. Pure code, no I/O."""

import math

from src.receipt import Receipt
from src.scoring.parsing import parse_date, parse_decimal, parse_time

ROUND_DOLLAR_POINTS = 50
QUARTER_POINTS = 25
QUARTER = 0.25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_DIVISOR = 3
DESCRIPTION_PRICE_MULTIPLIER = 0.2
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


class ReceiptValidationError(ValueError):
    """Raised when a receipt field cannot be parsed. Scoring is aborted."""


class InvalidTotalError(ReceiptValidationError):
    def __init__(self):
        super().__init__("Failed to parse receipt total to float.")


class InvalidDateError(ReceiptValidationError):
    def __init__(self):
        super().__init__("Failed to parse receipt purchaseDate.")


class InvalidTimeError(ReceiptValidationError):
    def __init__(self):
        super().__init__("Failed to parse receipt purchaseTime.")


class InvalidItemPriceError(ReceiptValidationError):
    """Raised for a qualifying item whose price is not a decimal number."""

    def __init__(self, description: str):
        super().__init__(f"Failed to parse price to float for item: {description}")
        self.description = description


def count_alphanumeric(text: str) -> int:
    """Count Unicode letters and decimal digits. Punctuation and whitespace are ignored."""
    return sum(1 for c in text if c.isalpha() or c.isdecimal())


def _item_description_points(receipt: Receipt) -> int:
    # Only qualifying items have their price parsed.
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % DESCRIPTION_LENGTH_DIVISOR != 0:
            continue
        try:
            price = parse_decimal(item.price)
        except ValueError as e:
            raise InvalidItemPriceError(item.short_description) from e
        points += math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)
    return points


def compute_points_breakdown(receipt: Receipt) -> dict:
    """
    Validate the receipt and return the points earned per rule.
    Fields are parsed in order: total, purchaseDate, purchaseTime, then item prices.
    Raises a ReceiptValidationError subclass on the first field that fails.
    """
    try:
        total = parse_decimal(receipt.total)
    except ValueError as e:
        raise InvalidTotalError() from e
    try:
        purchase_date = parse_date(receipt.purchase_date)
    except ValueError as e:
        raise InvalidDateError() from e
    try:
        purchase_time = parse_time(receipt.purchase_time)
    except ValueError as e:
        raise InvalidTimeError() from e

    hour, minute = purchase_time.hour, purchase_time.minute
    # 14:00 exactly does not count, neither does 16:00
    afternoon = (hour == AFTERNOON_START_HOUR and minute > 0) or (
        AFTERNOON_START_HOUR < hour < AFTERNOON_END_HOUR
    )

    return {
        "retailer": count_alphanumeric(receipt.retailer),
        "round_dollar": ROUND_DOLLAR_POINTS if math.floor(total) == total else 0,
        "quarter": QUARTER_POINTS if math.fmod(total, QUARTER) == 0 else 0,
        "item_pairs": ITEM_PAIR_POINTS * (len(receipt.items) // 2),
        "item_descriptions": _item_description_points(receipt),
        "odd_day": ODD_DAY_POINTS if purchase_date.day % 2 == 1 else 0,
        "afternoon": AFTERNOON_POINTS if afternoon else 0,
    }


def compute_points(receipt: Receipt) -> int:
    """Total reward points for a receipt. Deterministic for identical input."""
    return sum(compute_points_breakdown(receipt).values())

"""Deterministic receipt points engine."""

from src.scoring.engine import (
    InvalidDateError,
    InvalidItemPriceError,
    InvalidTimeError,
    InvalidTotalError,
    ReceiptValidationError,
    compute_points,
    compute_points_breakdown,
)

__all__ = [
    "compute_points",
    "compute_points_breakdown",
    "ReceiptValidationError",
    "InvalidTotalError",
    "InvalidDateError",
    "InvalidTimeError",
    "InvalidItemPriceError",
]

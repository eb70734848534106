"""Receipt model and JSON payload binding."""

from dataclasses import dataclass

import jsonschema

from src.validation import validate_receipt_payload


class ReceiptBindingError(ValueError):
    """Raised when a payload does not have the shape of a Receipt."""

    def __init__(self, detail: str = ""):
        super().__init__("Failed to bind the request's JSON to type: Receipt.")
        self.detail = detail


@dataclass(frozen=True)
class Item:
    short_description: str
    price: str


@dataclass(frozen=True)
class Receipt:
    """A submitted purchase receipt. Values are raw strings; scoring parses them."""

    retailer: str
    purchase_date: str
    purchase_time: str
    items: tuple[Item, ...]
    total: str


def receipt_from_payload(data) -> Receipt:
    """
    Bind a decoded JSON payload to a Receipt.
    Only the shape is checked here. Missing or null strings bind as "" and missing
    items as an empty sequence; value parsing is left to the scoring engine.
    Raises ReceiptBindingError if a field has the wrong JSON type.
    """
    try:
        validate_receipt_payload(data)
    except jsonschema.ValidationError as e:
        raise ReceiptBindingError(e.message) from e

    items = []
    for raw in data.get("items") or []:
        raw = raw or {}
        items.append(Item(short_description=raw.get("shortDescription") or "", price=raw.get("price") or ""))

    return Receipt(
        retailer=data.get("retailer") or "",
        purchase_date=data.get("purchaseDate") or "",
        purchase_time=data.get("purchaseTime") or "",
        items=tuple(items),
        total=data.get("total") or "",
    )

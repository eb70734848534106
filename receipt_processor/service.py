"""Service layer: bind, score, record and look up receipts."""

import logging

from src.ledger import Ledger
from src.receipt import ReceiptBindingError, receipt_from_payload
from src.scoring import ReceiptValidationError, compute_points
from receipt_processor.audit import audit_log

log = logging.getLogger("receipt_processor.service")

POINTS_NOT_FOUND_MESSAGE = "Points not found for that id."


def process_receipt(ledger: Ledger, payload) -> str:
    """
    Score a receipt payload and record the points.
    Returns the new receipt id.
    Raises ReceiptBindingError or ReceiptValidationError; nothing is recorded on failure.
    """
    try:
        receipt = receipt_from_payload(payload)
        points = compute_points(receipt)
    except (ReceiptBindingError, ReceiptValidationError) as e:
        audit_log(action="process_receipt", status="rejected", error=str(e))
        log.warning("Receipt rejected: %s", e)
        raise

    receipt_id = ledger.record(points)
    audit_log(
        action="process_receipt",
        status="success",
        receipt_id=receipt_id,
        points=points,
        item_count=len(receipt.items),
    )
    log.info("Receipt processed: id=%s points=%d items=%d", receipt_id, points, len(receipt.items))
    return receipt_id


def get_points(ledger: Ledger, receipt_id: str) -> int | None:
    """Points for receipt_id, or None if it was never issued."""
    points = ledger.lookup(receipt_id)
    if points is None:
        audit_log(action="get_points", status="not_found", receipt_id=receipt_id)
        log.info("Points not found: id=%s", receipt_id)
    else:
        audit_log(action="get_points", status="success", receipt_id=receipt_id, points=points)
    return points

"""Receipt Processor - reward points for purchase receipts."""

from receipt_processor.service import POINTS_NOT_FOUND_MESSAGE, get_points, process_receipt

__all__ = ["process_receipt", "get_points", "POINTS_NOT_FOUND_MESSAGE"]

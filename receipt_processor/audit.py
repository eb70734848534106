"""Audit trail and application logging for receipt operations."""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
AUDIT_FILENAME = "audit.log"
APP_LOG_FILENAME = "app.log"

log = logging.getLogger("receipt_processor.audit")


def log_dir() -> Path:
    """Directory for app.log and audit.log (RECEIPTS_LOG_DIR, else <project>/logs)."""
    configured = os.getenv("RECEIPTS_LOG_DIR", "").strip()
    return Path(configured) if configured else DEFAULT_LOG_DIR


def _ensure_log_dir() -> Path:
    path = log_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def _iso_ts():
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def audit_log(
    action: str,
    status: str,
    *,
    receipt_id: str | None = None,
    points: int | None = None,
    item_count: int | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """
    Append a structured audit entry to the audit log (JSONL).
    Write failures are logged and dropped; they never fail the request being audited.
    """
    entry = {
        "timestamp": _iso_ts(),
        "action": action,
        "status": status,
    }
    if receipt_id:
        entry["receipt_id"] = receipt_id
    if points is not None:
        entry["points"] = points
    if item_count is not None:
        entry["item_count"] = item_count
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    try:
        path = _ensure_log_dir() / AUDIT_FILENAME
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as e:
        log.warning("Audit write failed (action=%s status=%s): %s", action, status, e)


def setup_app_logging():
    """Configure application logging to console and file."""
    logger = logging.getLogger("receipt_processor")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    try:
        fh = logging.FileHandler(_ensure_log_dir() / APP_LOG_FILENAME, encoding="utf-8")
    except OSError as e:
        logger.warning("File logging disabled, cannot open %s: %s", log_dir(), e)
        return logger
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger

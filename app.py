#!/usr/bin/env python3
"""Flask web app for the Receipt Processor."""

import logging
import os

from dotenv import load_dotenv
from flask import Blueprint, Flask, current_app, jsonify, request

from src.ledger import Ledger
from src.receipt import ReceiptBindingError
from src.scoring import ReceiptValidationError
from receipt_processor.audit import log_dir, setup_app_logging
from receipt_processor.service import POINTS_NOT_FOUND_MESSAGE, get_points, process_receipt

load_dotenv()

log = logging.getLogger("receipt_processor")

HOST = os.getenv("RECEIPTS_HOST", "localhost")
PORT = int(os.getenv("RECEIPTS_PORT", "9090"))
DEBUG = os.getenv("RECEIPTS_DEBUG", "").strip().lower() in ("1", "true", "yes")

receipts = Blueprint("receipts", __name__)


def _ledger() -> Ledger:
    return current_app.extensions["ledger"]


@receipts.route("/receipts/process", methods=["POST"])
def api_process_receipt():
    """Score a receipt and return the id its points are stored under."""
    payload = request.get_json(force=True, silent=True)
    try:
        receipt_id = process_receipt(_ledger(), payload)
    except (ReceiptBindingError, ReceiptValidationError) as e:
        return jsonify({"message": str(e)}), 400
    return jsonify({"id": receipt_id}), 201


@receipts.route("/receipts/<receipt_id>/points", methods=["GET"])
def api_get_points(receipt_id):
    """Return the points recorded for a receipt id."""
    points = get_points(_ledger(), receipt_id)
    if points is None:
        return jsonify({"message": POINTS_NOT_FOUND_MESSAGE}), 404
    return jsonify({"points": points})


def create_app(ledger: Ledger | None = None, id_factory=None) -> Flask:
    """
    Build the Flask app. The app owns its Ledger; pass one in, or an id factory
    for a new Ledger, to control ids in tests. Passing both is a ValueError.
    """
    if ledger is not None and id_factory is not None:
        raise ValueError("Pass either ledger or id_factory, not both")
    setup_app_logging()
    app = Flask(__name__)
    if ledger is None:
        ledger = Ledger(id_factory) if id_factory else Ledger()
    app.extensions["ledger"] = ledger
    app.register_blueprint(receipts)
    return app


if __name__ == "__main__":
    setup_app_logging()
    log.info("Receipt Processor starting on http://%s:%d | Logs: %s", HOST, PORT, log_dir())
    create_app().run(host=HOST, port=PORT, debug=DEBUG, threaded=True)

#!/usr/bin/env python3
"""CLI for scoring receipt JSON files without running the web app."""

import argparse
import json
import sys
from pathlib import Path

from src.receipt import ReceiptBindingError, receipt_from_payload
from src.scoring import ReceiptValidationError, compute_points_breakdown


def score_file(path: Path) -> dict:
    """Bind and score one receipt file. Returns the per-rule breakdown."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ReceiptBindingError(str(e)) from e
    return compute_points_breakdown(receipt_from_payload(payload))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute reward points for one or more receipt JSON files."
    )
    parser.add_argument(
        "receipts",
        type=Path,
        nargs="+",
        help="Path(s) to receipt JSON files",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Show points earned per rule",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )

    args = parser.parse_args(argv)

    results = {}
    for path in args.receipts:
        if not path.is_file():
            print(f"Error: Receipt file not found: {path}", file=sys.stderr)
            return 1
        try:
            breakdown = score_file(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {path}: cannot read receipt file: {e}", file=sys.stderr)
            return 1
        except (ReceiptBindingError, ReceiptValidationError) as e:
            print(f"Error: {path}: {e}", file=sys.stderr)
            return 1
        results[str(path)] = {"points": sum(breakdown.values()), "breakdown": breakdown}

    if args.json:
        if not args.breakdown:
            results = {k: {"points": v["points"]} for k, v in results.items()}
        print(json.dumps(results, indent=2))
        return 0

    for name, result in results.items():
        print(f"{name}: {result['points']} points")
        if args.breakdown:
            for rule, points in result["breakdown"].items():
                print(f"  {rule.replace('_', ' ')}: {points}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

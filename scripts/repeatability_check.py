#!/usr/bin/env python3
"""
Repeatability harness: score the same receipt N times; assert identical results.
Exits 0 if stable, 1 if unstable. Prints the per-rule breakdown of every run that differs.

Usage: python scripts/repeatability_check.py [--runs 10] [--receipt receipts/target.json]
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.receipt import receipt_from_payload
from src.scoring import compute_points_breakdown

DEFAULT_RUNS = 10
DEFAULT_RECEIPT = "receipts/target.json"


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--receipt", default=DEFAULT_RECEIPT)
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    receipt_path = root / args.receipt
    if not receipt_path.exists():
        print(f"Error: Receipt file not found: {receipt_path}", file=sys.stderr)
        sys.exit(1)

    payload = json.loads(receipt_path.read_text(encoding="utf-8"))
    results = []
    for _ in range(args.runs):
        results.append(compute_points_breakdown(receipt_from_payload(payload)))

    first = results[0]
    unstable = [(i, r) for i, r in enumerate(results[1:], start=2) if r != first]
    print(f"Receipt: {receipt_path}")
    print(f"Runs: {args.runs}  points: {sum(first.values())}")
    if not unstable:
        print("STABLE: all runs identical")
        sys.exit(0)

    print("UNSTABLE: breakdown differs from run 1")
    print(f"  run 1: {first}")
    for i, r in unstable:
        print(f"  run {i}: {r}")
    sys.exit(1)


if __name__ == "__main__":
    main()

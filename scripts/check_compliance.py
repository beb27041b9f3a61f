"""
Print 90/180 compliance for a JSON file of trips.

The file holds a list of trip objects ({"entry_date", "exit_date", "country", ...})
or an object mapping subject ids to such lists.

Usage (from project root):
  python scripts/check_compliance.py trips.json
  python scripts/check_compliance.py trips.json --date 2026-03-01
  python scripts/check_compliance.py trips.json --date 2026-03-01 --stay 14
"""
import os
import sys
import json
import logging
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from schengen import (
    ComplianceConfig,
    ComplianceError,
    batch_calculate_compliance,
    create_compliance_calculator,
    get_display_status,
    get_risk_action,
)
from schengen.config import get_settings
from schengen.models import MEMBERSHIP_VERSION
from schengen.services.dates import utc_today


def _print_subject(name, trips, config, stay):
    calc = create_compliance_calculator(trips, config)
    result = calc.evaluate()
    status = get_display_status(result.days_remaining, config.thresholds)
    print(f"{name}: {result.days_used} used, {result.days_remaining} remaining on {result.reference_date} [{status.value}]")
    print(f"  {get_risk_action(status, result.days_remaining)}")
    if stay:
        safe = calc.earliest_safe_entry(stay)
        if safe is None:
            print(f"  A {stay}-day stay does not fit the {config.limit}-day limit.")
        else:
            print(f"  Earliest safe start for a {stay}-day stay: {safe}")


def main():
    parser = argparse.ArgumentParser(description="Check Schengen 90/180 compliance for a trips file")
    parser.add_argument("path", help="JSON file with trips")
    parser.add_argument("--date", type=str, default=None, help="Reference date (YYYY-MM-DD), default today (UTC)")
    parser.add_argument("--stay", type=int, default=0, help="Also find the earliest safe start for a stay of this many days")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level, format="%(levelname)s %(name)s: %(message)s")

    with open(args.path, encoding="utf-8") as f:
        data = json.load(f)

    try:
        config = ComplianceConfig(reference_date=args.date or utc_today())
        print(f"Schengen membership as of {MEMBERSHIP_VERSION}, reference date {config.reference_date}")
        if isinstance(data, dict):
            results = batch_calculate_compliance(data, config.reference_date)
            print(f"Evaluated {len(results)} subject(s).")
            for subject, trips in data.items():
                _print_subject(subject, trips, config, args.stay)
        else:
            _print_subject("trips", data, config, args.stay)
    except ComplianceError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)

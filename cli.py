#!/usr/bin/env python3
"""
Flex worktime calculator (2주 단위 자율출퇴근제 근무시간 계산기)
CLI: import HR timesheet rows into a saved pay period and print work/OT totals.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from flex_worktime.api_data import build_api_response
from flex_worktime.config import Config
from flex_worktime.run import run


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Biweekly flex worktime calculator: work time, OT and approved OT for a 2-week period.",
    )
    parser.add_argument(
        "--state",
        type=Path,
        default=Config.STATE_PATH,
        help=f"Saved pay period (JSON). Default: {Config.STATE_PATH}",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--import",
        dest="hr_file",
        type=Path,
        default=None,
        help="HR export to import into one week (TXT, CSV, Excel, or PDF)",
    )
    source.add_argument(
        "--paste",
        action="store_true",
        help="Read pasted HR rows from stdin and import into one week",
    )
    parser.add_argument(
        "--week",
        choices=["1", "2"],
        default=None,
        help="Target week for --import/--paste",
    )
    parser.add_argument(
        "--restore",
        type=str,
        default=None,
        help="Replace the saved period with one from a share link (#!data=...)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete the saved period and start empty",
    )
    parser.add_argument(
        "--share",
        action="store_true",
        help="Print the share link fragment for the period",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print period, summary and per-day figures as JSON",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if (args.hr_file or args.paste) and not args.week:
        print("Error: --week is required with --import/--paste", file=sys.stderr)
        return 1
    if args.hr_file and not args.hr_file.exists():
        print(f"Error: HR file not found: {args.hr_file}", file=sys.stderr)
        return 1

    try:
        result = run(
            state_path=args.state,
            hr_path=args.hr_file,
            hr_text=sys.stdin.read() if args.paste else None,
            week=args.week,
            restore_fragment=args.restore,
            reset=args.reset,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(build_api_response(result.period, result.summary), ensure_ascii=False, indent=2))
        return 0

    print(result.run_summary_text)
    print()
    print(result.summary_text)
    print()
    print(result.table_text)
    if args.share:
        print()
        print("--- SHARE LINK FRAGMENT ---")
        print(result.share_fragment)
    return 0


if __name__ == "__main__":
    sys.exit(main())

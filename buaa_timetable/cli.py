"""Command line interface for the BUAA timetable parser."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import List

from . import decoder, parser, timetable, util


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="BUAA timetable parser")
    ap.add_argument("source", type=Path, help="Saved schedule detail JSON response")
    ap.add_argument(
        "--timetable", action="store_true", help="Print the period time table"
    )
    ap.add_argument(
        "--dump-json",
        type=Path,
        metavar="PATH",
        help="Write the parsed courses to PATH as JSON",
    )
    ap.add_argument("--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    util.configure_logging(args.verbose)

    try:
        source = args.source.read_text(encoding="utf-8")
        courses = parser.generate_course_list(source)
    except (OSError, UnicodeDecodeError) as exc:
        logging.error("Could not read %s: %s", args.source, exc)
        return 1
    except decoder.DecodeError as exc:
        logging.error("Could not decode %s: %s", args.source, exc)
        return 1

    for course in courses:
        print(util.format_course(course))

    if args.timetable:
        table = timetable.generate_time_table()
        print(table.name)
        for slot in table.time_list:
            print(f"{slot.node:>2} {slot.start_time}-{slot.end_time}")

    if args.dump_json:
        args.dump_json.parent.mkdir(parents=True, exist_ok=True)
        payload = [dataclasses.asdict(c) for c in courses]
        args.dump_json.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

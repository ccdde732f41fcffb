"""Week annotation parsing, e.g. ``[1-3周(单),5周]``."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .models import WeekRule, WeekType

# start week, optional end week, optional parity marker
WEEK_PATTERN_RE = re.compile(r"([0-9]+)(?:-([0-9]+))?周(?:\(([单双])\))?")

PARITY = {"单": WeekType.ODD, "双": WeekType.EVEN}


def _strip_brackets(text: str) -> str:
    if len(text) >= 2 and text.startswith("[") and text.endswith("]"):
        return text[1:-1]
    return text


def parse_week_pattern(pattern: str) -> Optional[WeekRule]:
    """Parse one pattern such as ``1-3周(单)``, ``7-13周`` or ``5周``."""
    m = WEEK_PATTERN_RE.search(pattern)
    if not m:
        return None
    start_str, end_str, parity = m.groups()
    start = int(start_str)
    end = int(end_str) if end_str else start
    return WeekRule(start, end, PARITY.get(parity, WeekType.ALL))


def parse_weeks(annotation: str) -> List[WeekRule]:
    rules: List[WeekRule] = []
    for pattern in _strip_brackets(annotation).split(","):
        rule = parse_week_pattern(pattern.strip())
        if rule is None:
            logging.debug("Dropping unrecognised week pattern %r", pattern)
            continue
        rules.append(rule)
    return rules

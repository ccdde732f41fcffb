"""Utility helpers."""

from __future__ import annotations

import logging

from .models import Course, WeekType

_PARITY_LABELS = {WeekType.ODD: "(单)", WeekType.EVEN: "(双)"}
_WEEKDAYS = {1: "周一", 2: "周二", 3: "周三", 4: "周四", 5: "周五", 6: "周六", 7: "周日"}


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


def week_label(course: Course) -> str:
    """Render the week range back in the API's notation, e.g. ``1-3周(单)``."""
    if course.start_week == course.end_week:
        weeks = f"{course.start_week}周"
    else:
        weeks = f"{course.start_week}-{course.end_week}周"
    return weeks + _PARITY_LABELS.get(course.type, "")


def format_course(course: Course) -> str:
    day = _WEEKDAYS.get(course.day, "")
    return (
        f"{day} {course.start_node}-{course.end_node}节 "
        f"{week_label(course)} {course.name} {course.teacher} {course.room}"
    ).strip()

"""Expand raw course items into normalized course occurrences."""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Optional, Tuple

from .decoder import decode_response
from .models import Course, CourseItem
from .weeks import parse_weeks

TEACHER_MARKER = "上课教师："
BLOCK_SEPARATOR = " "
PART_SEPARATOR = "/"
NOTE_INDEX = 8
# plain decimal, no padding, underscores or inf/nan
CREDIT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

AnnotationLocator = Callable[[CourseItem], Optional[str]]


def locate_teacher_annotation(item: CourseItem) -> Optional[str]:
    """Return the text after the teaching staff marker, or None if absent."""
    for detail in item.titleDetail:
        if detail.startswith(TEACHER_MARKER):
            return detail[len(TEACHER_MARKER):]
    return None


def split_teacher_blocks(annotation: str) -> List[Tuple[str, str]]:
    """Split ``name/[weeks]/periods`` blocks into (teacher, weeks) pairs."""
    blocks: List[Tuple[str, str]] = []
    for block in annotation.split(BLOCK_SEPARATOR):
        parts = block.split(PART_SEPARATOR)
        if len(parts) < 2:
            if block:
                logging.debug("Dropping teacher block without weeks: %r", block)
            continue
        # trailing parts repeat the item's own periods
        blocks.append((parts[0], parts[1]))
    return blocks


def parse_credit(credit: str) -> float:
    if not CREDIT_RE.fullmatch(credit):
        logging.debug("Unparseable credit %r, using 0", credit)
        return 0.0
    return float(credit)


def _note(item: CourseItem) -> str:
    if len(item.titleDetail) > NOTE_INDEX:
        return item.titleDetail[NOTE_INDEX]
    return ""


def parse_course_item(
    item: CourseItem,
    *,
    locate: AnnotationLocator = locate_teacher_annotation,
) -> List[Course]:
    annotation = locate(item)
    if annotation is None:
        logging.debug("No teacher annotation for %s", item.courseName)
        return []

    credit = parse_credit(item.credit)
    note = _note(item)
    courses: List[Course] = []
    for teacher, weeks in split_teacher_blocks(annotation):
        for rule in parse_weeks(weeks):
            courses.append(
                Course(
                    name=item.courseName,
                    day=item.dayOfWeek,
                    room=item.placeName,
                    teacher=teacher,
                    start_node=item.beginSection,
                    end_node=item.endSection,
                    start_week=rule.start_week,
                    end_week=rule.end_week,
                    type=rule.type,
                    credit=credit,
                    note=note,
                    start_time=item.startTime,
                    end_time=item.endTime,
                )
            )
    return courses


def expand_items(
    items: Iterable[CourseItem],
    *,
    locate: AnnotationLocator = locate_teacher_annotation,
) -> List[Course]:
    courses: List[Course] = []
    for item in items:
        courses.extend(parse_course_item(item, locate=locate))
    return courses


def generate_course_list(
    source: str,
    *,
    locate: AnnotationLocator = locate_teacher_annotation,
) -> List[Course]:
    """Decode a response document and expand its arranged course items."""
    info = decode_response(source)
    courses = expand_items(info.datas.arrangedList, locate=locate)
    logging.info(
        "Parsed %d courses from %d arranged items",
        len(courses),
        len(info.datas.arrangedList),
    )
    return courses

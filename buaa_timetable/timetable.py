"""Static period/clock-time table."""

from __future__ import annotations

from .models import TimeDetail, TimeTable

INSTITUTION_NAME = "北京航空航天大学"
NODES = 14

_SLOTS = (
    # morning
    ("08:00", "08:45"),
    ("08:50", "09:35"),
    ("09:50", "10:35"),
    ("10:40", "11:25"),
    ("11:30", "12:15"),
    # afternoon
    ("14:00", "14:45"),
    ("14:50", "15:35"),
    ("15:50", "16:35"),
    ("16:40", "17:25"),
    ("17:30", "18:15"),
    # evening
    ("19:00", "19:45"),
    ("19:50", "20:35"),
    ("20:40", "21:25"),
    ("21:30", "22:15"),
)


def get_nodes() -> int:
    """Maximum number of periods in one day."""
    return NODES


def generate_time_table() -> TimeTable:
    return TimeTable(
        name=INSTITUTION_NAME,
        time_list=tuple(
            TimeDetail(node, start, end)
            for node, (start, end) in enumerate(_SLOTS, start=1)
        ),
    )

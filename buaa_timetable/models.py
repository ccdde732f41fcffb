"""Data models for timetable entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class ApiModel(BaseModel):
    """Base for records decoded from the API; null or blank means the default."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields[info.field_name]
        if value is None or (value == "" and field.annotation is int):
            return field.get_default(call_default_factory=True)
        return value


class CellDetail(ApiModel):
    color: str = ""
    text: str = ""


class CourseItem(ApiModel):
    """One schedule entry as delivered by the API, field names kept verbatim."""

    week: str = ""
    courseCode: str = ""
    credit: str = ""
    courseName: str = ""
    byCode: str = ""
    beginSection: int = 0
    endSection: int = 0
    titleDetail: Tuple[str, ...] = ()
    multiCourse: str = ""
    teachClassName: str = ""
    placeName: str = ""
    teachingTarget: str = ""
    weeksAndTeachers: str = ""
    teachClassId: str = ""
    cellDetail: Tuple[CellDetail, ...] = ()
    tags: Tuple[str, ...] = ()
    courseSerialNo: str = ""
    startTime: str = ""  # HH:MM
    endTime: str = ""  # HH:MM
    color: str = ""
    dayOfWeek: int = 0


class Datas(ApiModel):
    arrangedList: Tuple[CourseItem, ...] = ()
    notArrangeList: Tuple[CourseItem, ...] = ()
    practiceList: Tuple[CourseItem, ...] = ()
    code: str = ""
    name: str = ""


class CourseInfo(ApiModel):
    code: int = 0
    msg: str = ""
    datas: Datas = Datas()


class WeekType(IntEnum):
    ALL = 0
    ODD = 1
    EVEN = 2


@dataclass(frozen=True)
class WeekRule:
    start_week: int
    end_week: int
    type: WeekType = WeekType.ALL


@dataclass(frozen=True)
class Course:
    name: str
    day: int
    room: str
    teacher: str
    start_node: int
    end_node: int
    start_week: int
    end_week: int
    type: WeekType
    credit: float = 0.0
    note: str = ""
    start_time: str = ""
    end_time: str = ""


@dataclass(frozen=True)
class TimeDetail:
    node: int
    start_time: str
    end_time: str


@dataclass(frozen=True)
class TimeTable:
    name: str
    time_list: Tuple[TimeDetail, ...] = ()

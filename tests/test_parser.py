import json

import pytest

from buaa_timetable import parser
from buaa_timetable.decoder import DecodeError
from buaa_timetable.models import Course, CourseItem, WeekType


def make_item(**overrides):
    base = {
        "courseName": "数据结构",
        "dayOfWeek": 3,
        "placeName": "主M201",
        "beginSection": 6,
        "endSection": 7,
        "credit": "3",
        "startTime": "14:00",
        "endTime": "15:35",
        "titleDetail": (
            "课程：数据结构",
            "上课教师：张三/[1-3周,5周]/6-7节 李四/[6-10周(双)]/6-7节",
        ),
    }
    base.update(overrides)
    return CourseItem(**base)


def test_locator_returns_text_after_marker():
    item = make_item(titleDetail=("其他", "上课教师：王五/[1周]/1-2节"))
    assert parser.locate_teacher_annotation(item) == "王五/[1周]/1-2节"


def test_locator_missing_marker():
    item = make_item(titleDetail=("课程：数据结构", "教师：张三/[1周]"))
    assert parser.locate_teacher_annotation(item) is None


def test_split_drops_blocks_without_weeks():
    blocks = parser.split_teacher_blocks("张三/[1-3周] 坏块 李四/[5周]/1-2节")
    assert blocks == [("张三", "[1-3周]"), ("李四", "[5周]")]


def test_expands_teacher_and_week_blocks_in_order():
    courses = parser.parse_course_item(make_item())
    assert [(c.teacher, c.start_week, c.end_week, c.type) for c in courses] == [
        ("张三", 1, 3, WeekType.ALL),
        ("张三", 5, 5, WeekType.ALL),
        ("李四", 6, 10, WeekType.EVEN),
    ]
    for c in courses:
        assert c.name == "数据结构"
        assert c.day == 3
        assert c.room == "主M201"
        assert (c.start_node, c.end_node) == (6, 7)
        assert (c.start_time, c.end_time) == ("14:00", "15:35")
        assert c.credit == 3.0
        assert c.note == ""


def test_no_annotation_gives_no_courses():
    assert parser.parse_course_item(make_item(titleDetail=("课程：数据结构",))) == []
    assert parser.parse_course_item(make_item(titleDetail=())) == []


def test_occurrence_count_matches_valid_patterns():
    item = make_item(
        titleDetail=("上课教师：甲/[1周,x,2-4周(单)]/1节 乙 丙/[bad]/1节 丁/[9周]",)
    )
    courses = parser.parse_course_item(item)
    assert [c.teacher for c in courses] == ["甲", "甲", "丁"]


@pytest.mark.parametrize(
    "credit, expected",
    [
        ("2.5", 2.5),
        ("abc", 0.0),
        ("", 0.0),
        ("4", 4.0),
        ("-1", -1.0),
        (".5", 0.5),
        ("1_0", 0.0),
        (" 2.5 ", 0.0),
        ("inf", 0.0),
        ("nan", 0.0),
    ],
)
def test_credit_parsing(credit, expected):
    [course] = parser.parse_course_item(
        make_item(credit=credit, titleDetail=("上课教师：张三/[1周]",))
    )
    assert course.credit == expected


def test_note_taken_from_ninth_detail():
    details = tuple(f"d{i}" for i in range(8)) + ("备注：单周实验",)
    details = ("上课教师：张三/[1-16周]/1-2节",) + details[1:]
    [course] = parser.parse_course_item(make_item(titleDetail=details))
    assert course.note == "备注：单周实验"


def test_custom_locator():
    item = make_item(weeksAndTeachers="赵六/[2周(双)]")
    courses = parser.parse_course_item(item, locate=lambda i: i.weeksAndTeachers)
    assert courses == [
        Course(
            name="数据结构",
            day=3,
            room="主M201",
            teacher="赵六",
            start_node=6,
            end_node=7,
            start_week=2,
            end_week=2,
            type=WeekType.EVEN,
            credit=3.0,
            note="",
            start_time="14:00",
            end_time="15:35",
        )
    ]


def test_generate_course_list_flattens_in_document_order():
    doc = {
        "code": 0,
        "msg": "success",
        "datas": {
            "arrangedList": [
                {
                    "courseName": "高等数学",
                    "dayOfWeek": 1,
                    "titleDetail": ["上课教师：甲/[1-2周]/1-2节 乙/[3周]/1-2节"],
                },
                {"courseName": "无教师", "titleDetail": ["课程：无教师"]},
                {
                    "courseName": "大学物理",
                    "dayOfWeek": 2,
                    "credit": "abc",
                    "titleDetail": ["上课教师：丙/[4周(单)]/3-4节"],
                },
            ],
            "notArrangeList": [
                {"courseName": "未排课", "titleDetail": ["上课教师：丁/[1周]"]}
            ],
        },
    }
    courses = parser.generate_course_list(json.dumps(doc, ensure_ascii=False))
    assert [(c.name, c.teacher) for c in courses] == [
        ("高等数学", "甲"),
        ("高等数学", "乙"),
        ("大学物理", "丙"),
    ]
    assert courses[2].credit == 0.0
    assert courses[2].type == WeekType.ODD


def test_generate_course_list_empty_or_absent_arranged_list():
    assert parser.generate_course_list('{"code": 0, "datas": {"arrangedList": []}}') == []
    assert parser.generate_course_list('{"code": 0, "datas": {}}') == []
    assert parser.generate_course_list('{"code": 0}') == []


def test_generate_course_list_rejects_malformed_json():
    with pytest.raises(DecodeError):
        parser.generate_course_list('{"datas": [')


def test_bad_practice_item_does_not_discard_arranged_courses():
    doc = {
        "code": 0,
        "datas": {
            "arrangedList": [
                {"courseName": "线性代数", "titleDetail": ["上课教师：甲/[1-16周]/1-2节"]}
            ],
            "practiceList": [{"dayOfWeek": "星期一"}],
        },
    }
    courses = parser.generate_course_list(json.dumps(doc, ensure_ascii=False))
    assert [(c.name, c.teacher) for c in courses] == [("线性代数", "甲")]

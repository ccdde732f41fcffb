"""Decoder for the schedule detail API response."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from .models import CourseInfo, CourseItem, Datas


class DecodeError(ValueError):
    """Raised when a response document is not JSON or does not fit the schema."""


_COURSE_LISTS = ("arrangedList", "notArrangeList", "practiceList")


def _decode_items(obj: Dict[str, Any], key: str) -> Tuple[CourseItem, ...]:
    raw_items = obj.get(key)
    if raw_items is None:
        return ()
    if not isinstance(raw_items, list):
        raise DecodeError(f"{key}: expected list, got {type(raw_items).__name__}")
    items = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(CourseItem.model_validate(raw))
        except ValidationError as exc:
            logging.debug("Skipping malformed %s[%d]: %s", key, index, exc)
    return tuple(items)


def _decode_datas(raw: Any) -> Dict[str, Any]:
    if raw is None:
        logging.info("Response carries no datas payload, treating as empty")
        return {}
    if not isinstance(raw, dict):
        raise DecodeError(f"datas: expected object, got {type(raw).__name__}")
    fields = {key: raw.get(key) for key in ("code", "name")}
    fields.update((key, _decode_items(raw, key)) for key in _COURSE_LISTS)
    return fields


def decode_response(source: str) -> CourseInfo:
    """Decode the raw JSON text of a schedule detail response."""
    try:
        data = json.loads(source)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"response is not json: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError(f"response: expected object, got {type(data).__name__}")
    try:
        info = CourseInfo(
            code=data.get("code"),
            msg=data.get("msg"),
            datas=Datas.model_validate(_decode_datas(data.get("datas"))),
        )
    except ValidationError as exc:
        raise DecodeError(str(exc)) from exc
    logging.debug(
        "Decoded response code=%s with %d arranged items",
        info.code,
        len(info.datas.arrangedList),
    )
    return info

"""Conversion of JSON payloads into zone and rule records."""
from __future__ import annotations

from typing import Any

from ..errors import LoadError
from ..ir import DayKind, DayOfWeek, Month, RuleDay, RuleRec, Time, TimeType, Timezone, ZoneRec


def _require(payload: dict[str, Any], key: str, expected: type | tuple[type, ...], where: str) -> Any:
    if key not in payload:
        raise LoadError(f"{where}: missing '{key}'")
    value = payload[key]
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    # JSON true/false load as bool, which is an int subclass.
    if not isinstance(value, expected_types) or (isinstance(value, bool) and bool not in expected_types):
        raise LoadError(f"{where}: '{key}' has unexpected type {type(value).__name__}")
    if isinstance(value, str):
        require_encodable(value, f"'{key}'", where)
    return value


def require_encodable(text: str, what: str, where: str) -> None:
    """Reject text the UTF-8 output file cannot hold, such as lone surrogates."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise LoadError(f"{where}: {what} is not valid Unicode text ({exc.reason})") from None


def rule_day_from_payload(payload: Any, where: str) -> RuleDay:
    if not isinstance(payload, dict):
        raise LoadError(f"{where}: 'day' must be an object")
    raw_kind = _require(payload, "kind", str, where)
    try:
        kind = DayKind(raw_kind)
    except ValueError:
        supported = ", ".join(k.value for k in DayKind)
        raise LoadError(f"{where}: unknown day kind '{raw_kind}'. Supported kinds: {supported}") from None

    day = payload.get("day")
    if day is not None and (isinstance(day, bool) or not isinstance(day, int)):
        raise LoadError(f"{where}: 'day' must be an integer")
    weekday = None
    raw_weekday = payload.get("weekday")
    if raw_weekday is not None:
        try:
            weekday = DayOfWeek.lookup(raw_weekday)
        except (KeyError, ValueError) as exc:
            raise LoadError(f"{where}: {exc}") from exc

    try:
        return RuleDay(kind=kind, day=day, weekday=weekday)
    except ValueError as exc:
        raise LoadError(f"{where}: {exc}") from exc


def rule_from_payload(payload: Any, where: str) -> RuleRec:
    if not isinstance(payload, dict):
        raise LoadError(f"{where}: rule must be an object")

    raw_month = _require(payload, "month", (int, str), where)
    try:
        month = Month.lookup(raw_month)
    except (KeyError, ValueError) as exc:
        raise LoadError(f"{where}: unknown month {raw_month!r}") from exc

    day = rule_day_from_payload(payload.get("day"), where)

    raw_time = payload.get("time")
    if not isinstance(raw_time, dict):
        raise LoadError(f"{where}: 'time' must be an object")
    seconds = _require(raw_time, "seconds", int, where)
    try:
        time_type = TimeType.lookup(str(raw_time.get("type", "wall")))
    except ValueError as exc:
        raise LoadError(f"{where}: {exc}") from exc

    return RuleRec(
        month=month,
        day=day,
        time=Time(seconds=seconds, type=time_type),
        save=_require(payload, "save", int, where),
        line=_require(payload, "line", str, where),
    )


def timezone_from_payload(payload: Any, where: str) -> Timezone:
    if not isinstance(payload, dict):
        raise LoadError(f"{where}: zone must be an object")
    name = _require(payload, "name", str, where).strip()
    if not name:
        raise LoadError(f"{where}: zone name must not be empty")
    where = f"{where} ({name})"
    raw_offset = _require(payload, "raw_offset", int, where)
    line = _require(payload, "line", str, where)

    raw_rules = payload.get("rules") or []
    if not isinstance(raw_rules, list):
        raise LoadError(f"{where}: 'rules' must be a list")
    if raw_rules and len(raw_rules) != 2:
        raise LoadError(f"{where}: expected exactly two rules, got {len(raw_rules)}")
    rules = [rule_from_payload(rule, f"{where} rule {i}") for i, rule in enumerate(raw_rules)]

    return Timezone(
        name=name,
        last_zone_rec=ZoneRec(gmt_offset=raw_offset, line=line),
        last_rules=(rules[0], rules[1]) if rules else None,
    )

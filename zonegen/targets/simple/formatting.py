"""Java literal rendering for the SimpleTimeZone table.

Every function here is pure: it returns text and never touches a stream, so
the table layout can be checked line by line without writing files.
"""
from __future__ import annotations

from ...ir import DayKind, Month, RuleDay, RuleRec, TimeType, ZoneRec

CLASS_NAME = "SimpleTimeZone"
IMPORT_LINE = f"import java.util.{CLASS_NAME};"
RECORD_SEPARATOR = "\t//" + "-" * 68

_TIME_TYPES = {
    TimeType.WALL: f"{CLASS_NAME}.WALL_TIME",
    TimeType.STANDARD: f"{CLASS_NAME}.STANDARD_TIME",
    TimeType.UTC: f"{CLASS_NAME}.UTC_TIME",
}


def format_offset(seconds: int) -> str:
    """Render a signed number of seconds as ONE_HOUR/ONE_MINUTE arithmetic.

    0 -> "0", -18000 -> "-5*ONE_HOUR", 19800 -> "5*ONE_HOUR+30*ONE_MINUTE",
    -12600 -> "-(3*ONE_HOUR+30*ONE_MINUTE)".
    """
    if seconds == 0:
        return "0"
    hours, rest = divmod(abs(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    terms: list[str] = []
    if hours:
        terms.append(f"{hours}*ONE_HOUR")
    if minutes:
        terms.append(f"{minutes}*ONE_MINUTE")
    if secs:
        terms.append(f"{secs}*ONE_SECOND")
    body = "+".join(terms)
    if seconds > 0:
        return body
    if len(terms) == 1:
        return "-" + body
    return f"-({body})"


def format_month(month: Month) -> str:
    return f"Calendar.{month.name}"


def format_day(day: RuleDay) -> str:
    """Day-of-month argument in SimpleTimeZone's rule-mode encoding."""
    if day.kind is DayKind.LAST:
        return "-1"
    if day.kind is DayKind.ON_OR_BEFORE:
        return f"-{day.day}"
    return str(day.day)


def format_day_of_week(day: RuleDay) -> str:
    """Day-of-week argument: 0 for a fixed date, negated for on-or-after/before."""
    if day.kind is DayKind.DATE or day.weekday is None:
        return "0"
    name = f"Calendar.{day.weekday.name}"
    if day.kind is DayKind.LAST:
        return name
    return "-" + name


def format_time_type(time_type: TimeType) -> str:
    return _TIME_TYPES[time_type]


def _rule_fields(rule: RuleRec) -> str:
    return ", ".join(
        [
            format_month(rule.month),
            format_day(rule.day),
            format_day_of_week(rule.day),
            format_offset(rule.time.seconds),
            format_time_type(rule.time.type),
        ]
    )


def format_zone_comment(name: str, zone_rec: ZoneRec) -> str:
    line = zone_rec.line
    if "Zone" not in line:
        line = f"Zone {name}\t{line.strip()}"
    return f"\t// {line}"


def format_header() -> list[str]:
    return [IMPORT_LINE, "", f"    static {CLASS_NAME} zones[] = {{"]


def format_footer() -> list[str]:
    return ["    };"]


def format_zone_record(
    name: str,
    offset: int,
    zone_rec: ZoneRec,
    rules: tuple[RuleRec, RuleRec] | None,
    alias_target: str | None = None,
) -> list[str]:
    """Lines of one table entry: separator, constructor call, provenance comments."""
    head = f'\tnew {CLASS_NAME}({format_offset(offset)}, "{name}"'
    if alias_target is not None:
        head += f" /* {alias_target} */"

    lines = [RECORD_SEPARATOR]
    if rules is None:
        lines.append(head + "),")
    else:
        start, end = rules
        lines.append(head + ",")
        lines.append(f"\t  {_rule_fields(start)},")
        lines.append(f"\t  {_rule_fields(end)},")
        lines.append(f"\t  {format_offset(start.save)}),")
        lines.append(f"\t// {start.line}")
        lines.append(f"\t// {end.line}")
    lines.append(format_zone_comment(name, zone_rec))
    return lines

from __future__ import annotations

from zonegen.ir import DayKind, DayOfWeek, Month, RuleDay, RuleRec, Time, TimeType, ZoneRec
from zonegen.targets.simple.formatting import (
    RECORD_SEPARATOR,
    format_day,
    format_day_of_week,
    format_offset,
    format_time_type,
    format_zone_comment,
    format_zone_record,
)


def _us_rules() -> tuple[RuleRec, RuleRec]:
    start = RuleRec(
        month=Month.MARCH,
        day=RuleDay(DayKind.ON_OR_AFTER, day=8, weekday=DayOfWeek.SUNDAY),
        time=Time(7200, TimeType.WALL),
        save=3600,
        line="Rule US 2007 max - Mar Sun>=8 2:00 1:00 D",
    )
    end = RuleRec(
        month=Month.NOVEMBER,
        day=RuleDay(DayKind.ON_OR_AFTER, day=1, weekday=DayOfWeek.SUNDAY),
        time=Time(7200, TimeType.WALL),
        save=0,
        line="Rule US 2007 max - Nov Sun>=1 2:00 0 S",
    )
    return start, end


def test_format_offset() -> None:
    assert format_offset(0) == "0"
    assert format_offset(3600) == "1*ONE_HOUR"
    assert format_offset(-18000) == "-5*ONE_HOUR"
    assert format_offset(19800) == "5*ONE_HOUR+30*ONE_MINUTE"
    assert format_offset(-12600) == "-(3*ONE_HOUR+30*ONE_MINUTE)"
    assert format_offset(-1800) == "-30*ONE_MINUTE"
    assert format_offset(-17762) == "-(4*ONE_HOUR+56*ONE_MINUTE+2*ONE_SECOND)"


def test_day_encodings_follow_simple_time_zone_modes() -> None:
    exact = RuleDay(DayKind.DATE, day=15)
    last = RuleDay(DayKind.LAST, weekday=DayOfWeek.SUNDAY)
    after = RuleDay(DayKind.ON_OR_AFTER, day=8, weekday=DayOfWeek.SUNDAY)
    before = RuleDay(DayKind.ON_OR_BEFORE, day=25, weekday=DayOfWeek.FRIDAY)

    assert (format_day(exact), format_day_of_week(exact)) == ("15", "0")
    assert (format_day(last), format_day_of_week(last)) == ("-1", "Calendar.SUNDAY")
    assert (format_day(after), format_day_of_week(after)) == ("8", "-Calendar.SUNDAY")
    assert (format_day(before), format_day_of_week(before)) == ("-25", "-Calendar.FRIDAY")


def test_format_time_type() -> None:
    assert format_time_type(TimeType.WALL) == "SimpleTimeZone.WALL_TIME"
    assert format_time_type(TimeType.STANDARD) == "SimpleTimeZone.STANDARD_TIME"
    assert format_time_type(TimeType.UTC) == "SimpleTimeZone.UTC_TIME"


def test_zone_comment_prefixes_name_only_when_missing() -> None:
    assert format_zone_comment("UTC", ZoneRec(0, "  0 - UTC ")) == "\t// Zone UTC\t0 - UTC"
    assert format_zone_comment("UTC", ZoneRec(0, "Zone UTC 0 - UTC")) == "\t// Zone UTC 0 - UTC"


def test_record_without_rules() -> None:
    lines = format_zone_record("UTC", 0, ZoneRec(0, "0 - UTC"), None)

    assert lines == [
        RECORD_SEPARATOR,
        '\tnew SimpleTimeZone(0, "UTC"),',
        "\t// Zone UTC\t0 - UTC",
    ]


def test_record_with_rules_has_eleven_fields_and_three_comments() -> None:
    lines = format_zone_record(
        "America/New_York", -18000, ZoneRec(-18000, "-5:00 US E%sT"), _us_rules()
    )

    assert lines == [
        RECORD_SEPARATOR,
        '\tnew SimpleTimeZone(-5*ONE_HOUR, "America/New_York",',
        "\t  Calendar.MARCH, 8, -Calendar.SUNDAY, 2*ONE_HOUR, SimpleTimeZone.WALL_TIME,",
        "\t  Calendar.NOVEMBER, 1, -Calendar.SUNDAY, 2*ONE_HOUR, SimpleTimeZone.WALL_TIME,",
        "\t  1*ONE_HOUR),",
        "\t// Rule US 2007 max - Mar Sun>=8 2:00 1:00 D",
        "\t// Rule US 2007 max - Nov Sun>=1 2:00 0 S",
        "\t// Zone America/New_York\t-5:00 US E%sT",
    ]
    fields = " ".join(lines[2:5]).replace("),", ",").split(",")
    assert len([f for f in fields if f.strip()]) == 11


def test_record_for_alias_names_its_target() -> None:
    lines = format_zone_record("Etc/UTC", 0, ZoneRec(0, "0 - UTC"), None, alias_target="UTC")

    assert lines[1] == '\tnew SimpleTimeZone(0, "Etc/UTC" /* UTC */),'
    assert lines[2] == "\t// Zone Etc/UTC\t0 - UTC"

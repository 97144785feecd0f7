"""Tests for field resolution and instant assembly.

resolve_fields turns captured text into a CalendarFields record; the
assembler merges the 12-hour clock and composes the final datetime.
"""

import logging
from datetime import date, datetime

import pytest

from tempolex.parsing import (
    CalendarFields,
    Meridiem,
    assemble_instant,
    compile_template,
    merge_hour,
    resolve_fields,
)
from tempolex.runtime import LocaleContext


def _resolve(value: str, template: str, context: LocaleContext) -> CalendarFields:
    compiled = compile_template(template, context.locale_code)
    groups = compiled.match(value)
    assert groups is not None
    return resolve_fields(compiled.tokens, groups, context)


class TestCalendarFieldDefaults:
    """Fields the template does not mention."""

    def test_defaults(self) -> None:
        """Current year, January 1st, midnight, no 12-hour clock."""
        fields = CalendarFields()
        assert fields.year == date.today().year
        assert (fields.month, fields.day) == (0, 1)
        assert (fields.hour, fields.minute, fields.second, fields.millisecond) == (0, 0, 0, 0)
        assert fields.hour12 is None
        assert fields.meridiem is None
        assert fields.weekday is None


class TestResolveFields:
    """Captured groups to fields."""

    def test_numeric_fields(self) -> None:
        """Groups land in their fields with token offsets applied."""
        fields = _resolve("15.06.2024", "DD.MM.YYYY", LocaleContext.create("de-DE"))
        assert (fields.year, fields.month, fields.day) == (2024, 5, 15)

    def test_name_fields(self, fr_fr: LocaleContext) -> None:
        """Names resolve through the locale tables."""
        fields = _resolve("lundi 15 janvier 2024", "dddd D MMMM YYYY", fr_fr)
        assert (fields.weekday, fields.day, fields.month, fields.year) == (1, 15, 0, 2024)

    def test_meridiem_stored_as_enum(self, en_us: LocaleContext) -> None:
        """The meridiem field holds a Meridiem."""
        fields = _resolve("01:30 PM", "hh:mm A", en_us)
        assert fields.hour12 == 1
        assert fields.meridiem is Meridiem.PM
        assert fields.minute == 30

    def test_last_token_wins(self, en_us: LocaleContext) -> None:
        """When two tokens feed one field, the later one in the template wins."""
        fields = _resolve("1/02", "M/MM", en_us)
        assert fields.month == 1

    def test_group_count_must_match(self, en_us: LocaleContext) -> None:
        """Misaligned inputs are a programming error."""
        compiled = compile_template("YYYY-MM", "en-US")
        with pytest.raises(ValueError, match="zip"):
            resolve_fields(compiled.tokens, ("2024",), en_us)


class TestMergeHour:
    """12-hour clock rules."""

    @pytest.mark.parametrize(
        ("hour12", "meridiem", "expected"),
        [
            (12, Meridiem.AM, 0),
            (1, Meridiem.AM, 1),
            (11, Meridiem.AM, 11),
            (12, Meridiem.PM, 12),
            (1, Meridiem.PM, 13),
            (11, Meridiem.PM, 23),
            (0, Meridiem.PM, 12),
            (7, None, 7),
            (12, None, 12),
        ],
    )
    def test_hour12_rules(self, hour12: int, meridiem: Meridiem | None, expected: int) -> None:
        """12 AM is midnight, PM adds 12 except at noon, no meridiem keeps the value."""
        assert merge_hour(CalendarFields(hour12=hour12, meridiem=meridiem)) == expected

    def test_without_hour12_uses_24_hour_field(self) -> None:
        """A stray meridiem does nothing without a 12-hour value."""
        assert merge_hour(CalendarFields(hour=18)) == 18
        assert merge_hour(CalendarFields(hour=9, meridiem=Meridiem.PM)) == 9


class TestAssembleInstant:
    """Fields to datetime."""

    def test_full_record(self) -> None:
        """Every field reaches the datetime; milliseconds become microseconds."""
        fields = CalendarFields(
            year=2024, month=5, day=15, hour12=2, meridiem=Meridiem.PM,
            minute=5, second=9, millisecond=250,
        )  # fmt: skip
        assert assemble_instant(fields) == datetime(2024, 6, 15, 14, 5, 9, 250000)

    def test_overflowing_day_carries(self) -> None:
        """February 30th is March 1st in a leap year."""
        assert assemble_instant(CalendarFields(year=2024, month=1, day=30)) == datetime(2024, 3, 1)

    def test_weekday_hint_is_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        """A wrong weekday is logged, not applied."""
        fields = CalendarFields(year=2024, month=0, day=15, weekday=0)
        with caplog.at_level(logging.DEBUG, logger="tempolex.parsing.assembler"):
            assert assemble_instant(fields) == datetime(2024, 1, 15)
        assert any("Weekday hint" in record.getMessage() for record in caplog.records)

    def test_matching_weekday_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        """A correct weekday hint logs nothing."""
        fields = CalendarFields(year=2024, month=0, day=15, weekday=1)
        with caplog.at_level(logging.DEBUG, logger="tempolex.parsing.assembler"):
            assemble_instant(fields)
        assert not caplog.records

    def test_year_zero_is_rejected(self) -> None:
        """Year 0 does not exist in datetime."""
        with pytest.raises(ValueError):
            assemble_instant(CalendarFields(year=0))

"""Bi-Directional Date Template Examples.

Tempolex renders instants through token templates and parses text laid out
the same way back into instants:
- Format: instant -> text (format_with_template, display presets)
- Parse: text -> instant (parse_with_template)

API Notes:
- parse_with_template returns tuple[datetime | None, tuple[TemplateParseError, ...]]
- It never raises; is_valid_instant narrows the result to datetime
- Month and weekday names come from CLDR via Babel, per locale
"""

from datetime import datetime

from tempolex import (
    format_date,
    format_datetime,
    format_time,
    format_with_template,
    is_valid_instant,
    parse_with_template,
)


def example_localized_templates() -> None:
    """One template, several locales."""
    print("[Example 1] Localized Templates")
    print("-" * 60)

    instant = datetime(2024, 1, 15, 13, 5)
    template = "dddd D MMMM YYYY, HH:mm"
    for locale_code in ("en-US", "de-DE", "fr-FR", "es-ES"):
        print(f"  {locale_code}: {format_with_template(instant, template, locale_code)}")


def example_twelve_hour_clock() -> None:
    """Meridiem handling in both directions."""
    print("\n[Example 2] 12-Hour Clock")
    print("-" * 60)

    for text in ("12:00 AM", "01:30 PM", "12:45 PM"):
        result, errors = parse_with_template(text, "hh:mm A", "en-US")
        if is_valid_instant(result):
            print(f"  {text} -> {result:%H:%M}")
        else:
            print(f"  {text} -> {errors[0]}")


def example_form_input() -> None:
    """Validate user-entered dates against a house template."""
    print("\n[Example 3] Form Input Validation")
    print("-" * 60)

    template = "DD.MM.YYYY"
    for text in ("15.06.2024", "2024-06-15", "31.02.2024", "00.00.0000"):
        result, errors = parse_with_template(text, template, "de-DE")
        if is_valid_instant(result):
            print(f"  {text!r}: {result.date().isoformat()}")
            continue
        for error in errors:
            diagnostic = error.diagnostic
            code = diagnostic.code.name if diagnostic else "UNKNOWN"
            print(f"  {text!r}: {code}")


def example_roundtrip() -> None:
    """format -> parse recovers the instant."""
    print("\n[Example 4] Roundtrip")
    print("-" * 60)

    instant = datetime(2024, 3, 4, 9, 41, 7, 512000)
    template = "ddd, MMM D YYYY h:mm:ss.SSS a"
    for locale_code in ("en-US", "fr-FR"):
        text = format_with_template(instant, template, locale_code)
        parsed, _ = parse_with_template(text, template, locale_code)
        print(f"  {locale_code}: {text!r} -> roundtrip ok: {parsed == instant}")


def example_display_presets() -> None:
    """CLDR display presets."""
    print("\n[Example 5] Display Presets")
    print("-" * 60)

    instant = datetime(2024, 1, 15, 13, 5)
    for locale_code in ("en-US", "de-DE", "ja-JP"):
        print(
            f"  {locale_code}: {format_date(instant, locale_code)} | "
            f"{format_time(instant, locale_code)} | {format_datetime(instant, locale_code)}"
        )


if __name__ == "__main__":
    print("=" * 60)
    print("Tempolex Bi-Directional Date Templates")
    print("=" * 60)

    example_localized_templates()
    example_twelve_hour_clock()
    example_form_input()
    example_roundtrip()
    example_display_presets()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)

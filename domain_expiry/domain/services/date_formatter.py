"""Expiration date parsing and localized rendering."""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo

from babel.core import Locale, UnknownLocaleError
from babel.dates import format_date, format_time, get_date_format, get_datetime_format

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Asia/Bangkok"
DEFAULT_LOCALE = "th_TH"

# Languages whose everyday calendar is the Buddhist era: (year offset, era name)
BUDDHIST_ERA = {"th": (543, "พ.ศ.")}


def parse_expiration(value: date | datetime | str | None) -> datetime | None:
    """
    Parse a date-like value into a timezone-aware datetime.

    Naive values are taken as UTC and plain dates as UTC midnight.

    Returns:
        The parsed datetime, or None for empty or unparseable input.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    if not isinstance(value, str) or not value.strip():
        return None

    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Failed to parse expiration date: %s", value)
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


class LocalizedDateFormatter:
    """Renders dates as a long date plus a short time in a display locale."""

    def __init__(
        self,
        timezone: str | tzinfo = DEFAULT_TIMEZONE,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        """
        Initialize the formatter.

        Args:
            timezone: IANA zone name or tzinfo used for display.
            locale: CLDR locale identifier, e.g. ``th_TH``.
        """
        self._timezone = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
        self._locale = locale

    def format(self, value: date | datetime | str | None) -> str | None:
        """
        Format a date-like value for display.

        Returns:
            The localized string, or None if the value does not parse or
            the locale data is unavailable.
        """
        parsed = parse_expiration(value)
        if parsed is None:
            return None

        local = parsed.astimezone(self._timezone)
        try:
            date_part = format_date(local, format=self._long_date_pattern(local), locale=self._locale)
            time_part = format_time(local, format="short", tzinfo=self._timezone, locale=self._locale)
            pattern = get_datetime_format("long", locale=self._locale)
        except (UnknownLocaleError, ValueError):
            logger.warning("Locale data unavailable for %s", self._locale)
            return None

        return str(pattern).replace("'", "").replace("{0}", time_part).replace("{1}", date_part)

    def _long_date_pattern(self, local: datetime) -> str:
        """Long date pattern, with the year and era rewritten for Buddhist-era locales."""
        pattern = get_date_format("long", locale=self._locale).pattern
        era = BUDDHIST_ERA.get(Locale.parse(self._locale).language)
        if era is None:
            return pattern

        offset, era_name = era
        pattern = re.sub(r"G+", f"'{era_name}'", pattern)
        return re.sub(r"y+", f"'{local.year + offset}'", pattern)

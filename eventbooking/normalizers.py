import datetime
import re

from dateutil import parser as date_parser

from eventbooking.exceptions import InvalidDateError, InvalidTimeError

# Bare times are read as occurring on this day; missing date parts also come from it.
REFERENCE_DATE = datetime.datetime(1970, 1, 1)
# No field may match REFERENCE_DATE; day stays below 29.
ALTERNATE_DEFAULT = datetime.datetime(1971, 2, 2, 1, 1)

SLUG_SEPARATORS = re.compile(r'[\s\W-]+', re.ASCII)
EDGE_HYPHENS = re.compile(r'^-+|-+$')
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def generate_slug(title):
    """
    Builds a URL-friendly slug from a title.

      - "My Cool Event!!" -> "my-cool-event"
      - "  Rock & Roll  " -> "rock-roll"

    The result may be empty when the title holds no word characters.
    """
    slug = str(title).lower().strip()
    slug = SLUG_SEPARATORS.sub('-', slug)
    return EDGE_HYPHENS.sub('', slug)


def _parse(value):
    """
    Parses ``value`` twice, against two different defaults. Whatever differs
    between the results was filled in rather than read from ``value``.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Nothing to parse in %r" % (value,))
    return (date_parser.parse(value, default=REFERENCE_DATE),
            date_parser.parse(value, default=ALTERNATE_DEFAULT))


def _has_date(parsed, alternate):
    return any(getattr(parsed, part) == getattr(alternate, part)
               for part in ('year', 'month', 'day'))


def _has_time(parsed, alternate):
    return parsed.hour == alternate.hour


def normalize_date(value):
    """
    Returns ``value`` as an ISO ``YYYY-MM-DD`` string.

    Values carrying an offset are converted to UTC before the date part is
    taken. Raises ``InvalidDateError`` when the value cannot be parsed or
    holds no date at all (e.g. a bare time).
    """
    try:
        parsed, alternate = _parse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(value) from e

    if not _has_date(parsed, alternate):
        raise InvalidDateError(value)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc)

    return parsed.date().isoformat()


def normalize_time(value):
    """
    Returns ``value`` as a zero-padded 24-hour ``HH:MM`` string, so
    "1:05 PM" becomes "13:05". Raises ``InvalidTimeError`` when the value
    cannot be parsed, has no hour, or also names a date.
    """
    try:
        parsed, alternate = _parse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidTimeError(value) from e

    if not _has_time(parsed, alternate) or _has_date(parsed, alternate):
        raise InvalidTimeError(value)

    return "%02d:%02d" % (parsed.hour, parsed.minute)


def normalize_email(value):
    return value.strip().lower()


def is_valid_email(value):
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None

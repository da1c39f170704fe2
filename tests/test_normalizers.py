import re

import pytest

from eventbooking.exceptions import FieldValidationError, InvalidDateError, InvalidTimeError
from eventbooking.normalizers import (
    generate_slug, is_valid_email, normalize_date, normalize_email, normalize_time,
)


@pytest.mark.parametrize('title, slug', [
    ('My Cool Event!!', 'my-cool-event'),
    ('My Cool Event', 'my-cool-event'),
    ('  Rock & Roll  ', 'rock-roll'),
    ('--Already-Slugged--', 'already-slugged'),
    ('PyCon 2025: Day 1', 'pycon-2025-day-1'),
    ('snake_case stays', 'snake_case-stays'),
    ('Café Night', 'caf-night'),
    ('???', ''),
])
def test_generate_slug(title, slug):
    assert generate_slug(title) == slug


def test_generate_slug_is_deterministic():
    assert generate_slug('Launch Party') == generate_slug('Launch Party')


@pytest.mark.parametrize('value, expected', [
    ('2025-03-10', '2025-03-10'),
    ('March 10, 2025', '2025-03-10'),
    ('10 Mar 2025 14:00', '2025-03-10'),
    ('2025/03/10', '2025-03-10'),
    ('March 2025', '2025-03-01'),
    ('2025-03-10T23:30:00-05:00', '2025-03-11'),
])
def test_normalize_date(value, expected):
    normalized = normalize_date(value)
    assert normalized == expected
    assert re.match(r'^\d{4}-\d{2}-\d{2}$', normalized)


@pytest.mark.parametrize('value', [
    'not a date', '', '   ', None,
    '1:05 PM', '10:00', '7pm', 'Tuesday',
])
def test_normalize_date_rejects_values_without_a_date(value):
    with pytest.raises(InvalidDateError) as exc_info:
        normalize_date(value)

    assert exc_info.value.errors == {'date': 'Invalid date format'}
    assert isinstance(exc_info.value, FieldValidationError)


@pytest.mark.parametrize('value, expected', [
    ('1:05 PM', '13:05'),
    ('13:05', '13:05'),
    ('9:30', '09:30'),
    ('09:30 am', '09:30'),
    ('12:00 AM', '00:00'),
    ('23:59:59', '23:59'),
])
def test_normalize_time(value, expected):
    normalized = normalize_time(value)
    assert normalized == expected
    assert re.match(r'^([01]\d|2[0-3]):[0-5]\d$', normalized)


@pytest.mark.parametrize('value', [
    'lunchtime', '', None,
    '2025-03-10', 'March 10, 2025', 'Tuesday', '12',
    'March 10, 2025 13:05', '2025-03-10T13:05:00',
])
def test_normalize_time_rejects_values_without_just_a_time(value):
    with pytest.raises(InvalidTimeError) as exc_info:
        normalize_time(value)

    assert exc_info.value.errors == {'time': 'Invalid time format'}


def test_normalize_email():
    assert normalize_email('  Someone@Example.COM ') == 'someone@example.com'


@pytest.mark.parametrize('value, valid', [
    ('someone@example.com', True),
    ('first.last@sub.example.org', True),
    ('no-at-sign.example.com', False),
    ('someone@localhost', False),
    ('some one@example.com', False),
    ('someone@@example.com', False),
    ('@example.com', False),
    ('', False),
    (None, False),
])
def test_is_valid_email(value, valid):
    assert is_valid_email(value) is valid

import logging

import mongoengine
from pymongo.errors import PyMongoError

from eventbooking.exceptions import (
    EventLookupError, EventNotFound, FieldValidationError,
)
from eventbooking.models import Event
from eventbooking.normalizers import (
    generate_slug, normalize_date, normalize_email, normalize_time,
)

logger = logging.getLogger(__name__)


def is_new(document):
    return document.pk is None


def is_modified(document, field_name):
    """
    True if ``field_name`` was set to a different value since the document
    was loaded, or if the document has never been saved.
    """
    if is_new(document):
        return True
    db_field = document._fields[field_name].db_field
    return db_field in document._get_changed_fields()


def field_errors(document):
    """
    Runs the declarative field validation of ``document`` and returns a
    mapping of field name to message (empty when everything passes).
    """
    try:
        document.validate(clean=False)
    except mongoengine.ValidationError as e:
        return e.to_dict()
    return {}


def _trim(document, field_names):
    for name in field_names:
        value = getattr(document, name)
        if isinstance(value, str):
            setattr(document, name, value.strip() or None)


def prepare_event(event):
    _trim(event, Event.text_fields)

    errors = field_errors(event)
    if errors:
        raise FieldValidationError(errors, 'Event')

    if is_modified(event, 'title'):
        slug = generate_slug(event.title)
        if not slug:
            raise FieldValidationError(
                {'title': 'Title must contain at least one letter or digit'}, 'Event')
        event.slug = slug
        logger.debug("Derived slug %r from title %r", slug, event.title)

    if is_modified(event, 'date'):
        event.date = normalize_date(event.date)

    if is_modified(event, 'time'):
        event.time = normalize_time(event.time)

    return event


def ensure_event_exists(event_id):
    """
    Looks up the event with ``event_id``, fetching only its identifier.

    Raises ``EventNotFound`` when no such event exists and
    ``EventLookupError`` when the lookup itself fails, e.g. because the
    identifier is not a valid ObjectId or the database is unreachable.
    """
    try:
        found = Event.objects(pk=event_id).only('id').first()
    except (mongoengine.ValidationError, PyMongoError) as e:
        logger.warning("Event lookup for %r failed: %s", event_id, e)
        raise EventLookupError(event_id) from e

    if found is None:
        raise EventNotFound(event_id)

    return found.pk


def prepare_booking(booking):
    if isinstance(booking.email, str):
        booking.email = normalize_email(booking.email) or None

    errors = field_errors(booking)
    if booking.event_id is not None:
        # format problems with a present id are reported by the lookup
        errors.pop('event_id', None)
    if errors:
        raise FieldValidationError(errors, 'Booking')

    if is_modified(booking, 'event_id'):
        ensure_event_exists(booking.event_id)

    return booking

import logging

from mongoengine import NotUniqueError

from eventbooking.exceptions import DuplicateSlugError
from eventbooking.validation import prepare_booking, prepare_event

logger = logging.getLogger(__name__)


def save_event(event):
    """
    Persists ``event`` after validating and normalizing it.

    Raises ``FieldValidationError`` (nothing is written) or
    ``DuplicateSlugError`` when another event already owns the slug.
    """
    prepare_event(event)
    event.touch()

    try:
        event.save()
    except NotUniqueError as e:
        logger.info("Rejected event %r: duplicate slug %r", event.title, event.slug)
        raise DuplicateSlugError(event.slug) from e

    return event


def save_booking(booking):
    """
    Persists ``booking`` once its email is valid and its event exists.
    """
    prepare_booking(booking)
    booking.touch()
    booking.save()
    return booking

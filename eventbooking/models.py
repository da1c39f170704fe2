from django.utils import timezone

from mongoengine import Document, ValidationError
from mongoengine import DateTimeField, ListField, ObjectIdField, StringField

from eventbooking.normalizers import is_valid_email

MODES = ('online', 'offline', 'hybrid')


def _one_of(choices, message):
    def check(value):
        if value not in choices:
            raise ValidationError(message)
    return check


def _not_empty(message):
    def check(value):
        if not value:
            raise ValidationError(message)
    return check


def _email(value):
    if not is_valid_email(value):
        raise ValidationError('Please enter a valid email address')


class TimestampedDocument(Document):
    """
    Adds system-managed ``createdAt``/``updatedAt`` keys to a document.
    """
    created_at = DateTimeField(db_field='createdAt')
    updated_at = DateTimeField(db_field='updatedAt')

    meta = {'abstract': True}

    def touch(self):
        now = timezone.now()
        if self.created_at is None:
            self.created_at = now
        self.updated_at = now


class Event(TimestampedDocument):
    title = StringField(required=True, max_length=100)
    slug = StringField(unique=True)
    description = StringField(required=True, max_length=1000)
    overview = StringField(required=True, max_length=500)
    image = StringField(required=True)
    venue = StringField(required=True)
    location = StringField(required=True)
    date = StringField(required=True)
    time = StringField(required=True)
    mode = StringField(required=True, validation=_one_of(
        MODES, 'Mode must be either online, offline, or hybrid'))
    audience = StringField(required=True)
    agenda = ListField(StringField(), required=True, validation=_not_empty(
        'Agenda must have at least one item'))
    organizer = StringField(required=True)
    tags = ListField(StringField(), required=True, validation=_not_empty(
        'Tags must have at least one item'))

    meta = {
        'collection': 'events',
        'indexes': [
            ('date', 'location'),
        ],
    }

    # trimmed on write; blank counts as missing
    text_fields = ('title', 'description', 'overview', 'image', 'venue',
                   'location', 'audience', 'organizer')

    def __str__(self):
        return self.title or ''


class Booking(TimestampedDocument):
    event_id = ObjectIdField(required=True, db_field='eventId')
    email = StringField(required=True, validation=_email)

    meta = {
        'collection': 'bookings',
        'indexes': [
            'event_id',
            ('event_id', '-created_at'),
            'email',
        ],
    }

    def __str__(self):
        return "%s -> %s" % (self.email, self.event_id)

class EventBookingError(Exception):
    """
    Base class for every failure raised on the write path.
    """
    pass


class FieldValidationError(EventBookingError):
    """
    One or more fields are missing, malformed, out of bounds or not allowed.

    ``errors`` maps a field name to its message (or to a nested mapping for
    list fields).
    """
    def __init__(self, errors, document_name=None):
        self.errors = dict(errors)
        self.document_name = document_name
        super(FieldValidationError, self).__init__(self._format())

    def _format(self):
        details = '; '.join("%s: %s" % (k, v) for k, v in sorted(self.errors.items()))
        if self.document_name:
            return "%s validation failed (%s)" % (self.document_name, details)
        return "Validation failed (%s)" % details


class DerivedValueError(FieldValidationError):
    """A value could not be normalized into its canonical stored form."""

    field_name = None
    message = None

    def __init__(self, value):
        self.value = value
        super(DerivedValueError, self).__init__({self.field_name: self.message})


class InvalidDateError(DerivedValueError):
    field_name = 'date'
    message = 'Invalid date format'


class InvalidTimeError(DerivedValueError):
    field_name = 'time'
    message = 'Invalid time format'


class ReferentialError(FieldValidationError):
    """A booking does not point at a usable event."""

    message = None

    def __init__(self, event_id):
        self.event_id = event_id
        super(ReferentialError, self).__init__({'event_id': self.message}, 'Booking')


class EventNotFound(ReferentialError):
    message = 'Event does not exist'


class EventLookupError(ReferentialError):
    # malformed identifier or storage failure, as opposed to a clean miss
    message = 'Invalid event ID format or database error'


class DuplicateSlugError(EventBookingError):

    def __init__(self, slug):
        self.slug = slug
        super(DuplicateSlugError, self).__init__(
            "An event with the slug '%s' already exists." % slug)

from django.core.exceptions import MultipleObjectsReturned, ObjectDoesNotExist

import mongoengine
from mongoengine import Document

from tastypie import fields, http
from tastypie.bundle import Bundle
from tastypie.exceptions import ImmediateHttpResponse, NotFound
from tastypie.resources import Resource

from eventbooking.exceptions import DuplicateSlugError, FieldValidationError
from eventbooking.fields import RelatedUriField
from eventbooking.models import Booking, Event
from eventbooking.store import save_booking, save_event


class DocumentResource(Resource):
    """
    A subclass of Tastypie ``Resource`` designed to work with Mongoengine's
    ``Documents``. Writes go through ``persist`` so that every document is
    validated and normalized before it reaches the database.

    Listing and filtering are not offered.
    """
    def persist(self, obj):
        raise NotImplementedError()

    def detail_uri_kwargs(self, bundle_or_obj):
        """
        Given a ``Bundle``, a ``Document`` or a bare primary key, it returns
        the extra kwargs needed to generate a detail URI.
        """
        if isinstance(bundle_or_obj, Bundle):
            pk = bundle_or_obj.obj.pk
        elif isinstance(bundle_or_obj, Document):
            pk = bundle_or_obj.pk
        else:
            pk = bundle_or_obj

        return {self._meta.detail_uri_name: str(pk)}

    def get_object_list(self, request):
        return self._meta.object_class.objects.all()

    def obj_get(self, bundle, **kwargs):
        """
        Takes optional ``kwargs``, which are used to narrow the query to find
        the instance.

        Raises ``ObjectDoesNotExist`` when nothing matches, including lookups
        with a malformed id.
        """
        object_class = self._meta.object_class
        stringified_kwargs = ', '.join(["%s=%s" % (k, v) for k, v in kwargs.items()])

        try:
            return self.get_object_list(bundle.request).get(**kwargs)
        except object_class.DoesNotExist:
            raise ObjectDoesNotExist("Couldn't find an instance of '%s' which matched '%s'." % (object_class.__name__, stringified_kwargs))
        except object_class.MultipleObjectsReturned:
            raise MultipleObjectsReturned("More than one '%s' matched '%s'." % (object_class.__name__, stringified_kwargs))
        except mongoengine.ValidationError:
            raise ObjectDoesNotExist("Invalid resource lookup data provided (mismatched type).")

    def obj_create(self, bundle, **kwargs):
        bundle.obj = self._meta.object_class()

        for key, value in kwargs.items():
            setattr(bundle.obj, key, value)

        bundle = self.full_hydrate(bundle)
        return self.save(bundle)

    def obj_update(self, bundle, skip_errors=False, **kwargs):

        if bundle.obj is None or bundle.obj.pk is None:
            try:
                bundle.obj = self.obj_get(bundle, **kwargs)
            except ObjectDoesNotExist:
                raise NotFound("A document matching the provided arguments could not be found.")

        bundle = self.full_hydrate(bundle)
        return self.save(bundle)

    def obj_delete(self, bundle, **kwargs):
        try:
            bundle.obj = self.obj_get(bundle, **kwargs)
        except ObjectDoesNotExist:
            raise NotFound("A document matching the provided arguments could not be found.")

        bundle.obj.delete()

    def rollback(self, bundles):
        pass

    def save(self, bundle):
        try:
            self.persist(bundle.obj)
        except FieldValidationError as e:
            bundle.errors[self._meta.resource_name] = e.errors
            raise ImmediateHttpResponse(response=self.error_response(bundle.request, bundle.errors))
        except DuplicateSlugError as e:
            bundle.errors[self._meta.resource_name] = {'slug': str(e)}
            raise ImmediateHttpResponse(response=self.error_response(
                bundle.request, bundle.errors, response_class=http.HttpConflict))

        return bundle


class EventResource(DocumentResource):
    id = fields.CharField(attribute='id', readonly=True)
    title = fields.CharField(attribute='title', null=True)
    slug = fields.CharField(attribute='slug', readonly=True, null=True)
    description = fields.CharField(attribute='description', null=True)
    overview = fields.CharField(attribute='overview', null=True)
    image = fields.CharField(attribute='image', null=True)
    venue = fields.CharField(attribute='venue', null=True)
    location = fields.CharField(attribute='location', null=True)
    date = fields.CharField(attribute='date', null=True)
    time = fields.CharField(attribute='time', null=True)
    mode = fields.CharField(attribute='mode', null=True)
    audience = fields.CharField(attribute='audience', null=True)
    agenda = fields.ListField(attribute='agenda', null=True)
    organizer = fields.CharField(attribute='organizer', null=True)
    tags = fields.ListField(attribute='tags', null=True)
    created_at = fields.DateTimeField(attribute='created_at', readonly=True, null=True)
    updated_at = fields.DateTimeField(attribute='updated_at', readonly=True, null=True)

    class Meta:
        resource_name = 'event'
        object_class = Event
        list_allowed_methods = ['post']
        detail_allowed_methods = ['get', 'put', 'delete']

    def persist(self, obj):
        save_event(obj)


class BookingResource(DocumentResource):
    id = fields.CharField(attribute='id', readonly=True)
    event = RelatedUriField(EventResource, 'event_id', null=True)
    email = fields.CharField(attribute='email', null=True)
    created_at = fields.DateTimeField(attribute='created_at', readonly=True, null=True)
    updated_at = fields.DateTimeField(attribute='updated_at', readonly=True, null=True)

    class Meta:
        resource_name = 'booking'
        object_class = Booking
        list_allowed_methods = ['post']
        detail_allowed_methods = ['get', 'put', 'delete']

    def persist(self, obj):
        save_booking(obj)

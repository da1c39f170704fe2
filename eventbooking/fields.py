from bson import ObjectId
from django.urls import resolve, Resolver404, get_script_prefix

from tastypie.fields import RelatedField, NOT_PROVIDED
from tastypie.exceptions import ApiFieldError


class RelatedUriField(RelatedField):
    """
    Used for mapping between a resource uri and a document's stored reference id
      - /api/v1/event/123/ -> 123
      - 123 -> /api/v1/event/123/

    The document only keeps the id, so this is not a real related field.
    """
    def __init__(self, to, attribute, related_name=None, default=NOT_PROVIDED,
                 null=False, blank=False, readonly=False, full=False,
                 unique=False, help_text=None):
        super(RelatedUriField, self).__init__(
            to, attribute, related_name=related_name, default=default,
            null=null, blank=blank, readonly=readonly, full=full, unique=unique, help_text=help_text
        )
        self.is_related = False

    def related_resource(self):
        resource = self.to_class()
        owner = getattr(self, '_resource', None)
        if resource._meta.api_name is None and owner is not None:
            resource._meta.api_name = owner._meta.api_name
        return resource

    def resource_id_from_uri(self, fk_resource, uri):
        """
        Given a URI is provided, the related resource id is returned.
        """
        prefix = get_script_prefix()
        chomped_uri = uri

        if prefix and chomped_uri.startswith(prefix):
            chomped_uri = chomped_uri[len(prefix)-1:]

        try:
            view, args, kwargs = resolve(chomped_uri)
        except Resolver404:
            raise ApiFieldError("The URL provided '%s' was not a link to a valid resource." % uri)

        if kwargs.get('resource_name') != fk_resource._meta.resource_name:
            raise ApiFieldError("The URL provided '%s' does not point to a '%s' resource." % (uri, fk_resource._meta.resource_name))

        related_id = kwargs[fk_resource._meta.detail_uri_name]
        if ObjectId.is_valid(related_id):
            return ObjectId(related_id)
        return related_id

    def dehydrate(self, bundle, for_list=True):

        related_id = getattr(bundle.obj, self.attribute)

        if not related_id:
            if not self.null:
                raise ApiFieldError("The document '%r' has an empty attribute '%s' and doesn't allow a null value." % (bundle.obj, self.attribute))

            return None

        return self.related_resource().get_resource_uri(related_id)

    def hydrate(self, bundle):

        if self.instance_name not in bundle.data:
            return getattr(bundle.obj, self.attribute, None)

        value = bundle.data[self.instance_name]

        if value is None:
            return None

        if isinstance(value, str):
            # We got a URI. Keep only the id it points at.
            return self.resource_id_from_uri(self.related_resource(), value)

        raise ApiFieldError("The '%s' field was given data that was not a URI: %s." % (self.instance_name, value))

from django.urls import include, path

from tastypie.api import Api

from eventbooking.resources import BookingResource, EventResource

v1_api = Api(api_name='v1')
v1_api.register(EventResource())
v1_api.register(BookingResource())

urlpatterns = [
    path('api/', include(v1_api.urls)),
]

"""
Event and Booking documents for mongoengine, with explicit write-time
validation and a Tastypie API adapter.
"""

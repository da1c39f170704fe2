import django
from django.conf import settings


def pytest_configure():
    if settings.configured:
        return

    settings.configure(
        DEBUG=False,
        SECRET_KEY='eventbooking-tests',
        ALLOWED_HOSTS=['*'],
        INSTALLED_APPS=[
            'django.contrib.contenttypes',
            'django.contrib.auth',
            'tastypie',
        ],
        MIDDLEWARE=[],
        ROOT_URLCONF='tests.urls',
        USE_TZ=True,
    )
    django.setup()

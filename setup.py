#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

setup(
    name='eventbooking',
    version='0.1.0',
    description='Mongoengine Event and Booking documents with write-time validation and a Django Tastypie API',
    long_description=open('README', 'r').read(),
    packages=[
        'eventbooking',
    ],
    python_requires='>=3.8',
    install_requires=[
        'Django>=3.2',
        'mongoengine>=0.27',
        'pymongo>=4.0',
        'django-tastypie>=0.14.5',
        'python-dateutil>=2.8',
    ],
    extras_require={
        'test': [
            'pytest>=7',
            'mongomock>=4.1',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Web Environment',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Utilities'
    ],
)

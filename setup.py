# -*- coding: utf-8 -*-
import os

from setuptools import setup, find_packages

def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()

setup(
    name = 'stomplet',
    version = '1.0a1',
    author = 'Jan Müller',
    author_email = 'nikipore@gmail.com',
    description = 'Synchronous STOMP client library for Python with failover, automatic reconnect, and subscription replay.',
    license = 'Apache License 2.0',
    packages = find_packages(),
    long_description=read('README.txt'),
    keywords = 'stomp activemq rabbitmq failover',
    python_requires = '>=3.6',
    include_package_data = True,
    zip_safe = True,
    install_requires = [],
    extras_require = {
        'test': ['mock']
    },
    test_suite = 'stomplet.tests',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Topic :: System :: Networking',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
)

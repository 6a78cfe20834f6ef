"""Brokers differ in the header names they use for prefetch control and subscription identity. A :class:`StompVendor` object captures one such dialect; :func:`vendor` looks it up by name.

>>> from stomplet.protocol import vendor
>>> vendor.vendor('RMQ').prefetchHeader
'prefetch-count'
>>> vendor.detect('RabbitMQ/3.12.0', vendor.vendor('AMQ'))
RabbitMQ()
"""
"""
Copyright 2012 Mozes, Inc.

   Licensed under the Apache License, Version 2.0 (the "License");
   you may not use this file except in compliance with the License.
   You may obtain a copy of the License at

       http://www.apache.org/licenses/LICENSE-2.0

   Unless required by applicable law or agreed to in writing, software
   distributed under the License is distributed on an "AS IS" BASIS,
   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either expressed or implied.
   See the License for the specific language governing permissions and
   limitations under the License.
"""
from stomplet.error import StompProtocolError

from .spec import StompSpec

class StompVendor(object):
    NAME = None
    # substring of the CONNECTED frame's server header which identifies the broker
    SERVER = None

    prefetchHeader = None
    subscriptionHeader = None
    unsubscriptionHeader = None
    ackExcludedHeaders = ()

    def __repr__(self):
        return '%s()' % self.__class__.__name__

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def subscribeHeaders(self, prefetchSize, clientId=None):
        headers = {}
        if self.prefetchHeader:
            headers[self.prefetchHeader] = prefetchSize
        if (clientId is not None) and self.subscriptionHeader:
            headers[self.subscriptionHeader] = clientId
        return headers

    def unsubscribeHeaders(self, clientId=None):
        headers = {}
        if (clientId is not None) and self.unsubscriptionHeader:
            headers[self.unsubscriptionHeader] = clientId
        return headers

    def ackHeaders(self, headers):
        return dict((key, value) for (key, value) in headers.items() if key not in self.ackExcludedHeaders)

class ActiveMQ(StompVendor):
    NAME = 'AMQ'
    SERVER = 'activemq'

    prefetchHeader = 'activemq.prefetchSize'
    subscriptionHeader = 'activemq.subscriptionName'

class RabbitMQ(StompVendor):
    NAME = 'RMQ'
    SERVER = 'rabbitmq'

    prefetchHeader = 'prefetch-count'
    subscriptionHeader = StompSpec.ID_HEADER
    unsubscriptionHeader = StompSpec.ID_HEADER
    # RabbitMQ rejects an ACK frame which carries a content-length header
    ackExcludedHeaders = (StompSpec.CONTENT_LENGTH_HEADER,)

VENDORS = dict((v.NAME, v) for v in (ActiveMQ(), RabbitMQ()))

def vendor(name):
    """Obtain the vendor profile for **name** (a key of :data:`VENDORS`). A :class:`StompVendor` object is passed through."""
    if isinstance(name, StompVendor):
        return name
    try:
        return VENDORS[name]
    except KeyError:
        raise StompProtocolError('Unknown broker vendor: %s [known vendors: %s]' % (repr(name), ', '.join(sorted(VENDORS)))) from None

def detect(server, default):
    """Guess the vendor profile from the **server** header of a **CONNECTED** frame. An unknown or missing header keeps the **default** profile."""
    server = (server or '').strip().lower()
    for profile in VENDORS.values():
        if profile.SERVER in server:
            return profile
    return default

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
import random
import re

from stomplet.error import StompConnectionFailed, StompMalformedEndpoint, StompNoEndpoints

from .spec import StompSpec

class StompFailoverTransport(object):
    """Looping over this object, you can produce a series of tuples (attempt, index, broker) which tell you which broker to dial next. When the configured number of attempts is exhausted, a :class:`~.error.StompConnectionFailed` error is raised.

    :param uri: A failover URI (or a :class:`StompFailoverUri` object).
    :param attempts: The maximum number of dial attempts per loop.

    If the URI option *randomize* is :obj:`'true'`, every attempt picks a broker at random. Otherwise, the brokers are tried round-robin, starting with the successor of the broker you last reported via :meth:`connected`.

    **Example:**

    >>> failover = StompFailoverTransport('failover:(tcp://remote1:61615,tcp://localhost:61616)', attempts=3)
    >>> try:
    ...     for (attempt, index, broker) in failover:
    ...         print('attempt %d: %s' % (attempt, broker))
    ... except StompConnectionFailed as e:
    ...     print(e)
    ...
    attempt 1: {'protocol': 'tcp', 'host': 'remote1', 'port': 61615}
    attempt 2: {'protocol': 'tcp', 'host': 'localhost', 'port': 61616}
    attempt 3: {'protocol': 'tcp', 'host': 'remote1', 'port': 61615}
    Could not connect to a broker [3 attempts]
    """
    def __init__(self, uri, attempts=10):
        self._failoverUri = uri if isinstance(uri, StompFailoverUri) else StompFailoverUri(uri)
        self.attempts = attempts
        self._anchor = -1

    def __iter__(self):
        brokers = self.brokers
        if not brokers:
            raise StompNoEndpoints('No broker defined [%s]' % self._failoverUri)
        return self._attempts(brokers)

    @property
    def brokers(self):
        return self._failoverUri.brokers

    @property
    def randomize(self):
        return self._failoverUri.options.get('randomize') == 'true'

    def connected(self, index):
        """Report the index of the broker which accepted the connection. The next round-robin loop starts with its successor."""
        self._anchor = index

    def _attempts(self, brokers):
        index = self._anchor
        for attempt in range(1, self.attempts + 1):
            if self.randomize:
                index = random.randrange(len(brokers))
            else:
                index = (index + 1) % len(brokers)
            yield attempt, index, brokers[index]
        raise StompConnectionFailed('Could not connect to a broker [%d attempts]' % self.attempts)

class StompFailoverUri(object):
    """This object is a parser for the failover URI scheme. The parsed parameters are available in the attributes :attr:`brokers` and :attr:`options`. Its basic form is::

    'failover:(uri1,...,uriN)?key1=value1&...&keyM=valueM'

    or::

    'failover:uri1,...,uriN'

    or just a single broker URI::

    'tcp://localhost:61613?key1=value1'

    Each broker URI has the form ``scheme://host[:port]``; the port defaults to :attr:`StompSpec.DEFAULT_PORT`. The options are free-form strings.

    :param uri: A failover URI.

    **Example:**

    >>> uri = StompFailoverUri('failover:(tcp://remote1:61615,tcp://localhost)?randomize=false')
    >>> print(uri.brokers)
    [{'protocol': 'tcp', 'host': 'remote1', 'port': 61615}, {'protocol': 'tcp', 'host': 'localhost', 'port': 61613}]
    >>> print(uri.options)
    {'randomize': 'false'}

    .. seealso :: :class:`StompFailoverTransport`
    """
    _FAILOVER_PREFIX = 'failover:'
    _NETLOC_PREFIX = '//'
    _OPTIONS_SEPARATOR = '?'
    _REGEX_URI = re.compile(r'^(?P<protocol>[a-zA-Z0-9]+)://(?P<host>[a-zA-Z0-9._-]+)(:(?P<port>\d+))?/?$')
    _REGEX_BRACKETS = re.compile(r'^\((?P<uri>[^()]+)\)$')
    _REGEX_OPTION = re.compile(r'^(?P<key>[a-zA-Z0-9._-]+)=(?P<value>[^&]*)$')

    def __init__(self, uri):
        self._parse(uri)

    def __repr__(self):
        return "StompFailoverUri('%s')" % self.uri

    def __str__(self):
        return self.uri

    def _parse(self, uri):
        self.uri = uri
        (uri, _, options) = uri.partition(self._OPTIONS_SEPARATOR)
        try:
            self._setOptions(options)
            self._setBrokers(uri)
        except ValueError as e:
            raise StompMalformedEndpoint('Bad broker URI %s [%s]' % (self.uri, e), cause=e) from e

    def _setBrokers(self, uri):
        if uri.startswith(self._FAILOVER_PREFIX):
            uri = uri[len(self._FAILOVER_PREFIX):]
            if uri.startswith(self._NETLOC_PREFIX):
                uri = uri[len(self._NETLOC_PREFIX):]
            brackets = self._REGEX_BRACKETS.match(uri)
            uris = (brackets.group('uri') if brackets else uri).split(',')
        else:
            uris = [uri]
        self.brokers = [self._broker(u) for u in uris]

    def _broker(self, uri):
        match = self._REGEX_URI.match(uri)
        if not match:
            raise ValueError('invalid broker: %s' % repr(uri))
        broker = match.groupdict()
        broker['port'] = int(broker['port']) if broker['port'] else StompSpec.DEFAULT_PORT
        return {'protocol': broker['protocol'], 'host': broker['host'], 'port': broker['port']}

    def _setOptions(self, options):
        self.options = {}
        if not options:
            return
        for option in options.split('&'):
            match = self._REGEX_OPTION.match(option)
            if not match:
                raise ValueError('invalid option: %s' % repr(option))
            self.options[match.group('key')] = match.group('value')

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
import json

from stomplet.error import StompFrameError

from .spec import StompSpec

class StompFrame(object):
    """This object represents a STOMP frame which consists of a STOMP :attr:`command`, :attr:`headers`, and a message :attr:`body`. Its string representation (via :meth:`__str__`) renders the wire-level STOMP frame, :func:`bytes` renders it encoded for the wire.

    .. note :: The headers are rendered in insertion order. The body must not contain a NUL character since the frame is terminated by the first NUL on the wire.
    """
    INFO_LENGTH = 20

    def __init__(self, command='', headers=None, body=''):
        self.command = str(command)
        self.headers = {} if (headers is None) else dict((str(key), str(value)) for (key, value) in headers.items())
        self.body = str(body)

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, ', '.join('%s=%s' % (key, repr(getattr(self, key))) for key in ('command', 'headers', 'body')))

    def __str__(self):
        headers = ''.join('%s%s%s%s' % (key, StompSpec.HEADER_SEPARATOR, value, StompSpec.LINE_DELIMITER) for (key, value) in self.headers.items())
        return StompSpec.LINE_DELIMITER.join([self.command, headers, '%s%s' % (self.body, StompSpec.FRAME_DELIMITER)])

    def __bytes__(self):
        return str(self).encode(StompSpec.ENCODING)

    def __iter__(self):
        return iter((key, getattr(self, key)) for key in ('command', 'headers', 'body'))

    def __eq__(self, other):
        return all(getattr(self, key) == getattr(other, key, None) for key in ('command', 'headers', 'body'))

    def __ne__(self, other):
        return not (self == other)

    def info(self):
        """Produce a log-friendly representation of the frame (show only non-trivial content, and truncate the message to INFO_LENGTH characters.)"""
        headers = self.headers and 'headers=%s' % self.headers
        body = self.body[:self.INFO_LENGTH]
        if body != self.body:
            body = '%s...' % body
        body = body and ('body=%s' % repr(body))
        info = ', '.join(i for i in (headers, body) if i)
        return '%s frame%s' % (self.command, info and (' [%s]' % info))

class StompMapFrame(StompFrame):
    """A frame whose body is a JSON encoded key/value map, as marked by a **transformation** header with value :attr:`StompSpec.JMS_MAP_JSON`. The decoded map is available as :attr:`map`.

    :param frame: A :class:`StompFrame` received from the broker, or :obj:`None` if you want to build a map frame for sending.
    :param values: A mapping to be sent (only if **frame** is :obj:`None`).
    """
    def __init__(self, frame=None, values=None):
        if frame is None:
            values = dict(values or {})
            headers = {StompSpec.TRANSFORMATION_HEADER: StompSpec.JMS_MAP_JSON}
            super(StompMapFrame, self).__init__(StompSpec.SEND, headers, json.dumps(values))
        else:
            super(StompMapFrame, self).__init__(frame.command, frame.headers, frame.body)
            try:
                values = json.loads(self.body) if self.body else {}
            except ValueError as e:
                raise StompFrameError('Invalid %s body' % StompSpec.JMS_MAP_JSON, cause=e, body=self.body) from e
            if not isinstance(values, dict):
                raise StompFrameError('Invalid %s body (not a map)' % StompSpec.JMS_MAP_JSON, body=self.body)
        self.map = values

    def __getitem__(self, key):
        return self.map[key]

    def get(self, key, default=None):
        return self.map.get(key, default)

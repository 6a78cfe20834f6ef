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
import collections

from stomplet.error import StompFrameError

from .frame import StompFrame
from .spec import StompSpec

class StompParser(object):
    """This is a parser for a wire-level byte-stream of STOMP frames. A frame is complete as soon as a NUL byte arrives; there is no length prefix.

    **Example:**

    >>> parser = StompParser()
    >>> parser.add(b'MESSAGE\\nmessage-id:4711\\n\\nhello\\x00\\n')
    >>> parser.get()
    StompFrame(command='MESSAGE', headers={'message-id': '4711'}, body='hello')
    >>> parser.canRead()
    False
    """
    MIN_FRAME_LENGTH = 2

    _FRAME_DELIMITER = StompSpec.FRAME_DELIMITER.encode(StompSpec.ENCODING)
    _LINE_DELIMITER = StompSpec.LINE_DELIMITER.encode(StompSpec.ENCODING)
    _HEADER_BLOCK_DELIMITER = 2 * StompSpec.LINE_DELIMITER

    def __init__(self):
        self.reset()

    def canRead(self):
        """Indicates whether there are frames available.
        """
        return bool(self._frames)

    def get(self):
        """Return the next frame as a :class:`StompFrame` object (if any), or :obj:`None` (otherwise).
        """
        if self.canRead():
            return self._frames.popleft()

    def add(self, data):
        """Add a chunk of wire-level data.

        :param data: A :class:`bytes` object. It may contain any number of complete or partial frames.
        """
        self._buffer.extend(data)
        while True:
            position = self._buffer.find(self._FRAME_DELIMITER)
            if position == -1:
                return
            data = bytes(self._buffer[:position]).lstrip(self._LINE_DELIMITER)
            del self._buffer[:position + 1]
            if (len(data) + 1) < self.MIN_FRAME_LENGTH:
                continue
            self._frames.append(self.parse(data))

    def reset(self):
        """Reset internal state, including all fully or partially parsed frames.
        """
        self._frames = collections.deque()
        self._buffer = bytearray()

    def parse(self, data):
        """Parse the bytes of exactly one frame (without its NUL terminator) into a :class:`StompFrame` object.
        """
        try:
            data = data.decode(StompSpec.ENCODING)
        except UnicodeDecodeError as e:
            raise StompFrameError('Invalid frame encoding [%s]' % e, cause=e) from e
        data = data.rstrip(StompSpec.LINE_DELIMITER)
        (header, _, body) = data.partition(self._HEADER_BLOCK_DELIMITER)
        lines = header.split(StompSpec.LINE_DELIMITER)
        frame = StompFrame(lines[0], body=body.rstrip())
        for line in lines[1:]:
            (name, separator, value) = line.partition(StompSpec.HEADER_SEPARATOR)
            if not separator:
                raise StompFrameError('No separator in header line: %s' % line, body=frame.body)
            frame.headers[name] = value
        return frame

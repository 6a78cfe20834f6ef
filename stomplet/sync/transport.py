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
import select
import socket

from stomplet.error import StompConnectionError, StompProbeFailed
from stomplet.protocol import StompParser

class StompFrameTransport(object):
    """The wire-level connection to one broker. All I/O failures surface as :class:`~.error.StompConnectionError`, except for a broken readiness check which raises :class:`~.error.StompProbeFailed`.
    """
    READ_SIZE = 4096

    def __init__(self, host, port):
        self.host = host
        self.port = port

        self._socket = None
        self._parser = StompParser()

    def __str__(self):
        return '%s:%d' % (self.host, self.port)

    def connect(self, timeout=None):
        try:
            self._socket = socket.create_connection((self.host, self.port), timeout)
        except OSError as e:
            raise StompConnectionError('Could not establish connection to %s [%s]' % (self, e), cause=e) from e
        self._socket.settimeout(None)
        self._parser = StompParser()

    def canRead(self, timeout=None):
        self._check()
        if self._parser.canRead():
            return True
        try:
            if timeout is None:
                files, _, _ = select.select([self._socket], [], [])
            else:
                files, _, _ = select.select([self._socket], [], [], timeout)
        except (OSError, ValueError) as e:
            raise StompProbeFailed('Check failed to determine if the socket to %s is readable [%s]' % (self, e), cause=e) from e
        return bool(files)

    def disconnect(self):
        if self._socket is None:
            return
        try:
            self._socket.close()
        except OSError as e:
            raise StompConnectionError('Could not close connection to %s cleanly [%s]' % (self, e), cause=e) from e
        finally:
            self._socket = None

    def send(self, frame):
        self._write(bytes(frame))

    def receive(self):
        while True:
            frame = self._parser.get()
            if frame:
                return frame
            self._check()
            try:
                data = self._socket.recv(self.READ_SIZE)
                if not data:
                    raise StompConnectionError('No more data')
            except (OSError, StompConnectionError) as e:
                self.disconnect()
                raise StompConnectionError('Connection to %s closed [%s]' % (self, e), cause=e) from e
            self._parser.add(data)

    def _check(self):
        if not self._connected():
            raise StompConnectionError('Not connected to %s' % self)

    def _connected(self):
        return self._socket is not None

    def _write(self, data):
        self._check()
        try:
            while data:
                sent = self._socket.send(data)
                if not sent:
                    raise StompConnectionError('0 bytes written')
                data = data[sent:]
        except (OSError, StompConnectionError) as e:
            raise StompConnectionError('Could not send to %s [%s]' % (self, e), cause=e) from e

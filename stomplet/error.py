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
class StompError(Exception):
    """Base class for STOMP errors

    :param message: A description of the error.
    :param cause: The underlying exception (if any).
    :param body: The body of the frame which provoked the error (if any).
    """
    def __init__(self, message='', cause=None, body=None):
        super(StompError, self).__init__(message)
        self.message = message
        self.cause = cause
        self.body = body

    def __str__(self):
        if self.body:
            return '%s [body=%s]' % (self.message, repr(self.body))
        return self.message

class StompFrameError(StompError):
    """Raised for error parsing STOMP frames
    """

class StompMalformedEndpoint(StompError, ValueError):
    """Raised for a broker URI which does not match the failover URI grammar
    """

class StompProbeFailed(StompError):
    """Raised when the readiness check of the wire-level connection itself broke
    """

class StompProtocolError(StompError):
    """Raised for STOMP protocol errors
    """

class StompUnexpectedReceipt(StompProtocolError):
    """Raised for a RECEIPT frame which does not match the receipt we are waiting for
    """

class StompUnexpectedCommand(StompProtocolError):
    """Raised when the broker answers a CONNECT frame with anything but CONNECTED
    """

class StompConnectionNotAcknowledged(StompProtocolError):
    """Raised when the broker does not answer a CONNECT frame at all
    """

class StompConnectionError(StompError):
    """Raised for nonexistent or broken connection
    """

class StompSocketNotEstablished(StompConnectionError):
    """Raised when a frame is written before the wire-level connection exists
    """

class StompNoEndpoints(StompConnectionError):
    """Raised when there is no broker to connect to
    """

class StompConnectionFailed(StompConnectionError):
    """Raised when all connect attempts are exhausted
    """

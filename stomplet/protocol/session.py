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
import copy

from stomplet.error import StompProtocolError

from . import commands, vendor as _vendor

class StompSession(object):
    """This object implements an abstract representation of a STOMP protocol session: the session state of the current broker connection, the active subscriptions (which are replayed after a reconnect), and the frames which arrived while the client was waiting for a receipt. It builds upon the low-level commands API in :mod:`~.commands`.

    :param vendor: The broker dialect to start with (see :func:`~.vendor.vendor`). It is replaced by the dialect announced in the **CONNECTED** frame, and restored by :meth:`close`.
    :param clientId: The client id used for durable subscriptions, or :obj:`None`.
    :param prefetchSize: The value of the vendor-specific prefetch header of **SUBSCRIBE** frames.

    .. note :: Subscriptions are recorded only after the broker confirmed them. Use :meth:`subscribed` and :meth:`unsubscribed` to tell the session.
    """
    CONNECTING = 'connecting'
    CONNECTED = 'connected'
    DISCONNECTED = 'disconnected'

    def __init__(self, vendor='AMQ', clientId=None, prefetchSize=1):
        self._defaultVendor = _vendor.vendor(vendor)
        self.clientId = clientId
        self.prefetchSize = prefetchSize
        self._reset()
        self._flush()

    # STOMP commands

    def connect(self, login='', passcode=''):
        """Create a **CONNECT** frame, remember the credentials for a later reconnect, and set the session state to CONNECTING."""
        self.__check('connect', [self.DISCONNECTED])
        self._login, self._passcode = login, passcode
        frame = commands.connect(login, passcode, self.clientId)
        self._state = self.CONNECTING
        return frame

    def connected(self, frame):
        """Handle the broker's answer to the **CONNECT** frame (:obj:`None` if there was none) and set the session state to CONNECTED."""
        self.__check('connected', [self.CONNECTING])
        self._id, self._server = commands.connected(frame)
        self._vendor = _vendor.detect(self._server, self._vendor)
        self._state = self.CONNECTED

    def disconnect(self):
        """Create a **DISCONNECT** frame."""
        return commands.disconnect(self.clientId)

    def close(self, flush=True):
        """Clean up the session: forget all information related to the broker connection, including the credentials and the pending frames.

        :param flush: Clear all active subscriptions, too.
        """
        self._reset()
        if flush:
            self._flush()

    def subscribe(self, destination, headers=None):
        """Create a **SUBSCRIBE** frame. The subscription becomes active only when you confirm it with :meth:`subscribed`."""
        return commands.subscribe(destination, headers, self.vendor, self.prefetchSize, self.clientId)

    def subscribed(self, destination, headers=None):
        """Record the subscription to **destination**. Resubscribing to an active destination replaces its headers."""
        self._subscriptions[destination] = copy.deepcopy(headers)

    def unsubscribe(self, destination, headers=None):
        """Create an **UNSUBSCRIBE** frame."""
        return commands.unsubscribe(destination, headers, self.vendor, self.clientId)

    def unsubscribed(self, destination):
        """Lose track of the subscription to **destination** (if any)."""
        self._subscriptions.pop(destination, None)

    def ack(self, message, transaction=None):
        """Create an **ACK** frame for a received **MESSAGE** frame or a bare message id."""
        return commands.ack(message, transaction, self.vendor)

    # session information

    @property
    def id(self):
        """The session id for the current client-broker connection."""
        return self._id

    @property
    def server(self):
        """The server id for the current client-broker connection."""
        return self._server

    @property
    def state(self):
        """The current session state."""
        return self._state

    @property
    def vendor(self):
        """The broker dialect of the current client-broker connection."""
        return self._vendor

    @property
    def endpoint(self):
        """The index of the broker (in the failover URI) of the current client-broker connection, or -1."""
        return self._endpoint

    @endpoint.setter
    def endpoint(self, index):
        self._endpoint = index

    @property
    def credentials(self):
        """The pair (login, passcode) the current connection was established with."""
        return self._login, self._passcode

    @property
    def subscriptions(self):
        """The active subscriptions as a dictionary (destination -> headers), in subscription order."""
        return dict(self._subscriptions)

    # pending frames

    def buffer(self, frames):
        """Make **frames** the frames to be delivered next, in this order, ahead of any frames which are still pending."""
        self._pending.extendleft(reversed(frames))

    def pending(self):
        """Return the next buffered frame (if any), or :obj:`None` (otherwise)."""
        if self._pending:
            return self._pending.popleft()

    def hasPending(self):
        return bool(self._pending)

    # subscription replay

    def replay(self):
        """Return a snapshot of all active subscriptions, a tuple of pairs (destination, headers) in subscription order, which you can replay after the next :meth:`connect`. The session itself is left unchanged."""
        return tuple((destination, copy.deepcopy(headers)) for (destination, headers) in self._subscriptions.items())

    # helpers

    def _flush(self):
        self._subscriptions = {}

    def _reset(self):
        self._id = None
        self._server = None
        self._state = self.DISCONNECTED
        self._endpoint = -1
        self._vendor = self._defaultVendor
        self._login = self._passcode = ''
        self._pending = collections.deque()

    def __check(self, command, states):
        if self.state not in states:
            raise StompProtocolError('Cannot handle command %s in state %s (only in states %s)' % (repr(command), repr(self.state), ', '.join(map(repr, states))))

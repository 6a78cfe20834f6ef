"""The synchronous client is dead simple. It does not assume anything about your concurrency model (thread vs process) or force you to use it any particular way. It gets out of your way and lets you do what you want.

Connection losses are handled for you: when a write or a read fails, the client dials the brokers of the failover URI again, establishes a new STOMP session with the same credentials, replays the active subscriptions, and retries the failed operation once.

Examples
--------

Producer
^^^^^^^^

.. literalinclude:: ../../stomplet/examples/sync/producer.py

Consumer
^^^^^^^^

.. literalinclude:: ../../stomplet/examples/sync/consumer.py

API
---
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
import contextlib
import logging
import uuid

from stomplet.error import StompConnectionError, StompConnectionFailed, StompError, StompSocketNotEstablished
from stomplet.protocol import StompFailoverTransport, StompMapFrame, StompReceipts, StompSession, StompSpec, commands
from stomplet.util import checkattr, forwardHeaders

from .transport import StompFrameTransport

LOG_CATEGORY = __name__

connected = checkattr('_transport')

class Stomp(object):
    """A synchronous STOMP client with failover and automatic reconnect.

    :param config: A :class:`~.StompConfig` object

    Every command which changes broker state returns a :class:`~.ReceiptResult`. If the command was issued synchronously (see the **sync** argument and :attr:`StompConfig.sync`), it tells you whether the broker confirmed it. Frames which arrive while the client waits for a receipt are delivered by the following calls to :meth:`readFrame`.

    .. seealso :: :class:`~.StompConfig` for how to set session configuration options, :class:`~.StompSession` for session state, :mod:`~.commands` for the frames the client sends.
    """
    failoverFactory = StompFailoverTransport
    transportFactory = StompFrameTransport

    def __init__(self, config):
        self.log = logging.getLogger(LOG_CATEGORY)
        self._config = config
        self.session = StompSession(config.vendor, config.clientId, config.prefetchSize)
        self._receipts = StompReceipts(config.sync)
        self._failover = self.failoverFactory(config.uri, config.attempts)
        self._readTimeout = config.readTimeout
        self._transport = None

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.disconnect()

    def connect(self, login=None, passcode=None):
        """connect(login=None, passcode=None)

        Establish a connection to a STOMP broker. Any existing connection is torn down first. If the wire-level connect fails, attempt a failover according to the settings in the client's :class:`~.StompConfig` object. The id of the established STOMP session is stored in the client's :class:`~.StompSession` attribute :attr:`session`.

        :param login: The login for the broker. If :obj:`None`, the one of the :class:`~.StompConfig` object is used.
        :param passcode: The passcode for the broker. If :obj:`None`, the one of the :class:`~.StompConfig` object is used.

        .. note :: Active subscriptions are not replayed by this method: a connect which you request explicitly starts from scratch. Only the reconnect after a connection loss restores them.
        """
        login = self._config.login if (login is None) else login
        passcode = self._config.passcode if (passcode is None) else passcode
        brokers = iter(self._failover)
        self.disconnect()

        try:
            for (attempt, index, broker) in brokers:
                transport = self.transportFactory(broker['host'], broker['port'])
                self.log.info('Connecting to %s [attempt %d/%d] ...' % (transport, attempt, self._failover.attempts))
                try:
                    transport.connect(self._config.connectTimeout)
                except StompConnectionError as e:
                    self.log.warning('Could not connect to %s [%s]' % (transport, e))
                    if (attempt == self._failover.attempts) and (index + 1 >= len(self._failover.brokers)):
                        raise StompConnectionFailed('Could not connect to %s (%d/%d)' % (transport, attempt, self._failover.attempts), cause=e) from e
                else:
                    self.log.info('Connection established')
                    self._failover.connected(index)
                    self._transport = transport
                    self.session.endpoint = index
                    break
        except StompConnectionError as e:
            self.log.error('Connect failed [%s]' % e)
            raise

        self._connect(login, passcode)

    def _connect(self, login, passcode):
        transport = self._transport
        try:
            self._send(self.session.connect(login, passcode))
            frame = self._receive()
            self.session.connected(frame)
        except StompError as e:
            self.log.error('STOMP session connect to %s failed [%s]' % (transport, e))
            self.close()
            raise
        self.log.info('STOMP session %s established with broker %s' % (self.session.id, transport))

    def disconnect(self):
        """Send a STOMP **DISCONNECT** command (if there is a connection), terminate the wire-level connection, and clear the session, including its active subscriptions.

        .. note :: A failure to send the **DISCONNECT** frame is logged but does not prevent the connection from being closed.
        """
        if self.__transport is not None:
            try:
                self._send(self.session.disconnect())
            except StompConnectionError as e:
                self.log.warning('Could not send %s to %s [%s]' % (StompSpec.DISCONNECT, self.__transport, e))
        self.close()

    def isConnected(self):
        """Tell whether there is an established STOMP session."""
        return (self.__transport is not None) and bool(self.session.id)

    # STOMP frames

    @connected
    def send(self, destination, body='', headers=None, sync=None):
        """send(destination, body='', headers=None, sync=None)

        Send a **SEND** frame.

        :param sync: Request a receipt and wait for it. If :obj:`None`, the session-wide default applies.
        """
        return self._command(commands.send(destination, body, headers), sync)

    @connected
    def forward(self, destination, frame, headers=None, sync=None):
        """forward(destination, frame, headers=None, sync=None)

        Send a copy of an existing frame (for instance, a received **MESSAGE** frame or a :class:`~.StompMapFrame`) as a **SEND** frame to **destination**. The headers which the broker assigns to a message are not copied; **headers** are applied on top.
        """
        return self._command(commands.send(destination, frame.body, forwardHeaders(frame.headers, headers)), sync)

    @connected
    def subscribe(self, destination, headers=None, sync=None):
        """subscribe(destination, headers=None, sync=None)

        Send a **SUBSCRIBE** frame to subscribe to a STOMP destination. The subscription is recorded for replay only if the command succeeded.
        """
        result = self._command(self.session.subscribe(destination, headers), sync)
        if result:
            self.session.subscribed(destination, headers)
        return result

    @connected
    def unsubscribe(self, destination, headers=None, sync=None):
        """unsubscribe(destination, headers=None, sync=None)

        Send an **UNSUBSCRIBE** frame to terminate an existing subscription. The subscription is forgotten only if the command succeeded.
        """
        result = self._command(self.session.unsubscribe(destination, headers), sync)
        if result:
            self.session.unsubscribed(destination)
        return result

    @connected
    def ack(self, message, transaction=None):
        """ack(message, transaction=None)

        Send an **ACK** frame for a received **MESSAGE** frame (or a bare message id). Acknowledgments never wait for a receipt.
        """
        self.sendFrame(self.session.ack(message, transaction))

    @connected
    def begin(self, transaction=None, sync=None):
        """begin(transaction=None, sync=None)

        Send a **BEGIN** frame to begin a STOMP transaction.
        """
        return self._command(commands.begin(transaction), sync)

    @connected
    def abort(self, transaction=None, sync=None):
        """abort(transaction=None, sync=None)

        Send an **ABORT** frame to abort a STOMP transaction.
        """
        return self._command(commands.abort(transaction), sync)

    @connected
    def commit(self, transaction=None, sync=None):
        """commit(transaction=None, sync=None)

        Send a **COMMIT** frame to commit a STOMP transaction.
        """
        return self._command(commands.commit(transaction), sync)

    @contextlib.contextmanager
    @connected
    def transaction(self, transaction=None, sync=None):
        """transaction(transaction=None, sync=None)

        A context manager for STOMP transactions. Upon entering the :obj:`with` block, a transaction will be begun and upon exiting, that transaction will be committed or (if an error occurred) aborted.

        **Example:**

        >>> client = Stomp(StompConfig('tcp://localhost:61613'))
        >>> client.connect()
        >>> with client.transaction() as transaction:
        ...     client.send('/queue/test', 'message with transaction header', {'transaction': transaction})
        ...     raise RuntimeError('poof')
        ...
        Traceback (most recent call last):
          File "<stdin>", line 3, in <module>
        RuntimeError: poof
        >>> client.disconnect()
        """
        transaction = str(transaction or uuid.uuid4())
        self.begin(transaction, sync)
        try:
            yield transaction
        except BaseException:
            self.abort(transaction, sync)
            raise
        self.commit(transaction, sync)

    # frame transport

    def close(self, flush=True):
        """Close both the client's :attr:`session` (a :class:`~.StompSession` object) and its transport (that is, the wire-level connection with the broker).

        :param flush: Decides whether the client's :attr:`session` should forget its active subscriptions or not.
        """
        self.session.close(flush)
        try:
            self.__transport and self.__transport.disconnect()
        finally:
            self._transport = None

    @connected
    def canRead(self, timeout=None):
        """Tell whether there is an incoming STOMP frame available for us to read.

        :param timeout: This is the time (in seconds) to wait for a frame to become available. If :obj:`None`, the client's read timeout applies (see :meth:`setReadTimeout`).

        .. note :: If the wire-level connection is not available, this method will raise a :class:`~.StompConnectionError`! If the readiness check itself breaks, it raises a :class:`~.StompProbeFailed` error.
        """
        if self.session.hasPending():
            return True
        return self._transport.canRead(self._readTimeout if (timeout is None) else timeout)

    def setReadTimeout(self, seconds, milliseconds=0):
        """Set the time to wait for an incoming frame."""
        self._readTimeout = seconds + milliseconds / 1000.0

    @connected
    def sendFrame(self, frame):
        """Send a raw STOMP frame. If the connection is lost, reconnect and try once more.

        :param frame: Any STOMP frame (represented as a :class:`~.StompFrame` object).

        .. note :: If we are not connected, this method, and all other API commands for sending STOMP frames except :meth:`~.sync.client.Stomp.connect`, will raise a :class:`~.StompSocketNotEstablished` error.
        """
        try:
            self._send(frame)
        except StompConnectionError as e:
            self.log.warning('Could not send %s [%s]' % (frame.command, e))
            self._reconnect()
            self._send(frame)

    @connected
    def readFrame(self):
        """Fetch the next available frame: a frame which arrived while the client was waiting for a receipt, or the next frame on the wire. Returns :obj:`None` if no frame arrived within the read timeout. If the connection is lost, reconnect and try once more.

        .. note :: A frame with a **transformation** header :obj:`'jms-map-json'` is returned as a :class:`~.StompMapFrame`.
        """
        frame = self.session.pending()
        if frame is not None:
            return frame
        try:
            return self._receive()
        except StompConnectionError as e:
            self.log.warning('Could not read from %s [%s]' % (self.__transport, e))
            self._reconnect()
        return self.session.pending() or self._receive()

    def _command(self, frame, sync):
        receipt = self._receipts.prepare(frame, sync)
        self.sendFrame(frame)
        result, frames = self._receipts.wait(receipt, self.readFrame)
        self.session.buffer(frames)
        return result

    def _reconnect(self):
        subscriptions = self.session.replay()
        login, passcode = self.session.credentials
        self.log.info('Reconnecting [%d subscriptions to replay]' % len(subscriptions))
        self.connect(login, passcode)
        for (destination, headers) in subscriptions:
            self.log.info('Replaying subscription to %s' % destination)
            self.subscribe(destination, headers)

    def _send(self, frame):
        if self.log.isEnabledFor(logging.DEBUG):
            self.log.debug('Sending %s' % frame.info())
        self._transport.send(frame)

    def _receive(self):
        transport = self._transport
        if not transport.canRead(self._readTimeout):
            return None
        frame = transport.receive()
        if self.log.isEnabledFor(logging.DEBUG):
            self.log.debug('Received %s' % frame.info())
        if frame.headers.get(StompSpec.TRANSFORMATION_HEADER) == StompSpec.JMS_MAP_JSON:
            frame = StompMapFrame(frame)
        return frame

    @property
    def _transport(self):
        transport = self.__transport
        if not transport:
            raise StompSocketNotEstablished('Not connected')
        return transport

    @_transport.setter
    def _transport(self, transport):
        self.__transport = transport

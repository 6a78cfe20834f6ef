"""This module implements a low-level and stateless API for the STOMP commands this client speaks. All STOMP command frames are represented as :class:`~.frame.StompFrame` objects. It forms the basis for :class:`~.session.StompSession` and the :class:`~.sync.client.Stomp` client. Headers are rendered in insertion order, so the order in which the functions below add them is the order on the wire.

Examples:

>>> from stomplet.protocol import commands, vendor
>>> commands.connect('hi', 'there')
StompFrame(command='CONNECT', headers={'login': 'hi', 'passcode': 'there'}, body='')
>>> commands.subscribe('/queue/test', {'selector': "JMSType = 'car'"}, vendor.vendor('AMQ'), 1)
StompFrame(command='SUBSCRIBE', headers={'ack': 'client', 'activemq.prefetchSize': '1', 'selector': "JMSType = 'car'", 'destination': '/queue/test'}, body='')
>>> commands.ack('007', transaction='4711')
StompFrame(command='ACK', headers={'transaction': '4711', 'message-id': '007'}, body='')
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
from stomplet.error import StompConnectionNotAcknowledged, StompProtocolError, StompUnexpectedCommand

from .frame import StompFrame
from .spec import StompSpec
from .vendor import ActiveMQ

# outgoing frames

def connect(login='', passcode='', clientId=None):
    """Create a **CONNECT** frame.

    :param login: The **login** header.
    :param passcode: The **passcode** header.
    :param clientId: The **client-id** header (omitted if :obj:`None`).
    """
    headers = {StompSpec.LOGIN_HEADER: login, StompSpec.PASSCODE_HEADER: passcode}
    if clientId is not None:
        headers[StompSpec.CLIENT_ID_HEADER] = clientId
    return StompFrame(StompSpec.CONNECT, headers)

def disconnect(clientId=None):
    """Create a **DISCONNECT** frame.

    :param clientId: See :func:`connect`.
    """
    headers = {}
    if clientId is not None:
        headers[StompSpec.CLIENT_ID_HEADER] = clientId
    return StompFrame(StompSpec.DISCONNECT, headers)

def send(destination, body='', headers=None):
    """Create a **SEND** frame.

    :param destination: Destination for the frame.
    :param body: Message body. It must not contain a NUL character.
    :param headers: Additional STOMP headers.
    """
    frame = StompFrame(StompSpec.SEND, dict(headers or []), body)
    frame.headers[StompSpec.DESTINATION_HEADER] = destination
    return frame

def subscribe(destination, headers, vendor, prefetchSize, clientId=None):
    """Create a **SUBSCRIBE** frame with client acknowledgment mode.

    :param destination: Destination for the subscription.
    :param headers: Additional STOMP headers. They take precedence over the ones derived from the other parameters.
    :param vendor: A :class:`~.vendor.StompVendor` object which names the prefetch and subscription headers.
    :param prefetchSize: The value of the prefetch header.
    :param clientId: The subscription name for durable subscriptions (omitted if :obj:`None`).
    """
    frame = StompFrame(StompSpec.SUBSCRIBE, {StompSpec.ACK_HEADER: StompSpec.ACK_CLIENT})
    frame.headers.update((key, str(value)) for (key, value) in vendor.subscribeHeaders(prefetchSize, clientId).items())
    frame.headers.update((key, str(value)) for (key, value) in dict(headers or []).items())
    frame.headers[StompSpec.DESTINATION_HEADER] = destination
    return frame

def unsubscribe(destination, headers, vendor, clientId=None):
    """Create an **UNSUBSCRIBE** frame.

    :param destination: The destination of the subscription you wish to terminate.
    :param headers: Additional STOMP headers.
    """
    frame = StompFrame(StompSpec.UNSUBSCRIBE, headers)
    frame.headers.update((key, str(value)) for (key, value) in vendor.unsubscribeHeaders(clientId).items())
    frame.headers[StompSpec.DESTINATION_HEADER] = destination
    return frame

def ack(message, transaction=None, vendor=None):
    """Create an **ACK** frame.

    :param message: Either the **MESSAGE** frame you wish to ack (its headers are reused), or a bare message id.
    :param transaction: The id of the transaction the ack is part of (if any).
    :param vendor: The :class:`~.vendor.StompVendor` object which decides which of the message's headers must not be echoed. Defaults to ActiveMQ.
    """
    vendor = vendor or ActiveMQ()
    if isinstance(message, StompFrame):
        headers = vendor.ackHeaders(message.headers)
        if transaction is not None:
            headers[StompSpec.TRANSACTION_HEADER] = transaction
    else:
        headers = {}
        if transaction is not None:
            headers[StompSpec.TRANSACTION_HEADER] = transaction
        headers[StompSpec.MESSAGE_ID_HEADER] = message
    return StompFrame(StompSpec.ACK, headers)

def begin(transaction=None):
    """Create a **BEGIN** frame.

    :param transaction: The id of the transaction (omitted if :obj:`None`).
    """
    return StompFrame(StompSpec.BEGIN, _transactionHeaders(transaction))

def abort(transaction=None):
    """Create an **ABORT** frame.

    :param transaction: See :func:`begin`.
    """
    return StompFrame(StompSpec.ABORT, _transactionHeaders(transaction))

def commit(transaction=None):
    """Create a **COMMIT** frame.

    :param transaction: See :func:`begin`.
    """
    return StompFrame(StompSpec.COMMIT, _transactionHeaders(transaction))

# incoming frames

def connected(frame):
    """Handle the broker's answer to a **CONNECT** frame. Returns the pair (session id, server).

    :param frame: The frame we received, or :obj:`None` if the broker did not answer.
    """
    if frame is None:
        raise StompConnectionNotAcknowledged('Connection not acknowledged')
    if frame.command != StompSpec.CONNECTED:
        raise StompUnexpectedCommand('Unexpected command: %s [expected=%s, headers=%s]' % (frame.command, StompSpec.CONNECTED, frame.headers), body=frame.body)
    headers = frame.headers
    if not headers.get(StompSpec.SESSION_HEADER):
        raise StompProtocolError('Invalid %s frame (%s header is missing) [headers=%s]' % (StompSpec.CONNECTED, StompSpec.SESSION_HEADER, headers))
    return headers[StompSpec.SESSION_HEADER], headers.get(StompSpec.SERVER_HEADER)

def receipt(frame):
    """Handle a **RECEIPT** frame. Returns the receipt id which you can use to match this receipt to the command that requested it.
    """
    _checkCommand(frame, [StompSpec.RECEIPT])
    try:
        return frame.headers[StompSpec.RECEIPT_ID_HEADER]
    except KeyError:
        raise StompProtocolError('Invalid %s frame (%s header mandatory) [headers=%s]' % (frame.command, StompSpec.RECEIPT_ID_HEADER, frame.headers), body=frame.body) from None

# private helper methods

def _transactionHeaders(transaction):
    return {} if (transaction is None) else {StompSpec.TRANSACTION_HEADER: transaction}

def _checkCommand(frame, commands):
    if frame.command not in commands:
        raise StompProtocolError('Cannot handle command: %s [expected=%s, headers=%s]' % (frame.command, ', '.join(commands), frame.headers), body=frame.body)

"""Every command which changes broker state (**SEND**, **SUBSCRIBE**, **UNSUBSCRIBE**, **BEGIN**, **COMMIT**, **ABORT**) may be issued fire-and-forget or synchronously. A synchronous command carries a **receipt** header, and the client reads frames until the broker's **RECEIPT** frame with the matching **receipt-id** arrives. Frames which arrive in the meantime are kept in order for later delivery.

>>> from stomplet.protocol import StompFrame, StompReceipts
>>> receipts = StompReceipts(sync=False)
>>> frame = StompFrame('SEND', {'destination': '/queue/test'}, 'hi')
>>> receipts.prepare(frame, sync=True) == frame.headers['receipt']
True
>>> incoming = iter([StompFrame('MESSAGE', {'message-id': '1'}), StompFrame('RECEIPT', {'receipt-id': frame.headers['receipt']})])
>>> result, buffered = receipts.wait(frame.headers['receipt'], lambda: next(incoming, None))
>>> result, [f.command for f in buffered]
(<ReceiptResult.SUCCESS: 'success'>, ['MESSAGE'])
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
import enum
import logging
import uuid

from stomplet.error import StompUnexpectedReceipt

from . import commands
from .spec import StompSpec

LOG_CATEGORY = __name__

class ReceiptResult(enum.Enum):
    """The outcome of a command. Only :attr:`SUCCESS` is truthy, so ``if client.subscribe(...):`` reads naturally.

    * :attr:`SUCCESS`: the broker confirmed the command, or no confirmation was requested.
    * :attr:`AWAITING_MORE`: other frames arrived but the receipt did not (yet); they are waiting in the session's pending buffer. Try again later.
    """
    SUCCESS = 'success'
    AWAITING_MORE = 'awaiting-more'

    def __bool__(self):
        return self is ReceiptResult.SUCCESS

class StompReceipts(object):
    """The receipt coordinator.

    :param sync: The session-wide default which applies whenever a command's own **sync** argument is :obj:`None`.
    """
    def __init__(self, sync=False):
        self.log = logging.getLogger(LOG_CATEGORY)
        self.sync = sync

    def isSync(self, sync=None):
        return self.sync if (sync is None) else sync

    def prepare(self, frame, sync=None):
        """If the command is synchronous, add a fresh **receipt** header to **frame** and return its value. Otherwise, return :obj:`None`."""
        if not self.isSync(sync):
            return None
        receipt = uuid.uuid4().hex
        frame.headers[StompSpec.RECEIPT_HEADER] = receipt
        return receipt

    def wait(self, receipt, read):
        """Wait for the **RECEIPT** frame matching **receipt**. Returns a pair (:class:`ReceiptResult`, frames), where frames are the other frames received in the meantime, in arrival order.

        :param receipt: The result of :meth:`prepare`. If :obj:`None`, there is nothing to wait for.
        :param read: A callable which returns the next incoming frame, or :obj:`None` if no frame is available within the read timeout.

        A read timeout ends the wait only when other frames arrived in the meantime (:attr:`ReceiptResult.AWAITING_MORE`). Otherwise, the receipt is awaited for as long as it takes.

        .. note :: A **RECEIPT** frame for any other receipt id raises a :class:`~.error.StompUnexpectedReceipt` error.
        """
        buffered = []
        if receipt is None:
            return ReceiptResult.SUCCESS, buffered
        while True:
            frame = read()
            if frame is None:
                if not buffered:
                    self.log.debug('Still waiting for receipt %s' % receipt)
                    continue
                self.log.info('Receipt %s outstanding [%d frames pending]' % (receipt, len(buffered)))
                return ReceiptResult.AWAITING_MORE, buffered
            if frame.command != StompSpec.RECEIPT:
                buffered.append(frame)
                continue
            receiptId = commands.receipt(frame)
            if receiptId != receipt:
                raise StompUnexpectedReceipt('Unexpected receipt id %s [expected=%s]' % (receiptId, receipt), body=frame.body)
            return ReceiptResult.SUCCESS, buffered

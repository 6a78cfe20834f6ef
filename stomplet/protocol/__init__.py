"""The :mod:`~.protocol` package is a collection of generic components each of which you can use independently for your own STOMP related functionality.

.. note:: Please restrict your imports to the main package :mod:`stomplet.protocol`. The subpackage structure is potentially unstable.
"""
from . import commands, vendor
from .failover import StompFailoverTransport, StompFailoverUri
from .frame import StompFrame, StompMapFrame
from .parser import StompParser
from .receipt import ReceiptResult, StompReceipts
from .spec import StompSpec
from .session import StompSession

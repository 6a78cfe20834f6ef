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
import functools

from stomplet.protocol.spec import StompSpec

# headers which the broker sets on a MESSAGE frame and which must not be sent on
_RESERVED_HEADERS = frozenset([StompSpec.MESSAGE_ID_HEADER, StompSpec.DESTINATION_HEADER, StompSpec.RECEIPT_HEADER, 'timestamp', 'expires', 'priority'])

def forwardHeaders(headers, overrides=None):
    """Copy the **headers** of a frame you wish to send on, drop the reserved ones, and apply **overrides** on top."""
    headers = dict((header, value) for (header, value) in headers.items() if header not in _RESERVED_HEADERS)
    headers.update(overrides or [])
    return headers

def checkattr(attribute):
    def _checkattr(f):
        @functools.wraps(f)
        def __checkattr(self, *args, **kwargs):
            getattr(self, attribute)
            return f(self, *args, **kwargs)
        return __checkattr
    return _checkattr

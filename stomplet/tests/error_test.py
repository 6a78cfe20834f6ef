"""
Copyright 2011, 2012 Mozes, Inc.

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
import unittest

from stomplet import error
from stomplet.config import StompConfig

class StompErrorTest(unittest.TestCase):
    def test_message_and_body(self):
        cause = OSError('connection refused')
        e = error.StompUnexpectedCommand('Unexpected command: ERROR', cause=cause, body='bad credentials')
        self.assertEqual(e.message, 'Unexpected command: ERROR')
        self.assertTrue(e.cause is cause)
        self.assertEqual(str(e), "Unexpected command: ERROR [body='bad credentials']")
        self.assertEqual(str(error.StompConnectionError('Not connected')), 'Not connected')

    def test_hierarchy(self):
        for cls in [error.StompSocketNotEstablished, error.StompNoEndpoints, error.StompConnectionFailed]:
            self.assertTrue(issubclass(cls, error.StompConnectionError))
        for cls in [error.StompUnexpectedReceipt, error.StompUnexpectedCommand, error.StompConnectionNotAcknowledged]:
            self.assertTrue(issubclass(cls, error.StompProtocolError))
        self.assertFalse(issubclass(error.StompProbeFailed, error.StompConnectionError))
        self.assertTrue(issubclass(error.StompMalformedEndpoint, ValueError))
        for cls in [error.StompFrameError, error.StompMalformedEndpoint, error.StompProbeFailed, error.StompProtocolError, error.StompConnectionError]:
            self.assertTrue(issubclass(cls, error.StompError))

class StompConfigTest(unittest.TestCase):
    def test_defaults(self):
        config = StompConfig('tcp://localhost')
        self.assertEqual((config.login, config.passcode, config.sync, config.prefetchSize, config.clientId, config.vendor), ('', '', False, 1, None, 'AMQ'))
        self.assertEqual((config.attempts, config.connectTimeout, config.readTimeout), (10, 60, 60))

if __name__ == '__main__':
    unittest.main()

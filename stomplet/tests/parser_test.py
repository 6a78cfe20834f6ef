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

from stomplet.error import StompFrameError
from stomplet.protocol import commands
from stomplet.protocol.frame import StompFrame
from stomplet.protocol.parser import StompParser
from stomplet.protocol.spec import StompSpec

class StompParserTest(unittest.TestCase):
    def test_frameParse_succeeds(self):
        message = {
            'command': 'SEND',
            'headers': {'foo': 'bar', 'hello ': 'there-world with space ', 'empty-value': '', StompSpec.DESTINATION_HEADER: '/queue/blah'},
            'body': 'some stuff\nand more'
        }
        frame = StompFrame(**message)
        parser = StompParser()

        parser.add(bytes(frame))
        self.assertEqual(parser.get(), frame)
        self.assertEqual(parser.get(), None)

    def test_header_value_may_contain_separator(self):
        parser = StompParser()
        parser.add(b'MESSAGE\nurl:tcp://localhost:61613\n\n\x00')
        self.assertEqual(parser.get().headers, {'url': 'tcp://localhost:61613'})

    def test_reset_succeeds(self):
        frame = StompFrame('SEND', {'foo': 'bar'}, 'some stuff\nand more')
        parser = StompParser()

        parser.add(bytes(frame))
        parser.reset()
        self.assertEqual(parser.get(), None)
        parser.add(bytes(frame)[:10])
        self.assertEqual(parser.get(), None)
        parser.reset()
        parser.add(bytes(frame))
        self.assertEqual(parser.get(), frame)

    def test_frame_without_header_or_body_succeeds(self):
        parser = StompParser()
        parser.add(bytes(commands.disconnect()))
        self.assertEqual(parser.get(), commands.disconnect())

    def test_frames_with_optional_newlines_succeeds(self):
        parser = StompParser()
        frame = b'\n' + bytes(commands.disconnect()) + b'\n'
        parser.add(2 * frame)
        for _ in range(2):
            self.assertEqual(parser.get(), commands.disconnect())
        self.assertEqual(parser.get(), None)

    def test_getMessage_returns_None_if_not_done(self):
        parser = StompParser()
        self.assertEqual(None, parser.get())
        parser.add(b'CONNECT')
        self.assertEqual(None, parser.get())
        self.assertFalse(parser.canRead())
        parser.add(b'ED\nsession:4711\n\n\x00')
        self.assertTrue(parser.canRead())
        self.assertEqual(StompFrame('CONNECTED', {'session': '4711'}), parser.get())

    def test_terminator_without_command_is_no_frame(self):
        parser = StompParser()
        parser.add(b'\x00\n\n\x00')
        self.assertFalse(parser.canRead())
        parser.add(b'DISCONNECT\n\n\x00')
        self.assertEqual(StompFrame('DISCONNECT'), parser.get())

    def test_header_line_missing_separator_raises_FrameError(self):
        parser = StompParser()
        self.assertRaises(StompFrameError, parser.add, b'SEND\nno separator\n\n\x00')

    def test_invalid_encoding_raises_FrameError(self):
        parser = StompParser()
        self.assertRaises(StompFrameError, parser.add, b'MESSAGE\n\n\xff\xfe\x00')

    def test_body_is_trimmed(self):
        parser = StompParser()
        parser.add(b'MESSAGE\nx:y\n\n  hello world \n\n\x00')
        frame = parser.get()
        self.assertEqual(frame.body, '  hello world')

    def test_byte_by_byte(self):
        headers = {'x': 'y'}
        body = 'testing 1 2 3'
        frameBytes = bytes(StompFrame('MESSAGE', headers, body))
        self.assertTrue(frameBytes.endswith(b'\x00'))
        parser = StompParser()
        for i in range(len(frameBytes)):
            parser.add(frameBytes[i:i + 1])
        frame = parser.get()
        self.assertEqual('MESSAGE', frame.command)
        self.assertEqual(headers, frame.headers)
        self.assertEqual(body, frame.body)
        self.assertEqual(parser.get(), None)

    def test_utf8_body(self):
        frame = StompFrame('MESSAGE', {'x': 'ü'}, 'grüß dich')
        parser = StompParser()
        parser.add(bytes(frame))
        self.assertEqual(parser.get(), frame)

    def test_multiple_frames_per_read(self):
        body1 = 'boo'
        body2 = 'hoo'
        headers = {'x': 'y'}
        frameBytes = bytes(StompFrame('MESSAGE', headers, body1)) + bytes(StompFrame('MESSAGE', headers, body2))
        parser = StompParser()
        parser.add(frameBytes)

        frame = parser.get()
        self.assertEqual('MESSAGE', frame.command)
        self.assertEqual(headers, frame.headers)
        self.assertEqual(body1, frame.body)

        frame = parser.get()
        self.assertEqual('MESSAGE', frame.command)
        self.assertEqual(headers, frame.headers)
        self.assertEqual(body2, frame.body)

        self.assertEqual(parser.get(), None)

if __name__ == '__main__':
    unittest.main()

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

from stomplet.error import StompConnectionNotAcknowledged, StompProtocolError, StompUnexpectedCommand
from stomplet.protocol import StompFrame, StompSpec, commands, vendor
from stomplet.protocol.vendor import ActiveMQ, RabbitMQ

class CommandsTest(unittest.TestCase):
    def test_connect(self):
        self.assertEqual(commands.connect('curious', 'george'), StompFrame(StompSpec.CONNECT, {'login': 'curious', 'passcode': 'george'}))
        self.assertEqual(commands.connect(), StompFrame(StompSpec.CONNECT, {'login': '', 'passcode': ''}))
        self.assertEqual(commands.connect('', '', 'durable'), StompFrame(StompSpec.CONNECT, {'login': '', 'passcode': '', 'client-id': 'durable'}))

    def test_disconnect(self):
        self.assertEqual(commands.disconnect(), StompFrame(StompSpec.DISCONNECT))
        self.assertEqual(commands.disconnect('durable'), StompFrame(StompSpec.DISCONNECT, {'client-id': 'durable'}))

    def test_send(self):
        frame = commands.send('/queue/foo', 'hi', {'foo': 'bar', StompSpec.DESTINATION_HEADER: '/queue/ignored'})
        self.assertEqual(frame, StompFrame(StompSpec.SEND, {'foo': 'bar', StompSpec.DESTINATION_HEADER: '/queue/foo'}, 'hi'))
        self.assertEqual(str(commands.send('/queue/foo', 'hi', {'foo': 'bar'})), 'SEND\nfoo:bar\ndestination:/queue/foo\n\nhi\x00')

    def test_subscribe_activemq(self):
        frame = commands.subscribe('/queue/foo', {'selector': "type = 'x'"}, ActiveMQ(), 1)
        self.assertEqual(str(frame), "SUBSCRIBE\nack:client\nactivemq.prefetchSize:1\nselector:type = 'x'\ndestination:/queue/foo\n\n\x00")
        frame = commands.subscribe('/topic/foo', None, ActiveMQ(), 5, 'durable')
        self.assertEqual(list(frame.headers.items()), [
            ('ack', 'client'), ('activemq.prefetchSize', '5'), ('activemq.subscriptionName', 'durable'), ('destination', '/topic/foo')
        ])

    def test_subscribe_rabbitmq(self):
        frame = commands.subscribe('/queue/foo', None, RabbitMQ(), 10, 'durable')
        self.assertEqual(list(frame.headers.items()), [
            ('ack', 'client'), ('prefetch-count', '10'), ('id', 'durable'), ('destination', '/queue/foo')
        ])

    def test_subscribe_caller_headers_take_precedence(self):
        frame = commands.subscribe('/queue/foo', {'ack': 'auto', 'activemq.prefetchSize': 100}, ActiveMQ(), 1)
        self.assertEqual(frame.headers, {'ack': 'auto', 'activemq.prefetchSize': '100', 'destination': '/queue/foo'})

    def test_unsubscribe(self):
        self.assertEqual(commands.unsubscribe('/queue/foo', None, ActiveMQ(), 'durable'), StompFrame(StompSpec.UNSUBSCRIBE, {'destination': '/queue/foo'}))
        frame = commands.unsubscribe('/queue/foo', {'foo': 'bar'}, RabbitMQ(), 'durable')
        self.assertEqual(list(frame.headers.items()), [('foo', 'bar'), ('id', 'durable'), ('destination', '/queue/foo')])
        self.assertEqual(commands.unsubscribe('/queue/foo', None, RabbitMQ()), StompFrame(StompSpec.UNSUBSCRIBE, {'destination': '/queue/foo'}))

    def test_ack(self):
        message = StompFrame(StompSpec.MESSAGE, {StompSpec.MESSAGE_ID_HEADER: '4711', StompSpec.CONTENT_LENGTH_HEADER: '2', 'foo': 'bar'}, 'hi')
        self.assertEqual(commands.ack(message), StompFrame(StompSpec.ACK, message.headers))
        self.assertEqual(commands.ack(message, 'tx1'), StompFrame(StompSpec.ACK, dict(message.headers, transaction='tx1')))
        self.assertEqual(commands.ack(message, vendor=RabbitMQ()), StompFrame(StompSpec.ACK, {StompSpec.MESSAGE_ID_HEADER: '4711', 'foo': 'bar'}))
        self.assertEqual(commands.ack(message, 'tx1', RabbitMQ()), StompFrame(StompSpec.ACK, {StompSpec.MESSAGE_ID_HEADER: '4711', 'foo': 'bar', 'transaction': 'tx1'}))
        self.assertEqual(commands.ack(message).body, '')

    def test_ack_message_id(self):
        self.assertEqual(commands.ack('4711'), StompFrame(StompSpec.ACK, {StompSpec.MESSAGE_ID_HEADER: '4711'}))
        frame = commands.ack('4711', 'tx1')
        self.assertEqual(list(frame.headers.items()), [('transaction', 'tx1'), ('message-id', '4711')])

    def test_transaction(self):
        for (method, command) in [(commands.begin, StompSpec.BEGIN), (commands.commit, StompSpec.COMMIT), (commands.abort, StompSpec.ABORT)]:
            self.assertEqual(method('4711'), StompFrame(command, {StompSpec.TRANSACTION_HEADER: '4711'}))
            self.assertEqual(method(), StompFrame(command))

    def test_connected(self):
        frame = StompFrame(StompSpec.CONNECTED, {StompSpec.SESSION_HEADER: 'sess-1', StompSpec.SERVER_HEADER: 'ActiveMQ/5.8.0'})
        self.assertEqual(commands.connected(frame), ('sess-1', 'ActiveMQ/5.8.0'))
        self.assertEqual(commands.connected(StompFrame(StompSpec.CONNECTED, {StompSpec.SESSION_HEADER: 'sess-1'})), ('sess-1', None))

    def test_connected_failures(self):
        self.assertRaises(StompConnectionNotAcknowledged, commands.connected, None)
        self.assertRaises(StompProtocolError, commands.connected, StompFrame(StompSpec.CONNECTED))
        try:
            commands.connected(StompFrame(StompSpec.ERROR, {'message': 'denied'}, 'bad credentials'))
        except StompUnexpectedCommand as e:
            self.assertEqual(e.body, 'bad credentials')
            self.assertTrue('ERROR' in str(e))
            self.assertTrue('bad credentials' in str(e))
        else:
            self.fail('ERROR frame accepted as CONNECTED frame')

    def test_receipt(self):
        self.assertEqual(commands.receipt(StompFrame(StompSpec.RECEIPT, {StompSpec.RECEIPT_ID_HEADER: '4711'})), '4711')
        self.assertRaises(StompProtocolError, commands.receipt, StompFrame(StompSpec.RECEIPT))
        self.assertRaises(StompProtocolError, commands.receipt, StompFrame(StompSpec.MESSAGE, {StompSpec.RECEIPT_ID_HEADER: '4711'}))

class VendorTest(unittest.TestCase):
    def test_vendor(self):
        self.assertEqual(vendor.vendor('AMQ'), ActiveMQ())
        self.assertEqual(vendor.vendor('RMQ'), RabbitMQ())
        self.assertNotEqual(vendor.vendor('AMQ'), RabbitMQ())
        profile = RabbitMQ()
        self.assertTrue(vendor.vendor(profile) is profile)
        self.assertRaises(StompProtocolError, vendor.vendor, 'HornetQ')

    def test_detect(self):
        self.assertEqual(vendor.detect('RabbitMQ/3.2.1', ActiveMQ()), RabbitMQ())
        self.assertEqual(vendor.detect('ActiveMQ/5.8.0', RabbitMQ()), ActiveMQ())
        self.assertEqual(vendor.detect('Apache/Apollo', RabbitMQ()), RabbitMQ())
        self.assertEqual(vendor.detect(None, ActiveMQ()), ActiveMQ())

    def test_new_dialect(self):
        class Apollo(vendor.StompVendor):
            NAME = 'APL'
            SERVER = 'apollo'
            prefetchHeader = 'credit'

        self.assertEqual(Apollo().subscribeHeaders(3, 'durable'), {'credit': 3})
        self.assertEqual(Apollo().unsubscribeHeaders('durable'), {})
        self.assertEqual(commands.subscribe('/queue/foo', None, Apollo(), 3).headers, {'ack': 'client', 'credit': '3', 'destination': '/queue/foo'})

if __name__ == '__main__':
    unittest.main()

from stomplet.config import StompConfig
from stomplet.protocol import StompMapFrame
from stomplet.sync import Stomp

CONFIG = StompConfig('tcp://localhost:61613')
QUEUE = '/queue/test'

if __name__ == '__main__':
    client = Stomp(CONFIG)
    client.connect()
    client.send(QUEUE, 'test message 1')
    client.send(QUEUE, 'test message 2', sync=True)
    with client.transaction() as transaction:
        client.send(QUEUE, 'test message 3', {'transaction': transaction})
    client.forward(QUEUE, StompMapFrame(values={'city': 'Berlin', 'count': 3}))
    client.disconnect()

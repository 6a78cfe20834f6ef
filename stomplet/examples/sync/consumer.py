from stomplet.config import StompConfig
from stomplet.sync import Stomp

CONFIG = StompConfig('failover:(tcp://localhost:61613,tcp://localhost:61614)?randomize=false', sync=True, readTimeout=5)
QUEUE = '/queue/test'

if __name__ == '__main__':
    with Stomp(CONFIG) as client:
        client.connect()
        if not client.subscribe(QUEUE):
            raise SystemExit('Subscription to %s was not confirmed' % QUEUE)
        while True:
            frame = client.readFrame()
            if frame is None:
                continue
            print('Got %s' % frame.info())
            client.ack(frame)

from .client import Stomp

"""A synchronous STOMP client with failover, automatic reconnect, and subscription replay. Start with :class:`stomplet.sync.Stomp` and :class:`stomplet.config.StompConfig`.
"""

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
class StompConfig(object):
    """This is a container for the configuration options which are needed to establish a STOMP connection and to run a STOMP session. All parameters are available as attributes with the same name of this object.

    :param uri: A failover URI as it is accepted by :class:`~.StompFailoverUri`.
    :param login: The login for the STOMP brokers.
    :param passcode: The passcode for the STOMP brokers.
    :param sync: The session-wide default for synchronous commands. If :obj:`True`, every command which supports it requests a **RECEIPT** frame from the broker and waits for it.
    :param prefetchSize: The value of the vendor-specific prefetch header of a **SUBSCRIBE** frame.
    :param clientId: The client id used for durable subscriptions, or :obj:`None`.
    :param vendor: The broker dialect, a key of :data:`~.vendor.VENDORS` (:obj:`'AMQ'` or :obj:`'RMQ'`) or a :class:`~.vendor.StompVendor` object.
    :param attempts: The maximum number of wire-level connect attempts per connect.
    :param connectTimeout: The time (in seconds) to wait for each wire-level connect attempt.
    :param readTimeout: The time (in seconds) to wait for an incoming frame to become available.

    .. note :: Login and passcode have to be the same for all brokers because they are not part of the failover URI scheme.

    .. seealso :: The :class:`~.StompFailoverTransport` class which tells you which broker to use, the :class:`~.StompFailoverUri` which parses failover transport URIs.
    """
    def __init__(self, uri, login='', passcode='', sync=False, prefetchSize=1, clientId=None, vendor='AMQ', attempts=10, connectTimeout=60, readTimeout=60):
        self.uri = uri
        self.login = login
        self.passcode = passcode
        self.sync = sync
        self.prefetchSize = prefetchSize
        self.clientId = clientId
        self.vendor = vendor
        self.attempts = attempts
        self.connectTimeout = connectTimeout
        self.readTimeout = readTimeout

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
class StompSpec(object):
    ABORT = 'ABORT'
    ACK = 'ACK'
    BEGIN = 'BEGIN'
    COMMIT = 'COMMIT'
    CONNECT = 'CONNECT'
    DISCONNECT = 'DISCONNECT'
    SEND = 'SEND'
    SUBSCRIBE = 'SUBSCRIBE'
    UNSUBSCRIBE = 'UNSUBSCRIBE'

    CONNECTED = 'CONNECTED'
    ERROR = 'ERROR'
    MESSAGE = 'MESSAGE'
    RECEIPT = 'RECEIPT'

    LINE_DELIMITER = '\n'
    FRAME_DELIMITER = '\x00'
    HEADER_SEPARATOR = ':'
    ENCODING = 'utf-8'

    DEFAULT_PORT = 61613

    ACK_HEADER = 'ack'
    CLIENT_ID_HEADER = 'client-id'
    CONTENT_LENGTH_HEADER = 'content-length'
    DESTINATION_HEADER = 'destination'
    ID_HEADER = 'id'
    LOGIN_HEADER = 'login'
    MESSAGE_ID_HEADER = 'message-id'
    PASSCODE_HEADER = 'passcode'
    RECEIPT_HEADER = 'receipt'
    RECEIPT_ID_HEADER = 'receipt-id'
    SESSION_HEADER = 'session'
    SERVER_HEADER = 'server'
    TRANSACTION_HEADER = 'transaction'
    TRANSFORMATION_HEADER = 'transformation'

    ACK_CLIENT = 'client'

    JMS_MAP_JSON = 'jms-map-json'

#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from pythonosc import udp_client

from tuio_bridge.data_transportation.TUIOEncoder import TUIOEncodingError, encode_tuio_message

logger = logging.getLogger(__name__)


class TUIOServer:
    """ Basic python implementation of a TUIO 1.1 server

        The TUIO server encodes TUIO messages and sends each of them as a separate UDP datagram to the defined
        IP address and port using the python-osc library: https://github.com/attwad/python-osc

        Sending is best effort. The socket of the python-osc client is non-blocking, nothing is retried and a failed
        message is only reported and counted. Callers get the outcome as the return value of send_tuio_message().
    """

    def __init__(self, ip, port=3333):
        """ Create a new instance of the TUIO server.

            Parameters:
                ip (str): IP address of the TUIO client (e.g. a TUIO enabled application)
                port: Port the TUIO client listens on. 3333 is the TUIO default
        """
        self.ip = ip
        self.port = port
        self.udp_client = udp_client.SimpleUDPClient(ip, port)

        self.messages_sent = 0
        self.encoding_errors = 0
        self.send_errors = 0

    def send_tuio_message(self, address, arguments):
        """ Encode a single TUIO message and send it.

            Parameters:
                address (str): Profile address, e.g. '/tuio/2Dcur'
                arguments (list): (type_tag, value) pairs, e.g. [('s', 'fseq'), ('i', 12)]

            Returns:
                True if the datagram was handed to the socket, False if it was dropped
        """
        try:
            message = encode_tuio_message(address, arguments)
        except TUIOEncodingError as error:
            self.encoding_errors += 1
            logger.error('Dropping TUIO message: %s', error)
            return False

        return self.send(message)

    def send(self, message):
        if self.udp_client is None:
            self.send_errors += 1
            logger.error('Cannot send %s, the UDP channel is closed', message.address)
            return False

        try:
            self.udp_client.send(message)
        except OSError as error:
            self.send_errors += 1
            logger.error('Sending %s to %s:%s failed: %s', message.address, self.ip, self.port, error)
            return False

        self.messages_sent += 1
        logger.debug('Sent %s %s', message.address, message.params)
        return True

    def close(self):
        if self.udp_client is None:
            return

        # SimpleUDPClient has no public close()
        sock = getattr(self.udp_client, '_sock', None)
        if sock is not None:
            sock.close()
        self.udp_client = None
        logger.info('UDP channel to %s:%s closed', self.ip, self.port)

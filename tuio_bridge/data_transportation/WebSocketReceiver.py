#!/usr/bin/env python
# -*- coding: utf-8 -*-

import json
import logging

from websockets.asyncio.server import serve
from websockets.exceptions import ConnectionClosed

logger = logging.getLogger(__name__)


class WebSocketReceiver:
    """ Accepts JSON notifications from any number of WebSocket clients and hands them to the event dispatcher.

        All connections are served by the same asyncio event loop, so notifications are processed one at a time in
        the order they arrive. When a client goes away, TUIO clients get the teardown alive message.
    """

    def __init__(self, host, port, event_dispatcher, frame_sequencer):
        self.host = host
        self.port = port
        self.event_dispatcher = event_dispatcher
        self.frame_sequencer = frame_sequencer

        self.server = None
        self.connections = set()
        self.stopping = False

    async def start(self):
        self.stopping = False
        self.server = await serve(self.handle_connection, self.host, self.port)
        logger.info('Listening on %s:%s for incoming notifications', self.host, self.port)

    async def stop(self):
        """ Stop accepting connections, close the open ones and wait until their handlers are done """
        if self.server is None:
            return
        # Connections closed from here on end without a teardown frame
        self.stopping = True
        logger.info('Closing %d open WebSocket connection(s)', len(self.connections))
        self.server.close()
        await self.server.wait_closed()
        self.server = None
        logger.info('WebSocket server stopped')

    async def handle_connection(self, websocket):
        remote_address = getattr(websocket, 'remote_address', None)
        logger.info('New client connected: %s', remote_address)
        self.connections.add(websocket)

        try:
            async for raw_message in websocket:
                self.handle_raw_message(raw_message)
        except ConnectionClosed as error:
            logger.warning('Connection to %s lost: %s', remote_address, error)
        finally:
            self.connections.discard(websocket)
            logger.info('Client disconnected: %s', remote_address)
            if self.stopping:
                logger.debug('Server is stopping, no teardown sent for %s', remote_address)
            else:
                # Clear all active cursors on the TUIO side
                self.frame_sequencer.send_teardown_alive()

    def handle_raw_message(self, raw_message):
        """ Decode one WebSocket message and dispatch it. Messages that are not valid JSON are dropped """
        try:
            message = json.loads(raw_message)
        except ValueError as error:
            logger.error('Failed to parse WebSocket message %r: %s', raw_message, error)
            return None

        return self.event_dispatcher.handle_message(message)

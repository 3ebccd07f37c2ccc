#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import asyncio
import logging
import signal
import sys

from tuio_bridge.core.TUIOEventDispatcher import TUIOEventDispatcher
from tuio_bridge.core.TUIOFrameSequencer import TUIOFrameSequencer
from tuio_bridge.core.TUIOSessionRegistry import TUIOSessionRegistry
from tuio_bridge.data_transportation.TUIOServer import TUIOServer
from tuio_bridge.data_transportation.WebSocketReceiver import WebSocketReceiver
from tuio_bridge.utility.config_reader import DEFAULT_CONFIG_FILE, read_config

logger = logging.getLogger(__name__)


class TUIOBridgeController:
    """ TUIOBridgeController

        Wires the WebSocket receiver, the session registry, the frame sequencer and the TUIO server together.
        Every controller owns its own registry and frame id.
    """

    def __init__(self, settings):
        self.settings = settings

        self.session_registry = TUIOSessionRegistry()
        self.tuio_server = TUIOServer(settings['udp_host'], settings['udp_port'])
        self.frame_sequencer = TUIOFrameSequencer(self.session_registry, self.tuio_server)
        self.event_dispatcher = TUIOEventDispatcher(self.session_registry, self.frame_sequencer, self.tuio_server)
        self.receiver = WebSocketReceiver(settings['ws_host'], settings['ws_port'], self.event_dispatcher,
                                          self.frame_sequencer)

        self.stop_event = None

    async def run(self):
        """ Serve until stop() is called or SIGINT/SIGTERM arrives """
        self.stop_event = asyncio.Event()
        self.install_signal_handlers()

        await self.receiver.start()
        logger.info('UDP target: %s:%s', self.settings['udp_host'], self.settings['udp_port'])
        logger.info('Waiting for clients...')

        await self.stop_event.wait()
        await self.shutdown()

    def stop(self):
        if self.stop_event is not None:
            self.stop_event.set()

    async def shutdown(self):
        logger.info('Shutting down the TUIO bridge...')
        await self.receiver.stop()
        self.tuio_server.close()
        logger.info('TUIO bridge stopped')

    def install_signal_handlers(self):
        loop = asyncio.get_running_loop()
        for signal_number in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signal_number, self.on_signal, signal_number)
            except NotImplementedError:
                # Windows event loops do not support add_signal_handler
                signal.signal(signal_number, lambda number, frame: loop.call_soon_threadsafe(self.on_signal, number))

    def on_signal(self, signal_number):
        logger.info('Received signal %s', signal.Signals(signal_number).name)
        self.stop()


def main():
    parser = argparse.ArgumentParser(description='Translates WebSocket touch notifications into TUIO 1.1 over UDP')
    parser.add_argument('--config', default=DEFAULT_CONFIG_FILE, help='path to the config file')
    args = parser.parse_args()

    settings = read_config(args.config)

    logging.basicConfig(level=settings['log_level'].upper(),
                        format='%(asctime)s [%(name)s] %(levelname)s: %(message)s')

    controller = TUIOBridgeController(settings)
    asyncio.run(controller.run())
    sys.exit()


if __name__ == '__main__':
    main()

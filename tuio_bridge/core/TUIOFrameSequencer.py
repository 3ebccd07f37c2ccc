#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from tuio_bridge.core.TUIOProfiles import EntityClass
from tuio_bridge.data_transportation.TUIOEncoder import build_alive_arguments, build_fseq_arguments

logger = logging.getLogger(__name__)


class TUIOFrameSequencer:
    """ Sends complete TUIO frames: the alive message of every profile followed by the fseq messages.

        The frame id starts at 0, grows by exactly one per sent frame and only goes back to 0 on reset().
    """

    def __init__(self, session_registry, tuio_server):
        self.session_registry = session_registry
        self.tuio_server = tuio_server
        self.frame_id = 0

    def get_frame_id(self):
        return self.frame_id

    def send_frame(self):
        """ Send one frame for all three profiles and advance the frame id.

            An alive message is only sent for profiles with active sessions, but every profile always gets its fseq
            message, even if nothing is alive.

            Returns:
                The frame id carried by the fseq messages
        """
        for entity_class in EntityClass:
            session_ids = self.session_registry.get_active_session_ids(entity_class)
            if session_ids:
                self.tuio_server.send_tuio_message(entity_class.address, build_alive_arguments(session_ids))

        frame_id = self.frame_id
        for entity_class in EntityClass:
            self.tuio_server.send_tuio_message(entity_class.address, build_fseq_arguments(frame_id))

        self.frame_id += 1
        logger.debug('Frame %d sent', frame_id)
        return frame_id

    def send_teardown_alive(self):
        """ Tell TUIO clients that no cursor is alive anymore, then send a frame.

            Only the cursor profile gets the empty alive message. Objects and blobs are left to the following frame.
        """
        # TODO: Send empty alive messages for /tuio/2Dobj and /tuio/2Dblb too once TUIO clients relying on the
        #  cursor-only clear signal have been checked
        self.tuio_server.send_tuio_message(EntityClass.CURSOR.address, build_alive_arguments([]))
        return self.send_frame()

    def reset(self):
        self.session_registry.clear_all()
        self.frame_id = 0
        self.send_teardown_alive()
        logger.info('Sessions and frame id reset')

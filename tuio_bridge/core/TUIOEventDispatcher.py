#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
from collections.abc import Mapping
from enum import Enum

from tuio_bridge.core.TUIOProfiles import Action, EntityClass, extract_attributes
from tuio_bridge.data_transportation.TUIOEncoder import build_alive_arguments, build_set_arguments

logger = logging.getLogger(__name__)

# Session ids go out as OSC int32
SESSION_ID_MIN = -2 ** 31
SESSION_ID_MAX = 2 ** 31 - 1


class DispatchOutcome(Enum):
    SET_SENT = 'set_sent'
    ALIVE_SENT = 'alive_sent'
    FRAME_SENT = 'frame_sent'
    RESET_DONE = 'reset_done'
    IGNORED_UNKNOWN_TYPE = 'ignored_unknown_type'
    IGNORED_UNKNOWN_ACTION = 'ignored_unknown_action'
    IGNORED_UNKNOWN_SESSION = 'ignored_unknown_session'
    IGNORED_MALFORMED = 'ignored_malformed'


class TUIOEventDispatcher:
    """ Turns incoming cursor, object and blob notifications into TUIO set and alive messages.

        A notification is a decoded JSON object, e.g.
            {"type": "cursor", "action": "add", "sessionId": 1, "x": 0.5, "y": 0.5, ...}
            {"type": "frame"}
            {"type": "reset"}

        Frame and reset notifications are passed on to the frame sequencer. Everything else that can not be
        matched is ignored and reported through the returned DispatchOutcome.
    """

    def __init__(self, session_registry, frame_sequencer, tuio_server):
        self.session_registry = session_registry
        self.frame_sequencer = frame_sequencer
        self.tuio_server = tuio_server

    def handle_message(self, message):
        if not isinstance(message, Mapping):
            logger.warning('Ignoring notification that is not an object: %r', message)
            return DispatchOutcome.IGNORED_MALFORMED

        message_type = message.get('type')

        if message_type == 'frame':
            self.frame_sequencer.send_frame()
            return DispatchOutcome.FRAME_SENT
        if message_type == 'reset':
            self.frame_sequencer.reset()
            return DispatchOutcome.RESET_DONE

        entity_class = EntityClass.from_name(message_type)
        if entity_class is None:
            logger.warning('Unknown notification type: %r', message_type)
            return DispatchOutcome.IGNORED_UNKNOWN_TYPE

        return self.handle_entity_event(entity_class, Action.from_name(message.get('action')), message)

    def handle_entity_event(self, entity_class, action, payload):
        """ Apply one add/update/remove to the registry and send the matching TUIO message.

            add     -> always stored (an existing session is overwritten), set message
            update  -> only for known sessions: stored, set message
            remove  -> only for known sessions: alive message with just this session id, then deleted
        """
        if action is None:
            logger.debug('Unknown action %r for %s ignored', payload.get('action'), entity_class.value)
            return DispatchOutcome.IGNORED_UNKNOWN_ACTION

        session_id = payload.get('sessionId')
        # bool is a subclass of int but never a valid session id
        if not isinstance(session_id, int) or isinstance(session_id, bool):
            logger.warning('Ignoring %s notification with invalid sessionId: %r', entity_class.value, session_id)
            return DispatchOutcome.IGNORED_MALFORMED
        if not SESSION_ID_MIN <= session_id <= SESSION_ID_MAX:
            logger.warning('Ignoring %s notification with sessionId out of int32 range: %r', entity_class.value,
                           session_id)
            return DispatchOutcome.IGNORED_MALFORMED

        if action is Action.ADD:
            return self._store_and_send_set(entity_class, session_id, payload)

        if action is Action.UPDATE:
            if not self.session_registry.contains(entity_class, session_id):
                logger.debug('Update for unknown %s %s ignored', entity_class.value, session_id)
                return DispatchOutcome.IGNORED_UNKNOWN_SESSION
            return self._store_and_send_set(entity_class, session_id, payload)

        # Action.REMOVE
        if not self.session_registry.contains(entity_class, session_id):
            logger.debug('Remove for unknown %s %s ignored', entity_class.value, session_id)
            return DispatchOutcome.IGNORED_UNKNOWN_SESSION
        self.tuio_server.send_tuio_message(entity_class.address, build_alive_arguments([session_id]))
        self.session_registry.remove(entity_class, session_id)
        return DispatchOutcome.ALIVE_SENT

    def _store_and_send_set(self, entity_class, session_id, payload):
        attributes = extract_attributes(entity_class, payload)
        self.session_registry.upsert(entity_class, session_id, attributes)
        self.tuio_server.send_tuio_message(entity_class.address,
                                           build_set_arguments(entity_class, session_id, attributes))
        return DispatchOutcome.SET_SENT

#!/usr/bin/env python
# -*- coding: utf-8 -*-

from tuio_bridge.core.TUIOProfiles import EntityClass


class TUIOSessionRegistry:
    """ Last known attributes of every active session, kept separately for cursors, objects and blobs.

        Membership in the registry is what makes a session 'alive'. Values are not validated.
    """

    def __init__(self):
        self.sessions = {entity_class: {} for entity_class in EntityClass}

    def upsert(self, entity_class, session_id, attributes):
        # Attributes are replaced as a whole, never merged
        self.sessions[entity_class][session_id] = dict(attributes)

    def remove(self, entity_class, session_id):
        """ Returns True if the session existed """
        return self.sessions[entity_class].pop(session_id, None) is not None

    def contains(self, entity_class, session_id):
        return session_id in self.sessions[entity_class]

    def get_attributes(self, entity_class, session_id):
        return self.sessions[entity_class].get(session_id)

    def get_active_session_ids(self, entity_class):
        return list(self.sessions[entity_class].keys())

    def count(self, entity_class):
        return len(self.sessions[entity_class])

    def clear(self, entity_class):
        self.sessions[entity_class].clear()

    def clear_all(self):
        for entity_class in EntityClass:
            self.clear(entity_class)

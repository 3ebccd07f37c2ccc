#!/usr/bin/env python
# -*- coding: utf-8 -*-

# The three TUIO 1.1 2D profiles handled by the bridge.
# TUIO 1.1 Protocol Specification by Martin Kaltenbrunner: http://www.tuio.org/?specification

from enum import Enum

ARG_TYPE_STRING = 's'
ARG_TYPE_INT = 'i'
ARG_TYPE_FLOAT = 'f'


class EntityClass(Enum):
    """ One TUIO profile. The value is the 'type' string used by incoming notifications """

    CURSOR = 'cursor'
    OBJECT = 'object'
    BLOB = 'blob'

    @property
    def address(self):
        return PROFILE_ADDRESSES[self]

    @classmethod
    def from_name(cls, name):
        """ Returns the matching entity class or None if the name is unknown """
        for entity_class in cls:
            if entity_class.value == name:
                return entity_class
        return None


class Action(Enum):
    ADD = 'add'
    UPDATE = 'update'
    REMOVE = 'remove'

    @classmethod
    def from_name(cls, name):
        for action in cls:
            if action.value == name:
                return action
        return None


PROFILE_ADDRESSES = {
    EntityClass.CURSOR: '/tuio/2Dcur',
    EntityClass.OBJECT: '/tuio/2Dobj',
    EntityClass.BLOB: '/tuio/2Dblb',
}

# Attributes of a set message in wire order (after the session id).
#
# /tuio/2Dcur set s x y X Y m
# /tuio/2Dobj set s i x y a X Y A m r
# /tuio/2Dblb set s x y a w h f X Y A m r
SET_FIELDS = {
    EntityClass.CURSOR: [
        ('x', ARG_TYPE_FLOAT),
        ('y', ARG_TYPE_FLOAT),
        ('xSpeed', ARG_TYPE_FLOAT),
        ('ySpeed', ARG_TYPE_FLOAT),
        ('motionAccel', ARG_TYPE_FLOAT),
    ],
    EntityClass.OBJECT: [
        ('symbolId', ARG_TYPE_INT),
        ('x', ARG_TYPE_FLOAT),
        ('y', ARG_TYPE_FLOAT),
        ('angle', ARG_TYPE_FLOAT),
        ('xSpeed', ARG_TYPE_FLOAT),
        ('ySpeed', ARG_TYPE_FLOAT),
        ('rotationSpeed', ARG_TYPE_FLOAT),
        ('motionAccel', ARG_TYPE_FLOAT),
        ('rotationAccel', ARG_TYPE_FLOAT),
    ],
    EntityClass.BLOB: [
        ('x', ARG_TYPE_FLOAT),
        ('y', ARG_TYPE_FLOAT),
        ('angle', ARG_TYPE_FLOAT),
        ('width', ARG_TYPE_FLOAT),
        ('height', ARG_TYPE_FLOAT),
        ('area', ARG_TYPE_FLOAT),
        ('xSpeed', ARG_TYPE_FLOAT),
        ('ySpeed', ARG_TYPE_FLOAT),
        ('rotationSpeed', ARG_TYPE_FLOAT),
        ('motionAccel', ARG_TYPE_FLOAT),
        ('rotationAccel', ARG_TYPE_FLOAT),
    ],
}


def extract_attributes(entity_class, payload):
    """ Pick the set message attributes of the given profile out of a notification payload.

        Omitted attributes are filled with 0, present values are taken over unchanged.
    """
    return {name: payload.get(name, 0) for name, _ in SET_FIELDS[entity_class]}

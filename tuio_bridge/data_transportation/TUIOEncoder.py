#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Encodes TUIO 1.1 messages as OSC using the python-osc library: https://github.com/attwad/python-osc
#
# Every argument is a (type_tag, value) pair. The tag decides the wire encoding, not the Python type of the value:
#   ('s', 'set')  -> OSC string
#   ('i', 12)     -> OSC int32
#   ('f', 0.5)    -> OSC float32

from pythonosc import osc_message_builder

from tuio_bridge.core.TUIOProfiles import (ARG_TYPE_FLOAT, ARG_TYPE_INT, ARG_TYPE_STRING, PROFILE_ADDRESSES,
                                           SET_FIELDS)

SUPPORTED_ARG_TYPES = (ARG_TYPE_STRING, ARG_TYPE_INT, ARG_TYPE_FLOAT)
TUIO_ADDRESSES = tuple(PROFILE_ADDRESSES.values())


class TUIOEncodingError(Exception):
    """ Raised if a TUIO message can not be turned into an OSC datagram """


def encode_tuio_message(address, arguments):
    """ Build an OSC message for one of the three TUIO profile addresses.

        Parameters:
            address (str): '/tuio/2Dcur', '/tuio/2Dobj' or '/tuio/2Dblb'
            arguments (list): ordered (type_tag, value) pairs

        Returns:
            pythonosc.osc_message.OscMessage, ready to be sent as a single datagram
    """
    if address not in TUIO_ADDRESSES:
        raise TUIOEncodingError('Unknown TUIO address: {}'.format(address))

    message = osc_message_builder.OscMessageBuilder(address=address)
    for argument in arguments:
        try:
            arg_type, value = argument
        except (TypeError, ValueError):
            raise TUIOEncodingError('Malformed argument {!r} for {}'.format(argument, address))

        if arg_type not in SUPPORTED_ARG_TYPES:
            raise TUIOEncodingError('Unsupported argument type {!r} for {}'.format(arg_type, address))
        message.add_arg(value, arg_type)

    try:
        return message.build()
    except (osc_message_builder.BuildError, OverflowError) as error:
        # struct raises OverflowError for floats outside the float32 range
        raise TUIOEncodingError('Could not encode {} {}: {}'.format(address, _describe(arguments), error))


def build_set_arguments(entity_class, session_id, attributes):
    """ /tuio/2Dxxx set s_id <profile attributes> """
    arguments = [(ARG_TYPE_STRING, 'set'), (ARG_TYPE_INT, session_id)]
    for name, arg_type in SET_FIELDS[entity_class]:
        arguments.append((arg_type, attributes.get(name, 0)))
    return arguments


def build_alive_arguments(session_ids):
    """ /tuio/2Dxxx alive s_id0 ... s_idN (the id list may be empty) """
    return [(ARG_TYPE_STRING, 'alive')] + [(ARG_TYPE_INT, session_id) for session_id in session_ids]


def build_fseq_arguments(frame_id):
    return [(ARG_TYPE_STRING, 'fseq'), (ARG_TYPE_INT, frame_id)]


def _describe(arguments):
    return [value for _, value in arguments]

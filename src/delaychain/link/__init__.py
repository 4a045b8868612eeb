"""
OSC link to the pedal: control records out, parameter buffers in.
"""

from .osc_link import (
    ControlSender,
    BufferReceiver,
    flatten_record,
    CONTROL_ADDRESS,
    BUFFER_ADDRESS,
    DEFAULT_HOST_PORT,
    DEFAULT_LISTEN_PORT,
)

__all__ = [
    'ControlSender',
    'BufferReceiver',
    'flatten_record',
    'CONTROL_ADDRESS',
    'BUFFER_ADDRESS',
    'DEFAULT_HOST_PORT',
    'DEFAULT_LISTEN_PORT',
]

"""
Parameter layer - host values and the effect table they select.
"""

from .effects import Effect, lookup_effect, LOOP_LABELS, MIX_LABELS, NO_MATCH_COLOR
from .parameter_state import ParameterBuffer, ParameterState, BUFFER_SIZE

__all__ = [
    'Effect',
    'lookup_effect',
    'LOOP_LABELS',
    'MIX_LABELS',
    'NO_MATCH_COLOR',
    'ParameterBuffer',
    'ParameterState',
    'BUFFER_SIZE',
]

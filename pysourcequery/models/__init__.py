"""
Value types returned by and passed to queries
"""

from .address import Address, SENTINEL
from .filters import FilterSet
from .responses import ExtraData, InfoResponse, Player, PlayerResponse, Rule, RulesResponse

__all__ = [
    'Address',
    'SENTINEL',
    'FilterSet',
    'ExtraData',
    'InfoResponse',
    'Player',
    'PlayerResponse',
    'Rule',
    'RulesResponse',
]

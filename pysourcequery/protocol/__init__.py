"""
Wire-level pieces of the query protocols.

Request builders live in ``protocol.packets`` and reply decoders in
``protocol.parsers``.
"""

from .constants import MASTER_GOLDSRC, MASTER_SOURCE
from .enums import ChallengeState, ExtraDataFlag, Region, RequestHeader
from .binary_reader import BinaryPacketReader

__all__ = [
    'MASTER_GOLDSRC',
    'MASTER_SOURCE',
    'ChallengeState',
    'ExtraDataFlag',
    'Region',
    'RequestHeader',
    'BinaryPacketReader',
]

"""Query Protocol Enumerations

This module contains the enum definitions for the A2S and master server
query protocols.
"""

from enum import Enum, IntEnum, IntFlag, auto


class Region(IntEnum):
    """Master server region codes"""
    US_EAST_COAST = 0x00
    US_WEST_COAST = 0x01
    SOUTH_AMERICA = 0x02
    EUROPE = 0x03
    ASIA = 0x04
    AUSTRALIA = 0x05
    MIDDLE_EAST = 0x06
    AFRICA = 0x07
    ALL = 0xFF  # Rest of the world


class RequestHeader(IntEnum):
    """Client to server query headers"""
    A2S_INFO = 0x54  # 'T'
    A2S_PLAYER = 0x55  # 'U'
    A2S_RULES = 0x56  # 'V'


class ExtraDataFlag(IntFlag):
    """Bits of the info reply's extra data flags (EDF) byte"""
    GAME_ID = 0x01
    STEAM_ID = 0x10
    KEYWORDS = 0x20
    SPECTATOR = 0x40
    PORT = 0x80


class ChallengeState(Enum):
    """Where a server query is in its challenge handshake"""
    AWAITING_CHALLENGE = auto()
    AWAITING_DATA = auto()

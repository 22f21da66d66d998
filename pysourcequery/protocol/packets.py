"""
Request datagram builders.

    A2S_INFO    FF FF FF FF 54 "Source Engine Query" 00 [challenge:4]
    A2S_PLAYER  FF FF FF FF 55 (challenge:4 | FF FF FF FF)
    A2S_RULES   FF FF FF FF 56 (challenge:4 | FF FF FF FF)
    MASTER      31 <region> "<host:port>" 00 <filters> 00
"""

from typing import Mapping, Optional, Union

from ..models.address import Address
from ..models.filters import FilterSet
from .constants import (
    CHALLENGE_PLACEHOLDER,
    CHALLENGE_SIGNATURE,
    INFO_QUERY_STRING,
    MASTER_REQUEST_HEADER,
    NESTED_FILTER_KEYS,
    REPLY_HEADER_SIZE,
    SIMPLE_RESPONSE_PREFIX,
)
from .enums import Region, RequestHeader
from ..exceptions import DecodeError


def build_info_request(challenge: Optional[bytes] = None) -> bytes:
    """Build an A2S_INFO request, echoing ``challenge`` after the terminator."""
    packet = bytearray(SIMPLE_RESPONSE_PREFIX)
    packet.append(RequestHeader.A2S_INFO)
    packet.extend(INFO_QUERY_STRING)
    packet.append(0x00)
    if challenge:
        packet.extend(challenge)
    return bytes(packet)


def _build_challenged_request(header: RequestHeader, challenge: Optional[bytes]) -> bytes:
    packet = bytearray(SIMPLE_RESPONSE_PREFIX)
    packet.append(header)
    packet.extend(challenge if challenge else CHALLENGE_PLACEHOLDER)
    return bytes(packet)


def build_player_request(challenge: Optional[bytes] = None) -> bytes:
    """Build an A2S_PLAYER request (placeholder challenge when none is known)."""
    return _build_challenged_request(RequestHeader.A2S_PLAYER, challenge)


def build_rules_request(challenge: Optional[bytes] = None) -> bytes:
    """Build an A2S_RULES request (placeholder challenge when none is known)."""
    return _build_challenged_request(RequestHeader.A2S_RULES, challenge)


def is_challenge(reply: bytes) -> bool:
    """True when ``reply`` is an S2C_CHALLENGE instead of data."""
    return reply[:REPLY_HEADER_SIZE] == CHALLENGE_SIGNATURE


def read_challenge(reply: bytes) -> bytes:
    """Challenge token carried after the 5-byte reply header."""
    if len(reply) <= REPLY_HEADER_SIZE:
        raise DecodeError(f"Challenge reply too short ({len(reply)} bytes)")
    return bytes(reply[REPLY_HEADER_SIZE:])


def _format_value(value) -> str:
    if isinstance(value, bool):
        return '1' if value else '0'
    if isinstance(value, list):
        return ','.join(value)
    return str(value)


def format_filters(filters: Union[FilterSet, Mapping[str, object], None] = None) -> str:
    r"""Serialize a filter set to the master server's ``\key\value`` form.

    ``nor`` and ``nand`` are followed by the number of nested filters and then
    the nested filters themselves. The result always ends in a NUL.
    """
    filters = FilterSet.coerce(filters)
    parts = []
    for key, value in filters.items():
        parts.append(f'\\{key}\\')
        if key in NESTED_FILTER_KEYS:
            parts.append(str(len(value)))
            for subkey, subvalue in value.items():
                parts.append(f'\\{subkey}\\{_format_value(subvalue)}')
        else:
            parts.append(_format_value(value))
    parts.append('\x00')
    return ''.join(parts)


def build_master_request(region: Region, seed: Address,
                         filters: Union[FilterSet, Mapping[str, object], None] = None) -> bytes:
    """Build a master server query for the page following ``seed``."""
    packet = bytearray([MASTER_REQUEST_HEADER, Region(region)])
    packet.extend(str(seed).encode('ascii'))
    packet.append(0x00)
    packet.extend(format_filters(filters).encode('utf-8'))
    return bytes(packet)

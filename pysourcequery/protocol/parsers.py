"""
Reply datagram decoders.

Every decoder raises DecodeError on a short buffer, a missing string
terminator or a record count the buffer cannot satisfy. Nothing is
truncated or guessed.
"""

import logging
import socket
import struct
from typing import List

from ..exceptions import DecodeError
from ..models.address import Address
from ..models.responses import ExtraData, InfoResponse, Player, PlayerResponse, Rule, RulesResponse
from .binary_reader import BinaryPacketReader
from .constants import MASTER_ADDRESS_SIZE, MASTER_RESPONSE_PREAMBLE, REPLY_HEADER_SIZE
from .enums import ExtraDataFlag

logger = logging.getLogger(__name__)

# SourceTV-adjacent block behind ExtraDataFlag.STEAM_ID
STEAM_ID_SIZE = 8

_MASTER_ENTRY = struct.Struct('>4sH')


def _reader_after_header(data: bytes) -> BinaryPacketReader:
    reader = BinaryPacketReader(data)
    reader.skip(REPLY_HEADER_SIZE)
    return reader


def _parse_extra_data(reader: BinaryPacketReader) -> ExtraData:
    flags = ExtraDataFlag(reader.read_byte())
    extra = ExtraData(flags=flags)

    # Order is fixed by the protocol, not by bit value
    if extra.has_port:
        extra.port = reader.read_uint16()
    if extra.has_steam_id:
        reader.skip(STEAM_ID_SIZE)
    if extra.has_spectator:
        extra.spectator_port = reader.read_byte()
        extra.spectator_name = reader.read_string()
    if extra.has_keywords:
        extra.keywords = reader.read_string()
    if extra.has_game_id:
        extra.game_id = reader.read_int64()
    return extra


def parse_info(data: bytes) -> InfoResponse:
    """Decode an A2S_INFO reply."""
    reader = _reader_after_header(data)

    info = InfoResponse(
        protocol=reader.read_byte(),
        name=reader.read_string(),
        map=reader.read_string(),
        folder=reader.read_string(),
        game=reader.read_string(),
        app_id=reader.read_int16(),
        players=reader.read_byte(),
        max_players=reader.read_byte(),
        bots=reader.read_byte(),
        server_type=reader.read_char(),
        environment=reader.read_char(),
        visibility=reader.read_byte(),
        vac=reader.read_byte(),
        version=reader.read_string(),
    )

    if reader.remaining() > 0:
        info.extra = _parse_extra_data(reader)

    if reader.remaining() > 0:
        logger.debug(f"Ignoring {reader.remaining()} trailing bytes after info reply")

    return info


def parse_players(data: bytes) -> PlayerResponse:
    """Decode an A2S_PLAYER reply."""
    reader = _reader_after_header(data)
    count = reader.read_byte()

    players: List[Player] = []
    for i in range(count):
        try:
            players.append(Player(
                index=reader.read_byte(),
                name=reader.read_string(),
                score=reader.read_int32(),
                duration=reader.read_float(),
            ))
        except DecodeError as e:
            raise DecodeError(f"Player {i + 1} of {count}: {e}") from e

    return PlayerResponse(player_count=count, players=players)


def parse_rules(data: bytes) -> RulesResponse:
    """Decode an A2S_RULES reply."""
    reader = _reader_after_header(data)
    count = reader.read_int16()
    if count < 0:
        raise DecodeError(f"Negative rule count {count}")

    rules: List[Rule] = []
    for i in range(count):
        try:
            rules.append(Rule(name=reader.read_string(), value=reader.read_string()))
        except DecodeError as e:
            raise DecodeError(f"Rule {i + 1} of {count}: {e}") from e

    return RulesResponse(rule_count=count, rules=rules)


def parse_addresses(data: bytes) -> List[Address]:
    """Decode one master server page into addresses, preamble optional."""
    if data[:len(MASTER_RESPONSE_PREAMBLE)] == MASTER_RESPONSE_PREAMBLE:
        data = data[len(MASTER_RESPONSE_PREAMBLE):]

    if len(data) % MASTER_ADDRESS_SIZE:
        raise DecodeError(
            f"Master reply body of {len(data)} bytes is not a multiple of {MASTER_ADDRESS_SIZE}"
        )

    return [
        Address(socket.inet_ntoa(ip), port)
        for ip, port in _MASTER_ENTRY.iter_unpack(data)
    ]

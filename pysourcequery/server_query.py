"""
pysourcequery - Server Query
Runs A2S_INFO, A2S_PLAYER and A2S_RULES against a single game server,
including the challenge handshake.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple, TypeVar, Union

from .config.validation import validate_timeouts
from .models.address import Address
from .models.responses import InfoResponse, PlayerResponse, RulesResponse
from .protocol import packets, parsers
from .protocol.constants import DEFAULT_ATTEMPTS, DEFAULT_TIMEOUT
from .protocol.enums import ChallengeState
from .transport import UDPTransport

logger = logging.getLogger(__name__)

T = TypeVar('T')

AddressLike = Union[Address, str, Tuple[str, int]]
Timeout = Union[float, Sequence[float]]


class ServerQuery:
    """Queries one game server.

    Each call to ``info()``, ``players()`` or ``rules()`` is one logical query
    with its own socket, opened for the call and closed afterwards.

    Usage:
        query = ServerQuery("192.0.2.10:27015", attempts=2, timeout=1.5)
        info = await query.info()
        players = await query.players()
    """

    def __init__(self, address: AddressLike, attempts: int = DEFAULT_ATTEMPTS,
                 timeout: Timeout = DEFAULT_TIMEOUT,
                 transport_factory: Optional[Callable[[], UDPTransport]] = None):
        self.address = Address.coerce(address)
        # Fail fast on a bad attempts/timeout combination
        self.timeouts = validate_timeouts(attempts, timeout)
        self._transport_factory = transport_factory or (lambda: UDPTransport(attempts, self.timeouts))

    async def info(self) -> InfoResponse:
        """A2S_INFO: challenge only if the server asks for one."""
        return await self._run(
            "info",
            packets.build_info_request,
            parsers.parse_info,
            challenge_optional=True,
        )

    async def players(self) -> PlayerResponse:
        """A2S_PLAYER: always challenge first, then fetch."""
        return await self._run(
            "player",
            packets.build_player_request,
            parsers.parse_players,
            challenge_optional=False,
        )

    async def rules(self) -> RulesResponse:
        """A2S_RULES: always challenge first, then fetch."""
        return await self._run(
            "rules",
            packets.build_rules_request,
            parsers.parse_rules,
            challenge_optional=False,
        )

    async def _run(self, kind: str, build: Callable[[Optional[bytes]], bytes],
                   parse: Callable[[bytes], T], challenge_optional: bool) -> T:
        state = ChallengeState.AWAITING_CHALLENGE
        challenge: Optional[bytes] = None
        reply = b''

        async with self._transport_factory() as transport:
            while True:
                reply = await transport.send(build(challenge), self.address)

                if state is ChallengeState.AWAITING_DATA:
                    break

                if challenge_optional and not packets.is_challenge(reply):
                    logger.debug(f"{self.address} answered without a challenge")
                    break

                challenge = packets.read_challenge(reply)
                logger.debug(f"Got challenge {challenge.hex()} from {self.address}")
                state = ChallengeState.AWAITING_DATA

        result = parse(reply)
        logger.info(f"{kind} query to {self.address} succeeded")
        return result


async def query_info(address: AddressLike, attempts: int = DEFAULT_ATTEMPTS,
                     timeout: Timeout = DEFAULT_TIMEOUT) -> InfoResponse:
    """Query a server's A2S_INFO.

    Args:
        address: ``host:port`` string, Address or ``(host, port)`` tuple
        attempts: Sends per datagram exchange before giving up
        timeout: Seconds per attempt, or a list with one value per attempt

    Returns:
        The decoded InfoResponse
    """
    return await ServerQuery(address, attempts, timeout).info()


async def query_players(address: AddressLike, attempts: int = DEFAULT_ATTEMPTS,
                        timeout: Timeout = DEFAULT_TIMEOUT) -> PlayerResponse:
    """Query a server's A2S_PLAYER list."""
    return await ServerQuery(address, attempts, timeout).players()


async def query_rules(address: AddressLike, attempts: int = DEFAULT_ATTEMPTS,
                      timeout: Timeout = DEFAULT_TIMEOUT) -> RulesResponse:
    """Query a server's A2S_RULES."""
    return await ServerQuery(address, attempts, timeout).rules()

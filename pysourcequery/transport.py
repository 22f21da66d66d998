"""
UDP transaction transport.

One datagram out, one datagram back, with a per-attempt timeout. A single
socket is shared by every exchange of one query session.
"""

import asyncio
import logging
import socket
from typing import List, Optional, Sequence, Union

from .config.validation import validate_timeouts
from .exceptions import QueryTimeoutError, TransportError
from .models.address import Address
from .protocol.constants import DEFAULT_ATTEMPTS, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class _ReplyProtocol(asyncio.DatagramProtocol):
    """Routes the next inbound datagram to whoever is waiting for it."""

    def __init__(self):
        self.transport: Optional[asyncio.DatagramTransport] = None
        self.waiter: Optional[asyncio.Future] = None

    def connection_made(self, transport):
        self.transport = transport

    def datagram_received(self, data, addr):
        if self.waiter is None or self.waiter.done():
            logger.debug(f"Dropping unsolicited {len(data)} byte datagram from {addr}")
            return
        self.waiter.set_result(data)

    def error_received(self, exc):
        if self.waiter is not None and not self.waiter.done():
            self.waiter.set_exception(exc)
        else:
            logger.debug(f"Socket error with no exchange in flight: {exc}")

    def connection_lost(self, exc):
        if self.waiter is not None and not self.waiter.done():
            self.waiter.set_exception(exc or ConnectionError("Socket closed"))


class UDPTransport:
    """Send a datagram and wait for the single reply, retrying on timeout.

    Usage:
        async with UDPTransport(attempts=3, timeout=[0.5, 1.0, 2.0]) as transport:
            reply = await transport.send(packet, Address("127.0.0.1", 27015))

    ``timeout`` is either one value for every attempt or a list with exactly
    one value per attempt. A socket error ends the exchange immediately;
    only timeouts consume further attempts.
    """

    def __init__(self, attempts: int = DEFAULT_ATTEMPTS,
                 timeout: Union[float, Sequence[float]] = DEFAULT_TIMEOUT):
        self.timeouts: List[float] = validate_timeouts(attempts, timeout)
        self._transport: Optional[asyncio.DatagramTransport] = None
        self._protocol: Optional[_ReplyProtocol] = None

    @property
    def attempts(self) -> int:
        return len(self.timeouts)

    @property
    def is_open(self) -> bool:
        return self._transport is not None and not self._transport.is_closing()

    async def open(self):
        """Bind the session's UDP socket."""
        if self.is_open:
            return
        loop = asyncio.get_running_loop()
        try:
            self._transport, self._protocol = await loop.create_datagram_endpoint(
                _ReplyProtocol,
                local_addr=('0.0.0.0', 0),
                family=socket.AF_INET,
            )
        except OSError as e:
            raise TransportError(f"Could not open UDP socket: {e}") from e
        logger.debug(f"Opened UDP socket on {self._transport.get_extra_info('sockname')}")

    def close(self):
        """Release the socket."""
        if self._transport is not None:
            self._transport.close()
            logger.debug("Closed UDP socket")
        self._transport = None
        self._protocol = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    async def send(self, data: bytes, address: Union[Address, str, tuple]) -> bytes:
        """Send ``data`` to ``address`` and return the first reply.

        The socket must already be open, via ``async with`` or ``open()``.
        """
        address = Address.coerce(address)
        if not self.is_open:
            raise TransportError(f"Transport is not open; cannot send to {address}", address=address)

        for attempt, timeout in enumerate(self.timeouts, 1):
            try:
                reply = await self._exchange(data, address, timeout)
            except asyncio.TimeoutError:
                logger.debug(
                    f"No reply from {address} within {timeout:.3f}s "
                    f"(attempt {attempt}/{self.attempts})"
                )
                continue
            logger.debug(f"Received {len(reply)} bytes from {address} on attempt {attempt}")
            return reply

        logger.warning(f"Giving up on {address} after {self.attempts} attempt(s)")
        raise QueryTimeoutError(
            f"Timeout reached after {self.attempts} attempt(s) querying {address}. "
            f"Possible reasons: rate limiting, timeout too short, wrong host or port",
            address=address,
            timeouts=self.timeouts,
        )

    async def _exchange(self, data: bytes, address: Address, timeout: float) -> bytes:
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()
        self._protocol.waiter = waiter
        try:
            try:
                self._transport.sendto(data, address.as_tuple())
            except OSError as e:
                raise TransportError(f"Failed to send to {address}: {e}", address=address) from e
            logger.debug(f"Sent {len(data)} bytes to {address}")
            try:
                return await asyncio.wait_for(waiter, timeout)
            except asyncio.TimeoutError:
                # TimeoutError is an OSError on current interpreters
                raise
            except OSError as e:
                raise TransportError(f"Socket error talking to {address}: {e}", address=address) from e
        finally:
            # Detach so a late reply cannot satisfy the next attempt
            if self._protocol is not None:
                self._protocol.waiter = None

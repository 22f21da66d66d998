"""
Shared fixtures: a scripted stand-in for UDPTransport
"""

import pytest

from pysourcequery.models import Address


class FakeTransport:
    """Records every datagram sent and answers from a script.

    Each script entry is either the bytes to return or an exception
    instance to raise for that exchange.
    """

    def __init__(self, script):
        self.script = list(script)
        self.sent = []
        self.opened = 0
        self.closed = 0

    async def __aenter__(self):
        self.opened += 1
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed += 1
        return False

    async def send(self, data, address):
        self.sent.append((data, Address.coerce(address)))
        if not self.script:
            raise AssertionError(f"Unexpected extra datagram {data!r}")
        step = self.script.pop(0)
        if isinstance(step, Exception):
            raise step
        return step


@pytest.fixture
def fake_transport():
    """Build a FakeTransport from a script; returns (transport, factory)."""
    def make(*script):
        transport = FakeTransport(script)
        return transport, lambda: transport
    return make

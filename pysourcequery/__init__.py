"""
pysourcequery - Source engine server and master server queries over UDP

Usage:
    import asyncio
    from pysourcequery import query_info, query_players, query_rules

    info = asyncio.run(query_info("192.0.2.10:27015"))
    print(f"{info.name} on {info.map}: {info.players}/{info.max_players}")

    players = asyncio.run(query_players("192.0.2.10:27015", attempts=3, timeout=[0.5, 1, 2]))
    for player in players:
        print(player.name, player.score)

Or via the master server:
    from pysourcequery import query_master, Region

    servers = asyncio.run(query_master(
        "hl2master.steampowered.com:27011",
        Region.EUROPE,
        filters={"appid": 730, "dedicated": True, "nor": {"empty": True}},
    ))
    for address in servers:
        print(address)

Or with explicit objects:
    from pysourcequery import ServerQuery, MasterServerQuery

    async def main():
        query = MasterServerQuery("hl2master.steampowered.com:27011", max_pages=10)
        async for address in query.iter_addresses():
            info = await ServerQuery(address).info()
            print(info)
"""

__version__ = "1.0.0"

from .config import QueryConfig
from .exceptions import (
    ConfigValidationError,
    DecodeError,
    EnumerationLimitError,
    QueryError,
    QueryTimeoutError,
    TransportError,
)
from .models import (
    SENTINEL,
    Address,
    ExtraData,
    FilterSet,
    InfoResponse,
    Player,
    PlayerResponse,
    Rule,
    RulesResponse,
)
from .protocol import MASTER_GOLDSRC, MASTER_SOURCE, ExtraDataFlag, Region
from .transport import UDPTransport
from .server_query import ServerQuery, query_info, query_players, query_rules
from .master_query import MasterServerQuery, query_master

__all__ = [
    "query_info",
    "query_players",
    "query_rules",
    "query_master",
    "ServerQuery",
    "MasterServerQuery",
    "UDPTransport",
    "QueryConfig",
    "Address",
    "SENTINEL",
    "FilterSet",
    "Region",
    "ExtraDataFlag",
    "MASTER_SOURCE",
    "MASTER_GOLDSRC",
    "InfoResponse",
    "ExtraData",
    "Player",
    "PlayerResponse",
    "Rule",
    "RulesResponse",
    "QueryError",
    "TransportError",
    "QueryTimeoutError",
    "DecodeError",
    "EnumerationLimitError",
    "ConfigValidationError",
]

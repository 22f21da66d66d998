#!/usr/bin/env python3
"""
Server Info Demo

This example shows how to:
1. Query a game server's info, including extra data
2. List the players currently connected
3. Dump the server's rules
"""

import asyncio
import logging
import sys

sys.path.insert(0, '..')
from pysourcequery import ServerQuery, QueryError


def display_info(info):
    """Display the info reply in a nice format"""
    print("\n" + "=" * 60)
    print(f"{info.name}")
    print("=" * 60)
    print(f"Map:         {info.map}")
    print(f"Game:        {info.game} ({info.folder}, app {info.app_id})")
    print(f"Players:     {info.players}/{info.max_players} ({info.bots} bots)")
    print(f"Type:        {info.server_type_name} on {info.environment_name}")
    print(f"Password:    {'yes' if info.password_protected else 'no'}")
    print(f"VAC:         {'yes' if info.vac_enabled else 'no'}")
    print(f"Version:     {info.version}")

    if info.extra is not None:
        if info.extra.has_port:
            print(f"Game port:   {info.extra.port}")
        if info.extra.has_spectator:
            print(f"SourceTV:    {info.extra.spectator_name} on port {info.extra.spectator_port}")
        if info.extra.has_keywords:
            print(f"Keywords:    {', '.join(info.extra.keyword_list)}")


async def run(address: str):
    query = ServerQuery(address, attempts=3, timeout=[0.5, 1.0, 2.0])

    display_info(await query.info())

    players = await query.players()
    print(f"\n{players.player_count} players:")
    for player in sorted(players, key=lambda p: p.score, reverse=True):
        minutes = int(player.duration // 60)
        print(f"  {player.name:<24} {player.score:>5}  {minutes} min")

    rules = await query.rules()
    print(f"\n{rules.rule_count} rules:")
    for name, value in sorted(rules.as_dict().items()):
        print(f"  {name} = {value}")


def main():
    """Main demo function"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    address = sys.argv[1] if len(sys.argv) > 1 else "127.0.0.1:27015"
    print(f"Querying {address}...")

    try:
        asyncio.run(run(address))
    except QueryError as e:
        print(f"Query failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

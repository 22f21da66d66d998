#!/usr/bin/env python3
"""
Command line front end.

    sourcequery info 192.0.2.10:27015
    sourcequery players 192.0.2.10:27015 --attempts 3 --timeout 0.5 1 2
    sourcequery rules 192.0.2.10:27015
    sourcequery master hl2master.steampowered.com:27011 --region EUROPE -f appid=730 -f nor.empty=1
"""

import argparse
import asyncio
import logging
import sys
from typing import Dict, List, Optional

from .config import QueryConfig
from .exceptions import ConfigValidationError, QueryError
from .master_query import query_master
from .models.filters import FilterSet
from .protocol.constants import NESTED_FILTER_KEYS
from .protocol.enums import Region
from .server_query import query_info, query_players, query_rules

logger = logging.getLogger(__name__)


def parse_filter_args(items: List[str]) -> FilterSet:
    """Turn ``key=value`` / ``nor.key=value`` arguments into a FilterSet."""
    filters: Dict[str, object] = {}
    for item in items:
        key, sep, value = item.partition('=')
        if not sep or not key:
            raise ConfigValidationError(f"Filter must look like key=value, got {item!r}")
        parsed: object = int(value) if value.lstrip('-').isdigit() else value
        if ',' in value:
            parsed = value.split(',')
        if '.' in key:
            group, _, subkey = key.partition('.')
            if group not in NESTED_FILTER_KEYS:
                raise ConfigValidationError(
                    f"Only {', '.join(NESTED_FILTER_KEYS)} take nested filters, got {key!r}"
                )
            nested = filters.setdefault(group, {})
            if not isinstance(nested, dict):
                raise ConfigValidationError(f"Filter {group!r} given both a value and nested filters")
            nested[subkey] = parsed
        else:
            if isinstance(filters.get(key), dict):
                raise ConfigValidationError(f"Filter {key!r} given both a value and nested filters")
            filters[key] = parsed

    try:
        return FilterSet(filters)
    except TypeError as e:
        raise ConfigValidationError(f"Invalid filter: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='sourcequery', description='Query Source engine servers')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (default: WARNING)')

    sub = parser.add_subparsers(dest='command', required=True)
    for name in ('info', 'players', 'rules'):
        cmd = sub.add_parser(name, help=f'A2S_{name.upper()} query')
        cmd.add_argument('address', help='host:port')
        cmd.add_argument('--attempts', type=int, default=1)
        cmd.add_argument('--timeout', type=float, nargs='+', default=[1.0],
                         help='Seconds per attempt; one value, or one per attempt')

    master = sub.add_parser('master', help='Master server query')
    master.add_argument('address', help='host:port')
    master.add_argument('--region', default='ALL', choices=[r.name for r in Region])
    master.add_argument('-f', '--filter', action='append', default=[], metavar='KEY=VALUE')
    master.add_argument('--attempts', type=int, default=1)
    master.add_argument('--timeout', type=float, nargs='+', default=[1.0])
    master.add_argument('--max-pages', type=int, default=None)
    return parser


async def run(args: argparse.Namespace, config: QueryConfig) -> None:
    if args.command == 'info':
        info = await query_info(args.address, config.attempts, config.timeout)
        print(info)
        for key, value in vars(info).items():
            print(f"  {key}: {value}")
    elif args.command == 'players':
        response = await query_players(args.address, config.attempts, config.timeout)
        print(f"{response.player_count} players")
        for player in response:
            print(f"  [{player.index}] {player.name} score={player.score} time={player.duration:.0f}s")
    elif args.command == 'rules':
        response = await query_rules(args.address, config.attempts, config.timeout)
        for rule in response:
            print(f"  {rule.name} = {rule.value}")
    elif args.command == 'master':
        servers = await query_master(
            args.address,
            Region[args.region],
            parse_filter_args(args.filter),
            config.timeout,
            config.attempts,
            config.max_pages,
        )
        for address in servers:
            print(address)
        print(f"Total servers: {len(servers)}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    timeout = args.timeout[0] if len(args.timeout) == 1 else args.timeout
    config = QueryConfig(
        attempts=args.attempts,
        timeout=timeout,
        max_pages=getattr(args, 'max_pages', None),
        log_level=args.log_level,
    )

    try:
        config.validate()
    except ConfigValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        asyncio.run(run(args, config))
    except ConfigValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except QueryError as e:
        logger.debug("Query failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
pysourcequery - Master Server Query
Enumerates game server addresses from a master (directory) server.

The master answers in pages. Each request is seeded with the last address
of the previous page, starting from 0.0.0.0:0. A page whose last address is
0.0.0.0:0 is the final one.
"""

import logging
from typing import AsyncIterator, Callable, List, Mapping, Optional, Union

from .config.validation import validate_max_pages, validate_timeouts
from .exceptions import EnumerationLimitError
from .models.address import SENTINEL, Address
from .models.filters import FilterSet
from .protocol import packets, parsers
from .protocol.constants import DEFAULT_ATTEMPTS, DEFAULT_TIMEOUT
from .protocol.enums import Region
from .server_query import AddressLike, Timeout
from .transport import UDPTransport

logger = logging.getLogger(__name__)


class MasterServerQuery:
    """Pages through a master server's address list.

    Usage:
        query = MasterServerQuery("hl2master.steampowered.com:27011",
                                  Region.EUROPE, {"appid": 730, "empty": True})
        async for address in query.iter_addresses():
            print(address)

    Every call to ``iter_addresses()`` or ``fetch_servers()`` starts over from
    the sentinel with a fresh socket. The socket of a lazy iteration is
    released when the generator finishes or is closed, so a caller that
    stops early should close it explicitly:

        addresses = query.iter_addresses()
        try:
            async for address in addresses:
                if done(address):
                    break
        finally:
            await addresses.aclose()
    """

    def __init__(self, address: AddressLike, region: Region = Region.ALL,
                 filters: Union[FilterSet, Mapping[str, object], None] = None,
                 timeout: Timeout = DEFAULT_TIMEOUT, attempts: int = DEFAULT_ATTEMPTS,
                 max_pages: Optional[int] = None,
                 transport_factory: Optional[Callable[[], UDPTransport]] = None):
        self.address = Address.coerce(address)
        self.region = Region(region)
        self.filters = FilterSet.coerce(filters)
        self.timeouts = validate_timeouts(attempts, timeout)
        self.max_pages = validate_max_pages(max_pages)
        self._transport_factory = transport_factory or (lambda: UDPTransport(attempts, self.timeouts))

    async def iter_pages(self) -> AsyncIterator[List[Address]]:
        """Yield each page as received, the terminating sentinel removed."""
        cursor = SENTINEL
        pages = 0
        total = 0

        async with self._transport_factory() as transport:
            while True:
                if self.max_pages is not None and pages >= self.max_pages:
                    logger.warning(
                        f"Stopping enumeration of {self.address} after {pages} pages "
                        f"({total} addresses) without reaching the end of the list"
                    )
                    raise EnumerationLimitError(
                        f"Master server {self.address} still had results after {pages} pages"
                    )

                request = packets.build_master_request(self.region, cursor, self.filters)
                page = parsers.parse_addresses(await transport.send(request, self.address))
                pages += 1

                if not page:
                    logger.warning(f"Empty page {pages} from {self.address}, ending enumeration")
                    break

                cursor = page[-1]
                if cursor == SENTINEL:
                    page = page[:-1]

                total += len(page)
                logger.debug(f"Page {pages} from {self.address}: {len(page)} addresses, cursor {cursor}")
                yield page

                if cursor == SENTINEL:
                    break

        logger.info(f"Master server {self.address} returned {total} addresses in {pages} pages")

    async def iter_addresses(self) -> AsyncIterator[Address]:
        """Yield addresses lazily in encounter order."""
        pages = self.iter_pages()
        try:
            async for page in pages:
                for address in page:
                    yield address
        finally:
            await pages.aclose()

    async def fetch_servers(self) -> List[Address]:
        """Run the whole enumeration and return every address."""
        addresses: List[Address] = []
        try:
            async for page in self.iter_pages():
                addresses.extend(page)
        except EnumerationLimitError as e:
            e.addresses = addresses
            raise
        return addresses


async def query_master(address: AddressLike, region: Region = Region.ALL,
                       filters: Union[FilterSet, Mapping[str, object], None] = None,
                       timeout: Timeout = DEFAULT_TIMEOUT, attempts: int = DEFAULT_ATTEMPTS,
                       max_pages: Optional[int] = None) -> List[Address]:
    """Fetch the full server list from a master server.

    Args:
        address: Master server as ``host:port`` string, Address or tuple
        region: Region to search, Region.ALL for everywhere
        filters: Optional filter set (mapping or FilterSet)
        timeout: Seconds per attempt, or one value per attempt
        attempts: Sends per page before giving up
        max_pages: Optional ceiling on the number of pages requested

    Returns:
        Addresses in the order the master sent them, sentinel excluded
    """
    query = MasterServerQuery(address, region, filters, timeout, attempts, max_pages)
    return await query.fetch_servers()

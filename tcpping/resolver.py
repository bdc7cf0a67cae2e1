import asyncio
import ipaddress
import logging
import socket
from typing import Optional, Sequence

from .destination import Destination, IPAddress, ResolvedTarget
from .errors import AddressFamilyUnsupportedError, NetworkUnreachableError, ResolutionError

logger = logging.getLogger(__name__)

def _family_of(address: IPAddress) -> socket.AddressFamily:
    return socket.AF_INET6 if address.version == 6 else socket.AF_INET

def select_address(
    host: str,
    candidates: Sequence[IPAddress],
    forced_family: Optional[socket.AddressFamily] = None,
) -> IPAddress:
    """
    Pick exactly one candidate, first match wins.

    Without a forced family the first candidate is returned as the resolver
    ordered it. That order comes from the system's getaddrinfo and is not
    normalised here, so it may differ between hosts.
    """
    if not candidates:
        raise ResolutionError(host)
    if forced_family is None:
        return candidates[0]
    for address in candidates:
        if _family_of(address) == forced_family:
            return address
    raise AddressFamilyUnsupportedError(host)

async def lookup(host: str, port: int) -> list[IPAddress]:
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except OSError as e:
        logger.debug("lookup of %s failed: %s", host, e)
        raise ResolutionError(host) from e

    candidates = []
    for family, _, _, _, sockaddr in infos:
        if family not in (socket.AF_INET, socket.AF_INET6):
            continue
        address = ipaddress.ip_address(sockaddr[0])
        if address not in candidates:
            candidates.append(address)
    logger.debug("%s resolved to %s", host, [str(a) for a in candidates])
    return candidates

async def resolve(destination: Destination) -> ResolvedTarget:
    candidates = await lookup(destination.host, destination.port)
    address = select_address(destination.host, candidates, destination.forced_family)
    target = ResolvedTarget(address=address, port=destination.port, family=_family_of(address))
    logger.debug("selected %s:%d", target.display, target.port)
    return target

async def precheck(target: ResolvedTarget, timeout: float = 0.1) -> None:
    """One short connection before the loop; any failure aborts the run."""
    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(*target.sockaddr, family=target.family),
            timeout,
        )
    except (OSError, asyncio.TimeoutError) as e:
        logger.debug("pre-check to %s:%d failed: %r", target.display, target.port, e)
        raise NetworkUnreachableError() from e
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass

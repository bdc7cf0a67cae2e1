import ipaddress
import socket
from dataclasses import dataclass
from typing import Optional, Union

from .config import DEFAULT_PORT

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

@dataclass(frozen=True)
class Destination:
    host: str                                            # "example.com", "10.0.0.1", "::1"
    port: int
    forced_family: Optional[socket.AddressFamily] = None  # AF_INET / AF_INET6

    @property
    def host_is_ip(self) -> bool:
        return is_ip_literal(self.host)

@dataclass(frozen=True)
class ResolvedTarget:
    address: IPAddress
    port: int
    family: socket.AddressFamily

    @property
    def display(self) -> str:
        if self.family == socket.AF_INET6:
            return f"[{self.address}]"
        return str(self.address)

    @property
    def sockaddr(self) -> tuple:
        return (str(self.address), self.port)

def is_ip_literal(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True

def _parse_port(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise ValueError(f"invalid port: {text!r}")
    return check_port(port)

def check_port(port: int) -> int:
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range: {port}")
    return port

def split_host_port(text: str) -> tuple[str, Optional[int]]:
    """
    Split a destination into host and embedded port.

    Accepted forms: "host", "host:port", "[v6]", "[v6]:port" and a bare
    IPv6 literal such as "::1", which never carries a port.
    """
    if not text:
        raise ValueError("empty destination")

    if text.startswith("["):
        end = text.find("]")
        if end == -1:
            raise ValueError(f"missing ']' in destination: {text!r}")
        host, rest = text[1:end], text[end + 1:]
        if not host:
            raise ValueError(f"empty host in destination: {text!r}")
        if not rest:
            return host, None
        if not rest.startswith(":"):
            raise ValueError(f"unexpected text after ']': {rest!r}")
        return host, _parse_port(rest[1:])

    if text.count(":") == 1:
        host, port = text.split(":")
        if not host:
            raise ValueError(f"empty host in destination: {text!r}")
        return host, _parse_port(port)

    return text, None

def parse_destination(
    text: str,
    port: Optional[int] = None,
    forced_family: Optional[socket.AddressFamily] = None,
) -> Destination:
    """Build a Destination; an explicit port wins over an embedded one."""
    host, embedded = split_host_port(text)
    if port is not None:
        chosen = check_port(port)
    elif embedded is not None:
        chosen = embedded
    else:
        chosen = DEFAULT_PORT
    return Destination(host=host, port=chosen, forced_family=forced_family)

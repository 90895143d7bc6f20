"""Immutable run configuration and nameserver parsing."""

from dataclasses import dataclass, field
from typing import Tuple, Union

DEFAULT_PORT = 53
DEFAULT_CONCURRENCY = 10
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Nameserver:
    """A nameserver entry exactly as given on the command line.

    The address is not checked until a query is made, so a malformed entry
    only costs its own slot in the fallback chain.
    """

    address: str

    def endpoint(self) -> Tuple[str, int]:
        """
        Split the address into host and port.

        Accepts ``host``, ``host:port``, a bare IPv6 literal and ``[v6]:port``.

        Raises:
            ValueError: The address cannot be split or the port is not a number.
        """
        address = self.address
        if address.startswith("["):
            host, closed, rest = address[1:].partition("]")
            if not closed or (rest and not rest.startswith(":")):
                raise ValueError(f"malformed nameserver address: {address!r}")
            port = rest[1:]
        elif address.count(":") == 1:
            host, port = address.split(":")
        else:
            host, port = address, ""
        if not host:
            raise ValueError(f"malformed nameserver address: {address!r}")
        return host, int(port) if port else DEFAULT_PORT

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class SystemDefault:
    """Use the platform resolver."""


@dataclass(frozen=True)
class CustomChain:
    """Try each nameserver in order until one gives a non-empty answer."""

    nameservers: Tuple[Nameserver, ...]


Strategy = Union[SystemDefault, CustomChain]


def parse_nameservers(raw: str) -> Tuple[Nameserver, ...]:
    """Strip all whitespace from ``raw`` and split it on commas."""
    compact = "".join(raw.split())
    if not compact:
        return ()
    return tuple(Nameserver(entry) for entry in compact.split(","))


def resolution_strategy(raw: str) -> Strategy:
    """Build the resolution strategy for a comma-separated nameserver list."""
    nameservers = parse_nameservers(raw)
    if not nameservers:
        return SystemDefault()
    return CustomChain(nameservers)


@dataclass(frozen=True)
class ResolveConfig:
    """Settings shared read-only by every lookup task."""

    strategy: Strategy = field(default_factory=SystemDefault)
    include_ipv6: bool = False
    concurrency: int = DEFAULT_CONCURRENCY
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

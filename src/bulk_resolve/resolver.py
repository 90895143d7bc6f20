"""Forward and reverse lookups against the system resolver or a nameserver chain."""

import ipaddress
import logging
import socket
import time
from dataclasses import dataclass
from typing import Callable, List, Tuple

import dns.exception
import dns.resolver

from bulk_resolve.config import CustomChain, ResolveConfig

logger = logging.getLogger(__name__)

# Anything in here is reported as an empty answer for the target or server.
LOOKUP_ERRORS = (dns.exception.DNSException, OSError, ValueError)


def is_ip_address(target: str) -> bool:
    """Return True if ``target`` is an IPv4 or IPv6 literal."""
    try:
        ipaddress.ip_address(target)
    except ValueError:
        return False
    return True


def strip_root(name: str) -> str:
    """Drop a single trailing root-domain dot."""
    return name[:-1] if name.endswith(".") else name


def unique_addresses(infos) -> List[str]:
    """Addresses from getaddrinfo results, first occurrence order."""
    addresses = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        if sockaddr[0] not in addresses:
            addresses.append(sockaddr[0])
    return addresses


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of one lookup.

    An empty ``values`` tuple covers both a genuinely empty answer and a
    failed query; the two are deliberately not told apart.
    """

    target: str
    values: Tuple[str, ...] = ()
    reverse: bool = False


class BulkResolver:
    """Resolves targets using the strategy held in a ResolveConfig."""

    def __init__(self, config: ResolveConfig):
        self.config = config

    def resolve(self, target: str) -> LookupResult:
        """Reverse-resolve IP literals and forward-resolve everything else."""
        if is_ip_address(target):
            return self.reverse(target)
        return self.forward(target)

    def forward(self, hostname: str) -> LookupResult:
        """
        Resolve a hostname to its addresses.

        IPv6 addresses are dropped unless the config includes them.
        """
        strategy = self.config.strategy
        if isinstance(strategy, CustomChain):
            addresses = self._walk_chain(
                strategy, hostname, lambda resolver: self._query_addresses(resolver, hostname)
            )
        else:
            addresses = self._system_addresses(hostname)

        if not self.config.include_ipv6:
            addresses = [address for address in addresses if ":" not in address]
        return LookupResult(hostname, tuple(addresses))

    def reverse(self, ip: str) -> LookupResult:
        """Resolve an IP literal to host names, without the trailing dot."""
        strategy = self.config.strategy
        if isinstance(strategy, CustomChain):
            names = self._walk_chain(
                strategy, ip, lambda resolver: self._query_names(resolver, ip)
            )
        else:
            names = self._system_names(ip)
        return LookupResult(ip, tuple(strip_root(name) for name in names), reverse=True)

    def _walk_chain(
        self,
        chain: CustomChain,
        target: str,
        query: Callable[[dns.resolver.Resolver], List[str]],
    ) -> List[str]:
        for nameserver in chain.nameservers:
            try:
                host, port = nameserver.endpoint()
                addresses = self._nameserver_addresses(host)
                values = query(self._make_resolver(addresses, port))
            except LOOKUP_ERRORS as exc:
                logger.debug("Lookup of %s via %s failed: %s", target, nameserver, exc)
                continue
            if values:
                return values
            logger.debug("No answer for %s from %s", target, nameserver)
        return []

    def _nameserver_addresses(self, host: str) -> List[str]:
        """Return ``host`` itself if it is an IP, else its addresses from the platform resolver."""
        if is_ip_address(host):
            return [host]
        addresses = unique_addresses(
            socket.getaddrinfo(host, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
        )
        if not addresses:
            raise ValueError(f"nameserver {host} has no addresses")
        return addresses

    def _make_resolver(self, addresses: List[str], port: int) -> dns.resolver.Resolver:
        resolver = dns.resolver.Resolver(configure=False)
        resolver.port = port
        resolver.nameservers = list(addresses)
        resolver.timeout = self.config.timeout
        resolver.lifetime = self.config.timeout
        return resolver

    def _query_addresses(self, resolver: dns.resolver.Resolver, hostname: str) -> List[str]:
        rdtypes = ("A", "AAAA") if self.config.include_ipv6 else ("A",)
        # A and AAAA share one deadline per server attempt.
        deadline = time.monotonic() + self.config.timeout
        addresses = []
        for rdtype in rdtypes:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise dns.exception.Timeout(timeout=self.config.timeout)
            answers = resolver.resolve(
                hostname, rdtype, raise_on_no_answer=False, lifetime=remaining
            )
            addresses.extend(rdata.to_text() for rdata in answers)
        return addresses

    def _query_names(self, resolver: dns.resolver.Resolver, ip: str) -> List[str]:
        answers = resolver.resolve_address(ip, raise_on_no_answer=False)
        return [rdata.to_text() for rdata in answers]

    def _system_addresses(self, hostname: str) -> List[str]:
        family = socket.AF_UNSPEC if self.config.include_ipv6 else socket.AF_INET
        try:
            infos = socket.getaddrinfo(hostname, None, family, socket.SOCK_STREAM)
        except LOOKUP_ERRORS as exc:
            logger.debug("System lookup of %s failed: %s", hostname, exc)
            return []
        return unique_addresses(infos)

    def _system_names(self, ip: str) -> List[str]:
        try:
            hostname, aliases, _addresses = socket.gethostbyaddr(ip)
        except LOOKUP_ERRORS as exc:
            logger.debug("System reverse lookup of %s failed: %s", ip, exc)
            return []
        return [hostname] + list(aliases)

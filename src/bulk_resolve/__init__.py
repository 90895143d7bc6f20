"""Bulk Resolve - concurrent forward and reverse DNS lookups."""

__version__ = "0.1.0"
__author__ = "bulk-resolve contributors"
__license__ = "MIT"

from bulk_resolve.config import CustomChain, Nameserver, ResolveConfig, SystemDefault
from bulk_resolve.resolver import BulkResolver, LookupResult, is_ip_address

__all__ = [
    "BulkResolver",
    "CustomChain",
    "LookupResult",
    "Nameserver",
    "ResolveConfig",
    "SystemDefault",
    "is_ip_address",
]

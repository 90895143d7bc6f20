"""Tests for configuration and nameserver parsing."""

import pytest
from bulk_resolve.config import (
    CustomChain,
    Nameserver,
    ResolveConfig,
    SystemDefault,
    parse_nameservers,
    resolution_strategy,
)


class TestResolutionStrategy:
    """Test cases for building a resolution strategy."""

    def test_empty_string_uses_system_default(self):
        """Test that no nameservers means the system resolver."""
        assert resolution_strategy("") == SystemDefault()
        assert resolution_strategy("   ") == SystemDefault()

    def test_custom_chain_keeps_order(self):
        """Test that nameservers stay in the order given."""
        strategy = resolution_strategy("8.8.8.8,1.1.1.1,9.9.9.9")
        assert isinstance(strategy, CustomChain)
        assert [str(ns) for ns in strategy.nameservers] == ["8.8.8.8", "1.1.1.1", "9.9.9.9"]

    def test_whitespace_is_stripped(self):
        """Test that embedded whitespace is removed before splitting."""
        assert parse_nameservers(" 8.8.8.8 , 1.1. 1.1\t") == (
            Nameserver("8.8.8.8"),
            Nameserver("1.1.1.1"),
        )

    def test_no_validation_at_parse_time(self):
        """Test that garbage entries survive parsing."""
        assert parse_nameservers("not-a-server,,x:y") == (
            Nameserver("not-a-server"),
            Nameserver(""),
            Nameserver("x:y"),
        )


class TestNameserverEndpoint:
    """Test cases for splitting nameserver addresses."""

    @pytest.mark.parametrize(
        "address, expected",
        [
            ("8.8.8.8", ("8.8.8.8", 53)),
            ("8.8.8.8:5353", ("8.8.8.8", 5353)),
            ("2001:4860:4860::8888", ("2001:4860:4860::8888", 53)),
            ("[2001:4860:4860::8888]", ("2001:4860:4860::8888", 53)),
            ("[::1]:5300", ("::1", 5300)),
            ("ns.example.com", ("ns.example.com", 53)),
        ],
    )
    def test_endpoint(self, address, expected):
        """Test host and port extraction."""
        assert Nameserver(address).endpoint() == expected

    @pytest.mark.parametrize("address", ["", "8.8.8.8:dns", "[::1", "[::1]x53", ":53"])
    def test_malformed_endpoint(self, address):
        """Test that malformed addresses fail when used."""
        with pytest.raises(ValueError):
            Nameserver(address).endpoint()


class TestResolveConfig:
    """Test cases for ResolveConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ResolveConfig()
        assert config.strategy == SystemDefault()
        assert config.include_ipv6 is False
        assert config.concurrency == 10
        assert config.timeout == 10.0

    def test_is_immutable(self):
        """Test that configuration cannot be changed after creation."""
        config = ResolveConfig()
        with pytest.raises(AttributeError):
            config.concurrency = 5

    def test_rejects_zero_concurrency(self):
        """Test that the concurrency cap must be positive."""
        with pytest.raises(ValueError):
            ResolveConfig(concurrency=0)

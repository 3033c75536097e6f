"""Tests for the lookup pipeline."""

import ipaddress

import pytest

from addrlens import AddressLookup, ResolutionError, lookup
from addrlens.resolve import SystemNameService


class TestLookup:
    """Test cases for lookup() with a fake name service."""

    def test_hostname_order_preserved(self, fake_backend):
        details = lookup("example.test", backend=fake_backend)

        assert [d.ip for d in details] == [
            "93.184.216.34",
            "2606:2800:220:1:248:1893:25c8:1946",
        ]
        assert [d.version for d in details] == ["IPv4", "IPv6"]
        assert details[0].hostnames == ["edge.example.test", "alias.example.test"]
        assert details[1].hostnames == []

    def test_public_ipv4_literal(self, fake_backend):
        details = lookup("8.8.8.8", backend=fake_backend)

        assert len(details) == 1
        detail = details[0]
        assert detail.is_private is False
        assert detail.is_ipv4 is True
        assert detail.version == "IPv4"
        assert detail.common_uses == ["Public address"]

    @pytest.mark.parametrize("literal", [
        "192.168.0.1", "192.168.255.255", "10.0.0.1", "10.200.3.4",
        "172.16.0.1", "172.20.10.10", "172.31.255.255",
    ])
    def test_rfc1918(self, fake_backend, literal):
        detail, = lookup(literal, backend=fake_backend)

        assert detail.is_private is True
        assert detail.common_uses == ["Private network (RFC 1918)"]

    @pytest.mark.parametrize("literal", ["1.2.3.4", "2001:db8::42", "fe80::1", "ff02::1"])
    def test_literal_round_trip(self, fake_backend, literal):
        details = lookup(literal, backend=fake_backend)

        assert len(details) == 1
        assert str(details[0].address) == str(ipaddress.ip_address(literal))

    def test_invalid_address(self, fake_backend):
        with pytest.raises(ResolutionError):
            lookup("999.999.999.999", backend=fake_backend)

    def test_idempotent(self, fake_backend):
        first = lookup("8.8.8.8", backend=fake_backend)
        second = lookup("8.8.8.8", backend=fake_backend)

        assert first == second

    def test_no_reverse(self, fake_backend):
        details = lookup("8.8.8.8", backend=fake_backend, reverse=False)

        assert details[0].reverse_names == []
        assert fake_backend.reverse_calls == []

    def test_instance_reusable(self, fake_backend):
        runner = AddressLookup(backend=fake_backend)

        assert runner.run("8.8.8.8")[0].ip == "8.8.8.8"
        assert runner.run("::1")[0].ip == "::1"

    def test_default_backend_is_system(self):
        assert isinstance(AddressLookup().backend, SystemNameService)


class TestLookupSystemResolver:
    """Lookups through the host resolver, limited to local targets."""

    def test_ipv4_loopback(self):
        detail, = lookup("127.0.0.1")

        assert detail.is_loopback is True
        assert detail.common_uses == ["Loopback"]
        assert detail.version == "IPv4"
        assert detail.hostnames == detail.reverse_names

    def test_ipv6_loopback(self):
        detail, = lookup("::1", reverse=False)

        assert detail.is_loopback is True
        assert detail.common_uses == ["Loopback"]
        assert detail.version == "IPv6"

    def test_localhost(self):
        details = lookup("localhost", reverse=False)

        assert details
        assert any(d.is_loopback or d.is_private for d in details)

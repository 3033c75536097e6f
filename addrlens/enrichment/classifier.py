"""
Address usage classifier

Ordered prefix tables for IPv4 and IPv6. The first rule whose
prefix matches the address text decides the label.
"""

import ipaddress
from dataclasses import dataclass
from typing import Callable

from ..models import IPAddress


@dataclass(frozen=True)
class Rule:
    """A single classification rule"""
    label: str
    predicate: Callable[[str], bool]

    def matches(self, text: str) -> bool:
        return self.predicate(text)


def prefix_rule(label: str, *prefixes: str) -> Rule:
    """Rule matching address text starting with any of the given prefixes"""
    return Rule(label, lambda text: text.startswith(prefixes))


# IPv4 labels
PRIVATE_V4 = "Private network (RFC 1918)"
LINKLOCAL_V4 = "Link-local (APIPA)"
MULTICAST_V4 = "Multicast"
LOOPBACK_V4 = "Loopback"
CGNAT_V4 = "Carrier-grade NAT (RFC 6598)"
PUBLIC_V4 = "Public address"

# IPv6 labels
LOOPBACK_V6 = "Loopback"
LINKLOCAL_V6 = "Link-local"
ULA_V6 = "Unique local address (ULA)"
MULTICAST_V6 = "Multicast"
TEREDO_V6 = "Teredo tunneling"
DOCUMENTATION_V6 = "Documentation"
SIX_TO_FOUR_V6 = "6to4"
GLOBAL_V6 = "Global unicast"


# Matched against dotted-decimal text, in order
IPV4_RULES: tuple[Rule, ...] = (
    prefix_rule(PRIVATE_V4, "192.168."),
    prefix_rule(PRIVATE_V4, "10."),
    prefix_rule(PRIVATE_V4, *(f"172.{octet}." for octet in range(16, 32))),
    prefix_rule(LINKLOCAL_V4, "169.254."),
    prefix_rule(MULTICAST_V4, "224."),
    prefix_rule(LOOPBACK_V4, "127."),
    prefix_rule(CGNAT_V4, "100.64."),
)

# Matched against compressed lowercase text, in order
IPV6_RULES: tuple[Rule, ...] = (
    prefix_rule(LOOPBACK_V6, "::1"),
    prefix_rule(LINKLOCAL_V6, "fe80:"),
    prefix_rule(ULA_V6, "fc00:", "fd00:"),
    prefix_rule(MULTICAST_V6, "ff00:"),
    prefix_rule(TEREDO_V6, "2001:0:"),
    prefix_rule(DOCUMENTATION_V6, "2001:db8:"),
    prefix_rule(SIX_TO_FOUR_V6, "2002:"),
)


def first_match(rules: tuple[Rule, ...], text: str, default: str) -> str:
    """Label of the first matching rule, or default"""
    for rule in rules:
        if rule.matches(text):
            return rule.label
    return default


class AddressClassifier:
    """
    Classify addresses into common-use labels.

    IPv4:
    - Private network: 10/8, 172.16/12, 192.168/16
    - Link-local: 169.254/16
    - Multicast: 224/8
    - Loopback: 127/8
    - Carrier-grade NAT: 100.64/16
    - Public address: everything else

    IPv6:
    - Loopback, Link-local, ULA, Multicast, Teredo,
      Documentation, 6to4, otherwise Global unicast
    """

    @classmethod
    def classify_ipv4(cls, address: ipaddress.IPv4Address) -> list[str]:
        return [first_match(IPV4_RULES, str(address), PUBLIC_V4)]

    @classmethod
    def classify_ipv6(cls, address: ipaddress.IPv6Address) -> list[str]:
        return [first_match(IPV6_RULES, address.compressed.lower(), GLOBAL_V6)]

    @classmethod
    def classify(cls, address: IPAddress) -> list[str]:
        """
        Classify an address.

        Args:
            address: IPv4Address or IPv6Address

        Returns:
            Single-element list with the usage label
        """
        if address.version == 4:
            return cls.classify_ipv4(address)
        return cls.classify_ipv6(address)

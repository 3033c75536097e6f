"""
Per-address analysis: flags, classification and reverse names
"""

import ipaddress
import logging
from typing import Optional, Union

from ..models import AddressDetail, IPAddress, NameServiceError
from ..resolve.base import NameService
from .classifier import AddressClassifier


logger = logging.getLogger(__name__)


# RFC 1918 and RFC 4193 only; loopback and link-local have their own flags
PRIVATE_NETWORKS: tuple[Union[ipaddress.IPv4Network, ipaddress.IPv6Network], ...] = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
)


def is_private_address(address: IPAddress) -> bool:
    """Return True if *address* is in an RFC 1918 or RFC 4193 range."""
    return any(
        address in network
        for network in PRIVATE_NETWORKS
        if network.version == address.version
    )


def as_ipv4(address: IPAddress) -> Optional[ipaddress.IPv4Address]:
    """4-byte form of the address (native or IPv4-mapped), if it has one"""
    if address.version == 4:
        return address
    return address.ipv4_mapped


class AddressAnalyzer:
    """
    Build an AddressDetail for a single address.

    Never raises: a failed reverse lookup just leaves the
    name fields empty.
    """

    def __init__(self, backend: Optional[NameService] = None, reverse: bool = True):
        self.backend = backend
        self.reverse = reverse and backend is not None

    def analyze(self, address: IPAddress) -> AddressDetail:
        """
        Analyze a single address. Never raises.

        Args:
            address: IPv4Address or IPv6Address (IPv4-mapped is unwrapped)

        Returns:
            AddressDetail with flags, common uses and reverse names
        """
        v4 = as_ipv4(address)
        if v4 is not None:
            address = v4

        is_ipv4 = v4 is not None
        detail = AddressDetail(
            address=address,
            is_private=is_private_address(address),
            is_loopback=address.is_loopback,
            is_ipv4=is_ipv4,
            is_ipv6=not is_ipv4,
            version="IPv4" if is_ipv4 else "IPv6",
            common_uses=AddressClassifier.classify(address),
        )

        if self.reverse:
            names = self._reverse_names(str(address))
            detail.hostnames = names
            detail.reverse_names = list(names)

        return detail

    def _reverse_names(self, text: str) -> list[str]:
        try:
            return self.backend.reverse_lookup(text)
        except NameServiceError as e:
            logger.debug("Reverse lookup for %s failed: %s", text, e.reason)
            return []

"""
Stub DNS resolver backend using dnspython
"""

import logging
from typing import Optional

import dns.exception
import dns.resolver

from ..models import NameServiceError
from .base import NameService


logger = logging.getLogger(__name__)


class DnsNameService(NameService):
    """
    Name service that queries DNS servers directly.

    Forward lookups ask for A records, then AAAA records.
    Reverse lookups ask for PTR records under in-addr.arpa / ip6.arpa.
    Bypasses /etc/hosts, so results can differ from the system backend.
    """

    name = "dns"
    RECORD_TYPES = ('A', 'AAAA')

    def __init__(self, nameservers: Optional[list[str]] = None):
        try:
            if nameservers:
                self._resolver = dns.resolver.Resolver(configure=False)
                self._resolver.nameservers = list(nameservers)
            else:
                self._resolver = dns.resolver.Resolver()
        except (dns.exception.DNSException, ValueError) as e:
            raise NameServiceError("resolver configuration", e) from e

    @property
    def nameservers(self) -> list[str]:
        return [str(ns) for ns in self._resolver.nameservers]

    def _query(self, name: str, rdtype: str) -> list[str]:
        """Query one record type, empty list when the name has none"""
        try:
            answers = self._resolver.resolve(name, rdtype)
        except dns.resolver.NoAnswer:
            return []
        return [rdata.to_text() for rdata in answers]

    def resolve_name(self, name: str) -> list[str]:
        addresses: list[str] = []
        last_error: Optional[dns.exception.DNSException] = None
        for rdtype in self.RECORD_TYPES:
            try:
                answers = self._query(name, rdtype)
            except dns.exception.DNSException as e:
                logger.debug("DNS %s %s query failed: %s", name, rdtype, e)
                last_error = e
                continue
            for addr in answers:
                if addr not in addresses:
                    addresses.append(addr)

        if not addresses:
            if last_error is not None:
                raise NameServiceError(name, last_error) from last_error
            raise NameServiceError(name, "no A or AAAA records")

        logger.debug("DNS %s -> %s (via %s)", name, addresses, self.nameservers)
        return addresses

    def reverse_lookup(self, address: str) -> list[str]:
        try:
            answers = self._resolver.resolve_address(address)
        except (dns.exception.DNSException, ValueError) as e:
            raise NameServiceError(address, e) from e

        names: list[str] = []
        for rdata in answers:
            host = rdata.target.to_text(omit_final_dot=True)
            if host not in names:
                names.append(host)
        return names

"""
Data models for AddrLens
"""

import ipaddress
from dataclasses import dataclass, field
from typing import Optional, Union


IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass
class AddressDetail:
    """Classification and reverse DNS details for one resolved address"""
    address: IPAddress
    is_private: bool = False
    is_loopback: bool = False
    is_ipv4: bool = False
    is_ipv6: bool = False
    version: str = ""
    hostnames: list[str] = field(default_factory=list)
    # Filled from the same reverse lookup as hostnames
    reverse_names: list[str] = field(default_factory=list)
    common_uses: list[str] = field(default_factory=list)

    @property
    def ip(self) -> str:
        """Canonical text form of the address"""
        return str(self.address)

class NameServiceError(Exception):
    """A name-service backend could not answer a forward or reverse query."""

    def __init__(self, query: str, reason: object) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"{query}: {reason}")


class ResolutionError(Exception):
    """Target is neither a resolvable name nor a literal IP address."""

    def __init__(self, target: str, cause: Optional[BaseException] = None) -> None:
        self.target = target
        self.cause = cause
        message = f"Cannot resolve '{target}'"
        if cause is not None:
            reason = getattr(cause, 'reason', cause)
            message = f"{message}: {reason}"
        super().__init__(message)

"""
Name-service backends and target resolution for AddrLens
"""

from typing import Optional

from .base import NameService
from .system import SystemNameService
from .dnsquery import DnsNameService
from .target import TargetResolver


BACKENDS = {
    'system': SystemNameService,
    'dns': DnsNameService,
}


def create_name_service(kind: str = 'system',
                        nameservers: Optional[list[str]] = None) -> NameService:
    """
    Create a name-service backend by name.

    Args:
        kind: 'system' (host resolver) or 'dns' (direct DNS queries)
        nameservers: Explicit DNS servers, only used by the 'dns' backend

    Returns:
        NameService instance
    """
    backend_class = BACKENDS.get(kind.lower())
    if not backend_class:
        raise ValueError(
            f"Unknown backend '{kind}'. "
            f"Supported: {', '.join(BACKENDS.keys())}"
        )

    if backend_class is DnsNameService:
        return DnsNameService(nameservers=nameservers)
    return backend_class()


__all__ = [
    'BACKENDS', 'DnsNameService', 'NameService', 'SystemNameService',
    'TargetResolver', 'create_name_service',
]

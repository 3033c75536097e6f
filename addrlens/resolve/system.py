"""
Host resolver backend (getaddrinfo / gethostbyaddr)
"""

import logging
import socket

from ..models import NameServiceError
from .base import NameService


logger = logging.getLogger(__name__)


class SystemNameService(NameService):
    """
    Name service backed by the host's resolver.

    Honours /etc/hosts, nsswitch and whatever DNS configuration the
    platform uses. Latency and retries are left to the platform.
    """

    name = "system"

    def resolve_name(self, name: str) -> list[str]:
        try:
            infos = socket.getaddrinfo(name, None, proto=socket.IPPROTO_TCP)
        except (socket.gaierror, UnicodeError) as e:
            raise NameServiceError(name, e) from e

        addresses: list[str] = []
        for _family, _type, _proto, _canon, sockaddr in infos:
            addr = sockaddr[0]
            if addr not in addresses:
                addresses.append(addr)

        logger.debug("getaddrinfo(%s) -> %s", name, addresses)
        return addresses

    def reverse_lookup(self, address: str) -> list[str]:
        try:
            hostname, aliases, _ = socket.gethostbyaddr(address)
        except (socket.herror, socket.gaierror, socket.timeout, OSError) as e:
            raise NameServiceError(address, e) from e

        names = [hostname]
        for alias in aliases:
            if alias not in names:
                names.append(alias)
        return names

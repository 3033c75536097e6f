"""
Target resolution: hostname first, literal address second
"""

import ipaddress
import logging

from ..models import IPAddress, NameServiceError, ResolutionError
from .base import NameService


logger = logging.getLogger(__name__)


class TargetResolver:
    """
    Turn a user-supplied target into a list of addresses.

    The target is first handed to the name service. Only when that
    fails (or yields nothing) is it parsed as a literal IPv4/IPv6
    address. When both fail, the name-service error is reported.
    """

    def __init__(self, backend: NameService):
        self.backend = backend

    def resolve(self, target: str) -> list[IPAddress]:
        """
        Resolve target to addresses.

        Args:
            target: Hostname or literal IP address text

        Returns:
            Non-empty list of addresses in resolution order

        Raises:
            ResolutionError: If target is neither resolvable nor a literal
        """
        try:
            addresses = self._resolve_name(target)
        except NameServiceError as e:
            literal = self._parse_literal(target)
            if literal is None:
                raise ResolutionError(target, e) from e
            logger.debug("Name lookup for %r failed (%s), using literal %s",
                         target, e.reason, literal)
            return [literal]
        return addresses

    def _resolve_name(self, target: str) -> list[IPAddress]:
        addresses: list[IPAddress] = []
        for text in self.backend.resolve_name(target):
            addr = self._parse_literal(text)
            if addr is None:
                logger.debug("Ignoring unparseable address %r for %r", text, target)
                continue
            if addr not in addresses:
                addresses.append(addr)

        if not addresses:
            raise NameServiceError(target, "no addresses returned")
        return addresses

    @staticmethod
    def _parse_literal(text: str):
        try:
            return ipaddress.ip_address(text)
        except ValueError:
            return None

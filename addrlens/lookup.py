"""
Lookup orchestrator
"""

import logging
from typing import Optional

from .models import AddressDetail
from .resolve import NameService, SystemNameService, TargetResolver
from .enrichment import AddressAnalyzer


logger = logging.getLogger(__name__)


class AddressLookup:
    """
    Resolve a target and analyze every resulting address.

    Holds no per-call state, so one instance can serve any
    number of lookups.
    """

    def __init__(self, backend: Optional[NameService] = None, reverse: bool = True):
        self.backend = backend or SystemNameService()
        self.reverse = reverse
        self._resolver = TargetResolver(self.backend)
        self._analyzer = AddressAnalyzer(self.backend, reverse=reverse)

    def run(self, target: str) -> list[AddressDetail]:
        """
        Look up a target.

        Args:
            target: Hostname or literal IP address

        Returns:
            One AddressDetail per address, in resolution order

        Raises:
            ResolutionError: If the target cannot be resolved
        """
        addresses = self._resolver.resolve(target)
        logger.debug("Resolved %r to %d address(es) via %s backend",
                     target, len(addresses), self.backend.name)
        return [self._analyzer.analyze(addr) for addr in addresses]


def lookup(target: str, backend: Optional[NameService] = None,
           reverse: bool = True) -> list[AddressDetail]:
    """Convenience function for a single lookup"""
    return AddressLookup(backend=backend, reverse=reverse).run(target)

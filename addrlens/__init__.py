"""
AddrLens - Address Lookup and Classification Tool

Resolve a hostname or literal IP address and annotate every resulting
address with its family, usage category and reverse DNS names.
"""

__version__ = "1.0.0"
__author__ = "AddrLens"

from .models import AddressDetail, ResolutionError, NameServiceError
from .lookup import AddressLookup, lookup

__all__ = [
    'AddressDetail', 'AddressLookup', 'NameServiceError', 'ResolutionError',
    'lookup',
]

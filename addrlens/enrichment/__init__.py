"""
Enrichment modules for AddrLens
"""

from .classifier import AddressClassifier, Rule, IPV4_RULES, IPV6_RULES
from .analyzer import AddressAnalyzer, is_private_address

__all__ = [
    'AddressAnalyzer', 'AddressClassifier', 'IPV4_RULES', 'IPV6_RULES',
    'Rule', 'is_private_address',
]

"""
Lexer Core Registry Module.

Provides the two record stores and their persistent snapshot storage.
"""

__all__ = [
    "ProfileStore",
    "ResourceTypeStore",
    "RegistrySnapshot",
    "RegistryStorage",
]

from lexer_core.registry.profiles import ProfileStore
from lexer_core.registry.resource_types import ResourceTypeStore
from lexer_core.registry.storage import RegistrySnapshot, RegistryStorage

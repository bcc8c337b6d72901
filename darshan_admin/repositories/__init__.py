"""
Repository layer over the row store.

Each repository method is one or more independent store calls; nothing here
retries, caches or rolls back.
"""

from .entity_repository import EntityRepository
from .translation_repository import TranslationSetRepository, WriteMode
from .dependent_repository import DependentCollectionRepository

__all__ = [
    "EntityRepository",
    "TranslationSetRepository",
    "WriteMode",
    "DependentCollectionRepository",
]

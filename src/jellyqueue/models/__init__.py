"""Data models for catalog items and the authenticated user."""

from jellyqueue.models.item import CatalogItem, ItemKind, parse_kind
from jellyqueue.models.user import User, UserConfiguration

__all__ = [
    "CatalogItem",
    "ItemKind",
    "User",
    "UserConfiguration",
    "parse_kind",
]

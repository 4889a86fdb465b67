"""
Library catalog models.

- Novel, Magazine, TextBook: the catalog item variants
- CatalogItem: the tagged union over those variants
- Member: a patron who borrows and returns items
"""

from .item import CatalogItem, ItemType, Magazine, Novel, TextBook, parse_item
from .member import BORROW_LIMIT, Member

__all__ = [
    "BORROW_LIMIT",
    "CatalogItem",
    "ItemType",
    "Magazine",
    "Member",
    "Novel",
    "TextBook",
    "parse_item",
]

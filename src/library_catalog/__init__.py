"""
Library Catalog.

An in-memory library catalog: novels, magazines and textbooks that members
borrow and return under a fixed per-member borrow limit.

Key Components:
- models: pydantic models for catalog items and members
- manager: the catalog and member registry
- config: logging settings via pydantic-settings
- demo: the scripted walkthrough behind the console entry point
"""

__version__ = "0.1.0"

from .manager import LibraryManager
from .models import BORROW_LIMIT, CatalogItem, ItemType, Magazine, Member, Novel, TextBook

__all__ = [
    "BORROW_LIMIT",
    "CatalogItem",
    "ItemType",
    "LibraryManager",
    "Magazine",
    "Member",
    "Novel",
    "TextBook",
    "__version__",
]

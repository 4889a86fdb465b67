"""
In-memory catalog and member registry.

The manager owns the authoritative item and member lists. Both only grow:
there is no removal. Lookups are linear scans that return ``None`` when
nothing matches, so callers must handle the absent case before use.
"""

import logging
from collections.abc import Callable

from .models import CatalogItem, Member

logger = logging.getLogger(__name__)

CATALOG_HEADER = "--- Library Catalog ---"


class LibraryManager:
    """Owns the catalog and the registered members, in insertion order."""

    def __init__(self) -> None:
        self._catalog: list[CatalogItem] = []
        self._members: list[Member] = []

    @property
    def catalog(self) -> tuple[CatalogItem, ...]:
        return tuple(self._catalog)

    @property
    def members(self) -> tuple[Member, ...]:
        return tuple(self._members)

    def add_item(self, item: CatalogItem) -> None:
        """Append an item to the catalog. Duplicate ids are not checked."""
        self._catalog.append(item)
        logger.debug("Item added | id=%s type=%s title=%s", item.id, item.type, item.title)

    def register_member(self, member: Member) -> None:
        """Append a member. Duplicate names are not checked."""
        self._members.append(member)
        logger.debug("Member registered | name=%s", member.name)

    def catalog_listing(self) -> list[str]:
        """Return the description of every item, in catalog order."""
        return [item.describe() for item in self._catalog]

    def show_catalog(self, write: Callable[[str], object] = print) -> None:
        """Write the catalog header followed by one line per item."""
        write(CATALOG_HEADER)
        for line in self.catalog_listing():
            write(line)

    def find_item_by_id(self, item_id: int) -> CatalogItem | None:
        """Return the first item with ``item_id``, or None."""
        for item in self._catalog:
            if item.id == item_id:
                return item
        logger.debug("No item with id=%s", item_id)
        return None

    def find_member_by_name(self, name: str) -> Member | None:
        """Return the first member named exactly ``name``, or None."""
        for member in self._members:
            if member.name == name:
                return member
        logger.debug("No member named %s", name)
        return None

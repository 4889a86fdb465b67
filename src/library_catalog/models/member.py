"""
Member model for the library catalog.

A member holds at most ``BORROW_LIMIT`` items at once. Borrowing and
returning never raise: both operations answer with a message describing
what happened, and the borrow list only changes on the success paths.
"""

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .item import CatalogItem

logger = logging.getLogger(__name__)

BORROW_LIMIT = 3

LIMIT_REACHED_MESSAGE = f"You cannot borrow more than {BORROW_LIMIT} items."
BORROWED_MESSAGE = "{title} has been added to {name}'s list of borrowed books."
RETURNED_MESSAGE = "{title} has been successfully returned."
NOT_BORROWED_MESSAGE = "{title} was not in the list of borrowed items."


class Member(BaseModel):
    """
    A library patron with a bounded list of borrowed items.

    The borrow list keeps borrow order. Items are matched by identity when
    returned, so only the exact instance that was borrowed can be given back.
    """

    borrow_limit: ClassVar[int] = BORROW_LIMIT

    name: str = Field(
        ...,
        description="Member name, matched exactly by catalog lookups",
        examples=["Alice", "Bob"],
    )

    _borrowed_items: list[CatalogItem] = PrivateAttr(default_factory=list)

    @property
    def borrowed_items(self) -> tuple[CatalogItem, ...]:
        """Items currently held, in borrow order."""
        return tuple(self._borrowed_items)

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> "Member":
        """Copy the member; a shallow copy still gets its own borrow list."""
        copied = super().model_copy(update=update, deep=deep)
        if not deep:
            copied._borrowed_items = list(self._borrowed_items)
        return copied

    @property
    def can_borrow(self) -> bool:
        """Check if the member is below the borrow limit."""
        return len(self._borrowed_items) < self.borrow_limit

    def borrow_item(self, item: CatalogItem) -> str:
        """
        Add an item to the borrow list.

        The item is not checked against other members' lists or against
        this member's own list; only the borrow limit is enforced.

        Returns:
            A confirmation naming the item and member, or the limit
            message when the member already holds ``BORROW_LIMIT`` items.
        """
        if not self.can_borrow:
            logger.info(
                "Borrow rejected | member=%s item_id=%s held=%d",
                self.name,
                item.id,
                len(self._borrowed_items),
            )
            return LIMIT_REACHED_MESSAGE

        self._borrowed_items.append(item)
        logger.debug("Borrow accepted | member=%s item_id=%s", self.name, item.id)
        return BORROWED_MESSAGE.format(title=item.title, name=self.name)

    def return_item(self, item: CatalogItem) -> str:
        """
        Remove the first occurrence of ``item`` from the borrow list.

        Returns:
            A success message, or a "not borrowed" message when the item
            is not held by this member.
        """
        for index, held in enumerate(self._borrowed_items):
            if held is item:
                del self._borrowed_items[index]
                logger.debug("Return accepted | member=%s item_id=%s", self.name, item.id)
                return RETURNED_MESSAGE.format(title=item.title)

        logger.info("Return of unheld item | member=%s item_id=%s", self.name, item.id)
        return NOT_BORROWED_MESSAGE.format(title=item.title)

    model_config = ConfigDict(frozen=True, extra="forbid")

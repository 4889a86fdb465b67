"""
Catalog item models for the library catalog.

Every catalog entry is one of three variants: Novel, Magazine or TextBook.
The variants form a closed tagged union keyed on the ``type`` field, so a
mapping carrying ``{"type": "Magazine", ...}`` always builds a Magazine and
an unknown tag is rejected by validation.

Items are frozen once constructed. The id, title and variant field never
change, which lets members hold references to the same instances that live
in the catalog.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ItemType(str, Enum):
    """Tag identifying which variant a catalog item is."""

    NOVEL = "Novel"
    MAGAZINE = "Magazine"
    TEXTBOOK = "TextBook"


class LibraryItem(BaseModel, ABC):
    """
    Fields shared by every catalog variant.

    Abstract: only Novel, Magazine and TextBook can be constructed.

    Callers assign ids; uniqueness within a catalog and non-empty titles
    are not checked here.
    """

    id: int = Field(
        ...,
        description="Caller-assigned identifier, unique within a catalog",
        examples=[1, 2, 42],
    )

    title: str = Field(
        ...,
        description="Title shown in catalog listings",
        examples=["The Hobbit", "National Geographic"],
    )

    type: str = Field(
        ...,
        description="Variant tag; each subclass pins it to its own ItemType value",
    )

    @property
    def item_type(self) -> ItemType:
        """The variant tag as an ItemType member."""
        return ItemType(self.type)

    @abstractmethod
    def describe(self) -> str:
        """Return the tagged one-line summary used in catalog listings."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Novel(LibraryItem):
    """A novel, described by its author."""

    type: Literal["Novel"] = "Novel"

    author: str = Field(
        ...,
        description="Author of the novel",
        examples=["J.R.R. Tolkien", "Frank Herbert"],
    )

    def describe(self) -> str:
        return f"[Novel] {self.title} by {self.author}"


class Magazine(LibraryItem):
    """A single magazine issue."""

    type: Literal["Magazine"] = "Magazine"

    issue_number: int = Field(
        ...,
        description="Issue number of this magazine copy",
        examples=[202, 7],
    )

    def describe(self) -> str:
        return f"[Magazine] {self.title}, Issue #{self.issue_number}"


class TextBook(LibraryItem):
    """A textbook, described by its publisher."""

    type: Literal["TextBook"] = "TextBook"

    publisher: str = Field(
        ...,
        description="Publishing house",
        examples=["MIT Press", "O'Reilly"],
    )

    def describe(self) -> str:
        return f"[TextBook] {self.title} published by {self.publisher}"


CatalogItem = Annotated[Novel | Magazine | TextBook, Field(discriminator="type")]

_catalog_item_adapter: TypeAdapter[CatalogItem] = TypeAdapter(CatalogItem)


def parse_item(data: dict[str, Any]) -> CatalogItem:
    """
    Build the matching item variant from a mapping.

    The ``type`` key selects the variant. Missing or unknown tags, and
    fields that do not belong to the selected variant, raise
    ``pydantic.ValidationError``.
    """
    return _catalog_item_adapter.validate_python(data)

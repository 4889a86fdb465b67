"""Shared fixtures for the library catalog tests.

Each test gets fresh item instances and a fresh manager, so borrow lists
and catalogs never leak between tests.
"""

import os
from collections.abc import Generator

import pytest

from library_catalog.config import reset_config
from library_catalog.manager import LibraryManager
from library_catalog.models import Magazine, Member, Novel, TextBook

# === Item Fixtures ===


@pytest.fixture
def hobbit() -> Novel:
    return Novel(id=1, title="The Hobbit", author="J.R.R. Tolkien")


@pytest.fixture
def national_geographic() -> Magazine:
    return Magazine(id=2, title="National Geographic", issue_number=202)


@pytest.fixture
def algorithms() -> TextBook:
    return TextBook(id=3, title="Introduction to Algorithms", publisher="MIT Press")


@pytest.fixture
def dune() -> Novel:
    return Novel(id=4, title="Dune", author="Frank Herbert")


# === Member and Manager Fixtures ===


@pytest.fixture
def alice() -> Member:
    return Member(name="Alice")


@pytest.fixture
def bob() -> Member:
    return Member(name="Bob")


@pytest.fixture
def library(hobbit, national_geographic, algorithms, alice, bob) -> LibraryManager:
    """A manager holding the three starting items and both members."""
    manager = LibraryManager()
    for item in (hobbit, national_geographic, algorithms):
        manager.add_item(item)
    manager.register_member(alice)
    manager.register_member(bob)
    return manager


# === Environment Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide an environment without LIBRARY_CATALOG_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("LIBRARY_CATALOG_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


# === Cleanup Fixtures ===


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Reset the cached configuration after every test."""
    yield
    reset_config()

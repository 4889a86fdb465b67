"""
Scripted walkthrough of the library catalog.

Builds a small catalog, registers two members, has Alice borrow up to and
past her limit, lists what she holds, then returns one item she never got
and one she did. Scenario output goes to ``write`` (stdout by default);
diagnostics go through logging to stderr.
"""

import logging
import sys
from collections.abc import Callable

from .config import get_config
from .manager import LibraryManager
from .models import Magazine, Member, Novel, TextBook

logger = logging.getLogger(__name__)

Writer = Callable[[str], object]


def build_library() -> LibraryManager:
    """Create the starting catalog and register Alice and Bob."""
    library = LibraryManager()

    library.add_item(Novel(id=1, title="The Hobbit", author="J.R.R. Tolkien"))
    library.add_item(Magazine(id=2, title="National Geographic", issue_number=202))
    library.add_item(TextBook(id=3, title="Introduction to Algorithms", publisher="MIT Press"))

    library.register_member(Member(name="Alice"))
    library.register_member(Member(name="Bob"))
    return library


def run_demo(write: Writer = print) -> LibraryManager:
    """Run the fixed borrow/return sequence and return the resulting library."""
    library = build_library()
    alice = library.find_member_by_name("Alice")
    if alice is None:
        raise LookupError("Alice is not registered")

    library.show_catalog(write)

    for item_id in range(1, 4):
        item = library.find_item_by_id(item_id)
        if item is not None:
            write(alice.borrow_item(item))

    dune = Novel(id=4, title="Dune", author="Frank Herbert")
    library.add_item(dune)
    write(alice.borrow_item(dune))

    write(f"\n{alice.name} currently borrowed:")
    for borrowed in alice.borrowed_items:
        write(f" {borrowed.describe()}")

    write(alice.return_item(dune))
    returned = library.find_item_by_id(2)
    if returned is not None:
        write(alice.return_item(returned))

    return library


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout only carries scenario output."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main() -> int:
    """Console entry point."""
    config = get_config()
    configure_logging(config.effective_log_level)

    logger.info("Running library catalog demo")
    try:
        library = run_demo()
    except Exception:
        logger.exception("Library catalog demo failed")
        raise
    logger.info(
        "Demo finished | items=%d members=%d", len(library.catalog), len(library.members)
    )
    return 0

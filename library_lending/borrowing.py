"""
borrowing.py

BorrowingService coordinates the inventory and the user registry so that a
borrow or a return updates both collections, or neither.
"""

from __future__ import annotations
import logging
from typing import Dict, List

from library_lending.config import MAX_BORROW
from library_lending.exceptions import BookUnavailable, BorrowLimitExceeded
from library_lending.inventory import Inventory
from library_lending.users import UserRegistry

logger = logging.getLogger("library_lending.borrowing")


class BorrowingService:
    """
    Stateless coordinator for borrow and return transactions.

    The service owns no collections: the inventory and registry are passed
    into every call. Each call takes `inventory.lock` then `registry.lock`
    and holds both until it returns.
    """

    def __init__(self, max_borrow: int = MAX_BORROW):
        """
        Args:
            max_borrow: maximum number of books a user may hold at once.
        """
        self.max_borrow = int(max_borrow)

    # ---------------- Core operations ----------------
    def borrow_book(self, inventory: Inventory, registry: UserRegistry, user_id: int, book_id: int) -> None:
        """
        Lend a book to a user.

        All checks run before any mutation, so a failed call leaves both
        collections as they were.

        Raises:
            BookNotFound: the book is not in the inventory.
            BookUnavailable: the book is already issued.
            UserNotFound: the user is not registered.
            BorrowLimitExceeded: the user already holds `max_borrow` books.
        """
        with inventory.lock, registry.lock:
            book = inventory.get_book(book_id)
            if not book.is_available:
                logger.debug("Borrow refused, book %s is issued", book_id)
                raise BookUnavailable(book_id)

            user = registry.get_user(user_id)
            if len(user.borrowed_books) >= self.max_borrow:
                logger.debug("Borrow refused, user %s holds %d books", user_id, len(user.borrowed_books))
                raise BorrowLimitExceeded(user_id, self.max_borrow)

            inventory.update_book_availability(book_id, False)
            try:
                # user is known to exist at this point
                registry.borrow_book(user_id, book_id)
            except Exception:
                inventory.update_book_availability(book_id, True)
                raise

            logger.info("Borrowed %s to %s", book_id, user_id)

    def return_book(self, inventory: Inventory, registry: UserRegistry, user_id: int, book_id: int) -> None:
        """
        Process a book return from a user.

        The user-side removal is the authoritative check: availability is only
        restored once the registry accepts the return.

        Raises:
            UserNotFound: the user is not registered.
            NotBorrowed: the user does not hold the book; the inventory is untouched.
            BookNotFound: the user held a book the inventory no longer knows;
                the user-side removal is kept.
        """
        with inventory.lock, registry.lock:
            registry.return_book(user_id, book_id)
            inventory.update_book_availability(book_id, True)
            logger.info("Book %s returned by %s", book_id, user_id)

    # ---------------- Audit ----------------
    def check_consistency(self, inventory: Inventory, registry: UserRegistry) -> List[str]:
        """
        Audit the cross-collection invariant.

        A book is issued exactly while one user holds it, and no user holds
        more than `max_borrow` books. Returns a list of human-readable
        problems, empty when the two collections agree.
        """
        problems: List[str] = []
        with inventory.lock, registry.lock:
            holders: Dict[int, List[int]] = {}
            for user in registry.list_users():
                if len(user.borrowed_books) > self.max_borrow:
                    problems.append(f"User {user.id} holds {len(user.borrowed_books)} books "
                                    f"(limit {self.max_borrow}).")
                seen = set()
                for book_id in user.borrowed_books:
                    if book_id in seen:
                        problems.append(f"User {user.id} lists book {book_id} more than once.")
                        continue
                    seen.add(book_id)
                    holders.setdefault(book_id, []).append(user.id)

            for book_id, user_ids in holders.items():
                if book_id not in inventory:
                    problems.append(f"Book {book_id} held by {user_ids} is not in the inventory.")
                    continue
                if len(user_ids) > 1:
                    problems.append(f"Book {book_id} is held by several users: {user_ids}.")
                if inventory.get_book(book_id).is_available:
                    problems.append(f"Book {book_id} is held by {user_ids} but marked available.")

            for book in inventory.list_books():
                if not book.is_available and book.id not in holders:
                    problems.append(f"Book {book.id} is issued but held by nobody.")

        if problems:
            logger.warning("Found %d consistency problem(s)", len(problems))
        return problems

"""
users.py

The user registry: owns every User record and each user's borrowed-book list.
"""

from __future__ import annotations
import logging
import threading
from typing import Dict, List

import pandas as pd

from library_lending.exceptions import DuplicateId, NotBorrowed, UserNotFound
from library_lending.models import User

logger = logging.getLogger("library_lending.users")

USER_COLUMNS = ["User ID", "Name", "BorrowedCount", "BorrowedBooks"]


class UserRegistry:
    """
    UserRegistry keeps registered users and the books they hold.

    It records borrows and returns on the user side only; the borrow cap and
    book availability are enforced by BorrowingService.
    """

    def __init__(self):
        self._users: Dict[int, User] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self.lock:
            return user_id in self._users

    # ---------------- Core operations ----------------
    def register_user(self, user: User) -> None:
        """
        Register a new library user.

        The record is stored as given, including any `borrowed_books` it
        already carries; those are not checked against an inventory. Use
        BorrowingService.check_consistency to audit imported records.

        Raises DuplicateId if the user ID already exists.
        """
        with self.lock:
            if user.id in self._users:
                logger.debug("Attempt to register existing user: %s", user.id)
                raise DuplicateId("User", user.id)
            self._users[user.id] = user
        if user.borrowed_books:
            logger.debug("User %s registered holding %s", user.id, user.borrowed_books)
        logger.info("Registered user %s", user.id)

    def get_user(self, user_id: int) -> User:
        with self.lock:
            try:
                return self._users[user_id]
            except KeyError:
                raise UserNotFound(user_id) from None

    def borrow_book(self, user_id: int, book_id: int) -> None:
        """Append `book_id` to the user's borrowed list."""
        with self.lock:
            user = self.get_user(user_id)
            user.borrowed_books.append(book_id)
            logger.debug("User %s now holds %s", user_id, user.borrowed_books)

    def return_book(self, user_id: int, book_id: int) -> None:
        """
        Remove `book_id` from the user's borrowed list.

        Raises UserNotFound for an unknown user and NotBorrowed when the user
        does not currently hold the book.
        """
        with self.lock:
            user = self.get_user(user_id)
            if book_id not in user.borrowed_books:
                logger.debug("User %s does not hold book %s", user_id, book_id)
                raise NotBorrowed(user_id, book_id)
            user.borrowed_books.remove(book_id)
            logger.debug("User %s now holds %s", user_id, user.borrowed_books)

    # ---------------- Reports / Queries ----------------
    def list_users(self) -> List[User]:
        with self.lock:
            return list(self._users.values())

    def members_with_borrowed_books(self) -> List[User]:
        """Return users who currently hold one or more books, in registration order."""
        return [u for u in self.list_users() if u.borrowed_books]

    def to_frame(self) -> pd.DataFrame:
        """
        Build a DataFrame summarizing users and their current borrowed books.

        Returns columns: User ID, Name, BorrowedCount, BorrowedBooks (comma separated).
        """
        rows = []
        with self.lock:
            for u in self._users.values():
                rows.append({
                    "User ID": u.id,
                    "Name": u.name,
                    "BorrowedCount": len(u.borrowed_books),
                    "BorrowedBooks": ",".join(str(b) for b in u.borrowed_books)
                })
        return pd.DataFrame(rows, columns=USER_COLUMNS)

"""
exceptions.py

Error taxonomy shared by the inventory, the user registry and the borrowing service.
"""

from __future__ import annotations
import enum


class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_ID = "duplicate_id"
    BOOK_UNAVAILABLE = "book_unavailable"
    BORROW_LIMIT_EXCEEDED = "borrow_limit_exceeded"
    NOT_BORROWED = "not_borrowed"


class LibraryError(Exception):
    """Base class for every error raised by the lending package."""

    kind: ErrorKind


class NotFound(LibraryError, LookupError):
    """An identifier is unknown to the collection that owns it."""

    kind = ErrorKind.NOT_FOUND


class BookNotFound(NotFound):
    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book not found: {book_id}")


class UserNotFound(NotFound):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class DuplicateId(LibraryError, ValueError):
    """Insertion collided with an identifier already present."""

    kind = ErrorKind.DUPLICATE_ID

    def __init__(self, entity: str, identifier: int):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with ID {identifier} already exists.")


class BookUnavailable(LibraryError):
    kind = ErrorKind.BOOK_UNAVAILABLE

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book {book_id} is already issued.")


class BorrowLimitExceeded(LibraryError):
    kind = ErrorKind.BORROW_LIMIT_EXCEEDED

    def __init__(self, user_id: int, limit: int):
        self.user_id = user_id
        self.limit = limit
        super().__init__(f"User {user_id} cannot borrow more than {limit} books at a time.")


class NotBorrowed(LibraryError):
    kind = ErrorKind.NOT_BORROWED

    def __init__(self, user_id: int, book_id: int):
        self.user_id = user_id
        self.book_id = book_id
        super().__init__(f"User {user_id} does not have book {book_id} borrowed.")

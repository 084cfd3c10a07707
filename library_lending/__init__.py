"""
library_lending

In-memory book inventory, user registry and the borrowing workflow that
keeps the two consistent.
"""

from library_lending.borrowing import BorrowingService
from library_lending.config import MAX_BORROW, configure_logging
from library_lending.exceptions import (
    BookNotFound,
    BookUnavailable,
    BorrowLimitExceeded,
    DuplicateId,
    ErrorKind,
    LibraryError,
    NotBorrowed,
    NotFound,
    UserNotFound,
)
from library_lending.inventory import Inventory
from library_lending.models import Book, Genre, User
from library_lending.users import UserRegistry

__all__ = [
    "Book",
    "BookNotFound",
    "BookUnavailable",
    "BorrowLimitExceeded",
    "BorrowingService",
    "DuplicateId",
    "ErrorKind",
    "Genre",
    "Inventory",
    "LibraryError",
    "MAX_BORROW",
    "NotBorrowed",
    "NotFound",
    "User",
    "UserNotFound",
    "UserRegistry",
    "configure_logging",
]

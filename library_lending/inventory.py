"""
inventory.py

The book inventory: owns every Book record, keyed by its caller-assigned ID.
"""

from __future__ import annotations
import logging
import threading
from typing import Dict, List

import pandas as pd

from library_lending.exceptions import BookNotFound, DuplicateId
from library_lending.models import Book

logger = logging.getLogger("library_lending.inventory")

BOOK_COLUMNS = ["Book ID", "Title", "Author", "Genre", "Availability"]


class Inventory:
    """
    Inventory holds the library's books in insertion order.

    Records are only created by `add_book`, dropped by `remove_book` and
    mutated through `update_book_availability`. `lock` guards the collection
    when callers share an instance across threads.
    """

    def __init__(self):
        self._books: Dict[int, Book] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        with self.lock:
            return book_id in self._books

    # ---------------- Core operations ----------------
    def add_book(self, book: Book) -> None:
        """
        Add a new book to the inventory.

        Raises DuplicateId if a book with the same ID already exists.
        """
        with self.lock:
            if book.id in self._books:
                logger.debug("Attempt to add existing book: %s", book.id)
                raise DuplicateId("Book", book.id)
            self._books[book.id] = book
        logger.info("Added book %s", book.id)

    def remove_book(self, book_id: int) -> Book:
        """
        Remove a book and return its record.

        Raises BookNotFound if no book has `book_id`.
        """
        with self.lock:
            try:
                book = self._books.pop(book_id)
            except KeyError:
                logger.warning("Book not found: %s", book_id)
                raise BookNotFound(book_id) from None
        logger.info("Removed book %s", book_id)
        return book

    def get_book(self, book_id: int) -> Book:
        """
        Retrieve the stored record for `book_id`.

        The returned Book is the live record, not a copy.
        """
        with self.lock:
            try:
                return self._books[book_id]
            except KeyError:
                raise BookNotFound(book_id) from None

    def update_book_availability(self, book_id: int, is_available: bool) -> None:
        """
        Set the availability flag for a book.

        Setting the flag to its current value is not an error.
        """
        with self.lock:
            book = self._books.get(book_id)
            if book is None:
                logger.warning("Book not found: %s", book_id)
                raise BookNotFound(book_id)
            book.is_available = bool(is_available)
        logger.info("Updated availability for %s -> %s", book_id, "Available" if is_available else "Issued")

    def list_books(self) -> List[Book]:
        with self.lock:
            return list(self._books.values())

    # ---------------- Reports ----------------
    def to_frame(self) -> pd.DataFrame:
        """
        One row per book in insertion order, with the genre label and
        availability rendered as Available / Issued.
        """
        rows = [{
            "Book ID": b.id,
            "Title": b.title,
            "Author": b.author,
            "Genre": b.genre_name,
            "Availability": "Available" if b.is_available else "Issued",
        } for b in self.list_books()]
        return pd.DataFrame(rows, columns=BOOK_COLUMNS)

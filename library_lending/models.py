"""
models.py

Book and user records held by the inventory and the user registry.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class Genre(enum.Enum):
    FICTION = "Fiction"
    SCIENCE = "Science"
    HISTORY = "History"
    MANGA = "Manga"
    BIOGRAPHY = "Biography"
    OTHER = "Other"

    @classmethod
    def parse(cls, text: str) -> Tuple[Genre, Optional[str]]:
        """
        Map a free-text genre name onto a member, case-insensitively.

        Returns (genre, label) where label is the stripped input for genres
        outside the closed set and None otherwise.
        """
        g = (text or "").strip()
        for member in cls:
            if member is not cls.OTHER and member.value.lower() == g.lower():
                return member, None
        return cls.OTHER, g or None


@dataclass
class Book:
    """A single title in the inventory."""

    id: int
    title: str
    author: str
    genre: Genre = Genre.OTHER
    genre_label: Optional[str] = None
    is_available: bool = True

    @property
    def genre_name(self) -> str:
        if self.genre is Genre.OTHER and self.genre_label:
            return self.genre_label
        return self.genre.value


@dataclass
class User:
    """A registered borrower and the book IDs they currently hold, in borrow order."""

    id: int
    name: str
    borrowed_books: List[int] = field(default_factory=list)

import pytest

from library_lending import Book, BorrowingService, Genre, Inventory, User, UserRegistry


@pytest.fixture
def inventory():
    inv = Inventory()
    inv.add_book(Book(id=1, title="Test Book", author="Test Author", genre=Genre.MANGA))
    return inv


@pytest.fixture
def registry():
    reg = UserRegistry()
    reg.register_user(User(id=1, name="Test User"))
    return reg


@pytest.fixture
def service():
    return BorrowingService()

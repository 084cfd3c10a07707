import pytest

from library_lending import Book, BookNotFound, DuplicateId, ErrorKind, Genre, Inventory, NotFound


def test_add_book_and_remove_book():
    inventory = Inventory()
    book = Book(id=1, title="Le Garçon et le Héron", author="Hayao Miyazaki", genre=Genre.FICTION)
    book2 = Book(id=2, title="Le Monde de Terpone", author="Ayemou Yvan", genre=Genre.MANGA)

    inventory.add_book(book)
    inventory.add_book(book2)

    assert inventory.get_book(1).author == "Hayao Miyazaki"
    assert len(inventory.list_books()) == 2

    removed = inventory.remove_book(1)
    assert removed == book
    assert 1 not in inventory
    with pytest.raises(BookNotFound):
        inventory.get_book(1)
    assert len(inventory.list_books()) == 1


def test_get_unknown_book_is_not_found():
    inventory = Inventory()
    with pytest.raises(NotFound) as exc:
        inventory.get_book(42)
    assert exc.value.kind is ErrorKind.NOT_FOUND
    assert exc.value.book_id == 42
    assert isinstance(exc.value, LookupError)


def test_remove_unknown_book():
    inventory = Inventory()
    with pytest.raises(BookNotFound):
        inventory.remove_book(7)


def test_add_duplicate_id_keeps_original():
    inventory = Inventory()
    inventory.add_book(Book(id=1, title="First", author="A"))

    with pytest.raises(DuplicateId, match="Book with ID 1 already exists."):
        inventory.add_book(Book(id=1, title="Second", author="B"))

    assert len(inventory) == 1
    assert inventory.get_book(1).title == "First"


def test_update_book_availability_is_idempotent():
    inventory = Inventory()
    inventory.add_book(Book(id=3, title="T", author="A"))

    inventory.update_book_availability(3, False)
    inventory.update_book_availability(3, False)
    assert inventory.get_book(3).is_available is False

    inventory.update_book_availability(3, True)
    assert inventory.get_book(3).is_available is True


def test_update_availability_of_unknown_book():
    with pytest.raises(BookNotFound):
        Inventory().update_book_availability(9, True)


def test_list_books_keeps_insertion_order():
    inventory = Inventory()
    for bid in (5, 2, 9):
        inventory.add_book(Book(id=bid, title=str(bid), author="A"))
    assert [b.id for b in inventory.list_books()] == [5, 2, 9]


def test_genre_parse():
    assert Genre.parse("science") == (Genre.SCIENCE, None)
    assert Genre.parse(" Biography ") == (Genre.BIOGRAPHY, None)
    assert Genre.parse("Poetry") == (Genre.OTHER, "Poetry")
    assert Genre.parse("") == (Genre.OTHER, None)


def test_to_frame_reports_availability():
    inventory = Inventory()
    genre, label = Genre.parse("Poetry")
    inventory.add_book(Book(id=1, title="Odes", author="Keats", genre=genre, genre_label=label))
    inventory.add_book(Book(id=2, title="Cosmos", author="Sagan", genre=Genre.SCIENCE, is_available=False))

    df = inventory.to_frame()

    assert list(df.columns) == ["Book ID", "Title", "Author", "Genre", "Availability"]
    assert df["Genre"].tolist() == ["Poetry", "Science"]
    assert df["Availability"].tolist() == ["Available", "Issued"]


def test_to_frame_empty_inventory():
    df = Inventory().to_frame()
    assert df.empty
    assert "Availability" in df.columns

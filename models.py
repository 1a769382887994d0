from sqlalchemy import Column, Date, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from database import Base


# Pure join table; User is the only side that writes to it.
user_books = Table(
    "user_books",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("book_id", Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
)

BOOK_CONTENT_FIELDS = (
    "genre",
    "author",
    "image",
    "title",
    "subtitle",
    "publisher",
    "year",
    "pages",
    "isbn",
)


def book_content(book) -> tuple:
    """Key that identifies a book by its attributes, ignoring ``id``.

    Works on ORM rows and request bodies alike. Two stored rows with the same
    attributes produce the same key, so collection membership treats them as
    one book.
    """
    return tuple(getattr(book, field) for field in BOOK_CONTENT_FIELDS)


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True)
    genre = Column(String, nullable=True)
    author = Column(String, nullable=False)
    image = Column(String, nullable=False)
    title = Column(String, nullable=False)
    subtitle = Column(String, nullable=False)
    publisher = Column(String, nullable=False)
    year = Column(String, nullable=False)
    pages = Column(Integer, nullable=False)
    isbn = Column(String(32), nullable=False)

    # Read-only reverse side; rows are removed by the FK cascade
    users = relationship("User", secondary=user_books, viewonly=True)

    def __repr__(self):
        return f"<Book(id={self.id}, title={self.title!r}, isbn={self.isbn!r})>"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    birthdate = Column(Date, nullable=True)

    books = relationship("Book", secondary=user_books, order_by=Book.id)

    def add_book(self, book, key=book_content):
        """Hold ``book`` unless a book with the same key is already held."""
        wanted = key(book)
        if any(key(held) == wanted for held in self.books):
            return
        self.books.append(book)

    def remove_book(self, book, key=book_content):
        """Stop holding every book matching ``book``. Absent books are ignored."""
        wanted = key(book)
        for held in [held for held in self.books if key(held) == wanted]:
            self.books.remove(held)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username!r})>"

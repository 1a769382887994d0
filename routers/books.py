from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

import models, schemas
from database import get_db
from resources import ResourceProtocol
from store import Store

router = APIRouter(prefix="/api/books", tags=["Books"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Book not found"}}


def get_books(db: Session = Depends(get_db)) -> ResourceProtocol[models.Book]:
    return ResourceProtocol("Book", Store(db, models.Book))


@router.get("", response_model=list[schemas.BookOut], summary="Return all books")
def list_books(books: ResourceProtocol[models.Book] = Depends(get_books)):
    return books.list()


@router.get(
    "/{book_id}",
    response_model=schemas.BookOut,
    summary="Given an id, return the book",
    responses=NOT_FOUND,
)
def get_book(
    book_id: int = Path(description="Id to find the book"),
    books: ResourceProtocol[models.Book] = Depends(get_books),
):
    return books.get(book_id)


@router.post(
    "",
    response_model=schemas.BookOut,
    status_code=status.HTTP_201_CREATED,
    summary="Given a book, return the stored book",
)
def create_book(
    book: schemas.BookCreate,
    books: ResourceProtocol[models.Book] = Depends(get_books),
):
    return books.create(models.Book(**book.model_dump()))


@router.put(
    "/{book_id}",
    response_model=schemas.BookOut,
    summary="Given an id and a book, return the updated book",
    responses={
        **NOT_FOUND,
        status.HTTP_412_PRECONDITION_FAILED: {"description": "Book id does not match the path"},
    },
)
def update_book(
    book: schemas.BookIn,
    book_id: int = Path(description="Id to find the book"),
    books: ResourceProtocol[models.Book] = Depends(get_books),
):
    replacement = models.Book(id=book_id, **book.model_dump(exclude={"id"}))
    return books.update(book_id, book.id, replacement)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Given an id, delete the book",
    responses=NOT_FOUND,
)
def delete_book(
    book_id: int = Path(description="Id to find the book"),
    books: ResourceProtocol[models.Book] = Depends(get_books),
):
    books.delete(book_id)

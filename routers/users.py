import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

import auth, models, schemas
from database import get_db
from errors import NotFound
from resources import ResourceProtocol
from store import Store

router = APIRouter(prefix="/api/users", tags=["Users"])
logger = logging.getLogger(__name__)


def get_users(db: Session = Depends(get_db)) -> ResourceProtocol[models.User]:
    return ResourceProtocol("User", Store(db, models.User))


def get_book_store(db: Session = Depends(get_db)) -> Store[models.Book]:
    return Store(db, models.Book)


def _resolve_book(store: Store[models.Book], book: schemas.BookIn) -> models.Book:
    # A payload id wins; without one, the first stored book with the same
    # content is used.
    if book.id is not None:
        stored = store.find(book.id)
    else:
        stored = store.find_first(**book.model_dump(exclude={"id"}))

    if stored is None:
        logger.warning("Book %s not found for add-book", book.id)
        raise NotFound("Book", book.id)
    return stored


@router.get("/principal", response_class=PlainTextResponse)
def current_principal(principal: auth.Principal = Depends(auth.get_current_principal)):
    return principal.name


@router.get("", response_model=list[schemas.UserOut])
def list_users(users: ResourceProtocol[models.User] = Depends(get_users)):
    return users.list()


@router.get("/{user_id}", response_model=schemas.UserOut)
def get_user(user_id: int, users: ResourceProtocol[models.User] = Depends(get_users)):
    return users.get(user_id)


@router.post("", response_model=schemas.UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    user: schemas.UserCreate,
    users: ResourceProtocol[models.User] = Depends(get_users),
):
    return users.create(models.User(**user.model_dump()))


# Replaces the account fields; the held books only change through
# add-book and remove-book.
@router.put("/{user_id}", response_model=schemas.UserOut)
def update_user(
    user_id: int,
    user: schemas.UserUpdate,
    users: ResourceProtocol[models.User] = Depends(get_users),
):
    replacement = models.User(id=user_id, **user.model_dump(exclude={"id"}))
    return users.update(user_id, user.id, replacement)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, users: ResourceProtocol[models.User] = Depends(get_users)):
    users.delete(user_id)


@router.patch("/{user_id}/add-book", response_model=schemas.UserOut)
def add_book(
    user_id: int,
    book: schemas.BookIn,
    users: ResourceProtocol[models.User] = Depends(get_users),
    book_store: Store[models.Book] = Depends(get_book_store),
):
    db_user = users.get(user_id)
    db_user.add_book(_resolve_book(book_store, book))

    saved = users.save(db_user)
    logger.info("User %s now holds %s books", user_id, len(saved.books))
    return saved


@router.patch("/{user_id}/remove-book", response_model=schemas.UserOut)
def remove_book(
    user_id: int,
    book: schemas.BookIn,
    users: ResourceProtocol[models.User] = Depends(get_users),
):
    db_user = users.get(user_id)
    db_user.remove_book(book)

    saved = users.save(db_user)
    logger.info("User %s now holds %s books", user_id, len(saved.books))
    return saved

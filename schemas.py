from datetime import date

from pydantic import BaseModel, ConfigDict, Field


# Books
class BookBase(BaseModel):
    genre: str | None = Field(default=None, max_length=100)
    author: str = Field(min_length=1, max_length=255)
    image: str = Field(min_length=1, max_length=2000)
    title: str = Field(min_length=1, max_length=255)
    subtitle: str = Field(max_length=255)
    publisher: str = Field(min_length=1, max_length=255)
    year: str = Field(min_length=1, max_length=16)
    pages: int = Field(ge=0)
    isbn: str = Field(min_length=1, max_length=32)


class BookCreate(BookBase):
    pass


class BookIn(BookBase):
    """Book payload that may name the stored row it refers to."""

    id: int | None = None


class BookOut(BookBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


# Users
class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=100)
    birthdate: date | None = None


class UserCreate(UserBase):
    pass


class UserUpdate(UserBase):
    id: int | None = None


class UserOut(UserBase):
    id: int
    books: list[BookOut] = []

    model_config = ConfigDict(from_attributes=True)

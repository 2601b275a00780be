import os
import pytest

# Set TESTING before any libraryapp imports
os.environ["TESTING"] = "true"

from libraryapp.core.db import session as db, engine, Base
from libraryapp.core.models import Book, BookType, User, UserLoanHistory, UserLoanStatus


@pytest.fixture
def db_session():
    Base.metadata.create_all(engine)
    try:
        yield db
    finally:
        db.remove()
        Base.metadata.drop_all(engine)  # Clean up: drop tables after test


@pytest.fixture
def make_user(db_session):
    def _make_user(name, age=None):
        user = User(name=name, age=age)
        db_session.add(user)
        db_session.commit()
        return user
    return _make_user


@pytest.fixture
def make_book(db_session):
    def _make_book(name, type=BookType.COMPUTER):
        book = Book(name=name, type=type)
        db_session.add(book)
        db_session.commit()
        return book
    return _make_book


@pytest.fixture
def make_history(db_session):
    def _make_history(user, book_name, status=UserLoanStatus.LOANED):
        history = UserLoanHistory(user_id=user.id, book_name=book_name, status=status)
        db_session.add(history)
        db_session.commit()
        return history
    return _make_history

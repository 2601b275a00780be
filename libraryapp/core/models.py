#!/usr/bin/env python

"""
    Book, User & UserLoanHistory models for libraryapp,
    including the lookups the services rely on.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import enum
from sqlalchemy import Column, String, Integer, BigInteger, ForeignKey, Index, text, func
from sqlalchemy import Enum as SQLAlchemyEnum
from sqlalchemy.orm import relationship, joinedload, validates
from libraryapp.core.db import session as db, Base
from libraryapp.core.exceptions import InvalidUserError, LoanNotFoundError


class BookType(enum.Enum):
    COMPUTER = "COMPUTER"
    ECONOMY = "ECONOMY"
    SOCIETY = "SOCIETY"
    LANGUAGE = "LANGUAGE"
    SCIENCE = "SCIENCE"


class UserLoanStatus(enum.Enum):
    LOANED = "LOANED"
    RETURNED = "RETURNED"


class Book(Base):
    __tablename__ = 'books'

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    type = Column(SQLAlchemyEnum(BookType), nullable=False)

    @classmethod
    def find_by_name(cls, name):
        return db.query(cls).filter(cls.name == name).first()

    @classmethod
    def get_stats(cls):
        """Returns (BookType, count) pairs, one per type that has books."""
        return db.query(cls.type, func.count(cls.id)).group_by(cls.type).all()


class User(Base):
    __tablename__ = 'users'

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    age = Column(Integer, nullable=True)

    loan_histories = relationship(
        'UserLoanHistory',
        back_populates='user',
        cascade='all, delete-orphan',
        order_by='UserLoanHistory.id',
    )

    @validates('name')
    def validate_name(self, key, name):
        if not name or not name.strip():
            raise InvalidUserError("User name must not be blank.")
        return name

    @classmethod
    def get(cls, user_id):
        return db.get(cls, user_id)

    @classmethod
    def find_by_name(cls, name):
        return db.query(cls).filter(cls.name == name).first()

    @classmethod
    def find_all_with_histories(cls):
        """Loads every user together with its loan histories using a
        single LEFT OUTER JOIN rather than one query per user.
        """
        return db.query(cls).options(
            joinedload(cls.loan_histories)
        ).order_by(cls.id).all()

    def loan_book(self, book):
        history = UserLoanHistory(book_name=book.name, status=UserLoanStatus.LOANED)
        self.loan_histories.append(history)
        return history


ACTIVE_LOAN_INDEX = 'uq_user_loan_histories_active_book'


class UserLoanHistory(Base):
    __tablename__ = 'user_loan_histories'
    # One active loan per book, also under concurrent requests
    __table_args__ = (
        Index(
            ACTIVE_LOAN_INDEX,
            'book_name',
            unique=True,
            sqlite_where=text("status = 'LOANED'"),
            postgresql_where=text("status = 'LOANED'"),
        ),
    )

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    user_id = Column(BigInteger().with_variant(Integer, "sqlite"),
                     ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    book_name = Column(String(255), nullable=False)
    status = Column(SQLAlchemyEnum(UserLoanStatus), nullable=False,
                    default=UserLoanStatus.LOANED)

    user = relationship('User', back_populates='loan_histories')

    @classmethod
    def find_by_book_name_and_status(cls, book_name, status, user_id=None):
        query = db.query(cls).filter(cls.book_name == book_name, cls.status == status)
        if user_id is not None:
            query = query.filter(cls.user_id == user_id)
        return query.first()

    @classmethod
    def count_by_status(cls, status):
        return db.query(cls).filter(cls.status == status).count()

    @classmethod
    def is_active_loan_conflict(cls, error):
        """True if `error` is a violation of the one-active-loan-per-book index.

        PostgreSQL names the index in its message, SQLite names the column.
        """
        message = str(getattr(error, "orig", error))
        return ACTIVE_LOAN_INDEX in message or f"{cls.__tablename__}.book_name" in message

    @property
    def is_loaned(self):
        return self.status == UserLoanStatus.LOANED

    def do_return(self):
        if not self.is_loaned:
            raise LoanNotFoundError(f"'{self.book_name}' has already been returned.")
        self.status = UserLoanStatus.RETURNED
        return self

#!/usr/bin/env python

"""
    Book operations for libraryapp: registering books,
    loaning & returning them, and per-type statistics.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from libraryapp.core.db import session as db
from libraryapp.core.models import Book, User, UserLoanHistory, UserLoanStatus
from libraryapp.core.exceptions import (
    BookAlreadyLoanedError,
    BookNotFoundError,
    DatabaseInsertError,
    LoanNotFoundError,
    UserNotFoundError,
)
from libraryapp.schemas.book import (
    BookRequest,
    BookLoanRequest,
    BookReturnRequest,
    BookStatResponse,
)

logger = logging.getLogger(__name__)


class BookService:

    ALREADY_LOANED = "book already on loan"

    @classmethod
    def save_book(cls, request: BookRequest) -> Book:
        book = Book(name=request.name, type=request.type)
        try:
            db.add(book)
            db.commit()
        except Exception as e:
            db.rollback()
            raise DatabaseInsertError(f"Failed to add book to db: {str(e)}.")
        logger.info(f"Registered book '{book.name}' ({book.type.value})")
        return book

    @classmethod
    def loan_book(cls, request: BookLoanRequest) -> UserLoanHistory:
        """
        Loan a book to a user.

        Raises:
            UserNotFoundError: If no user has `request.user_name`.
            BookNotFoundError: If no book has `request.book_name`.
            BookAlreadyLoanedError: If the book is currently on loan.
        """
        user = User.find_by_name(request.user_name)
        if not user:
            raise UserNotFoundError(f"User '{request.user_name}' not found.")

        book = Book.find_by_name(request.book_name)
        if not book:
            raise BookNotFoundError(f"Book '{request.book_name}' not found.")

        if UserLoanHistory.find_by_book_name_and_status(book.name, UserLoanStatus.LOANED):
            logger.warning(f"Rejected loan of '{book.name}' to '{user.name}': already on loan")
            raise BookAlreadyLoanedError(cls.ALREADY_LOANED)

        history = user.loan_book(book)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            # Another request loaned the same book between check & commit
            if UserLoanHistory.is_active_loan_conflict(e):
                raise BookAlreadyLoanedError(cls.ALREADY_LOANED)
            raise DatabaseInsertError(f"Failed to create loan record: {str(e)}.")
        except Exception as e:
            db.rollback()
            raise DatabaseInsertError(f"Failed to create loan record: {str(e)}.")
        logger.info(f"Loaned '{book.name}' to '{user.name}'")
        return history

    @classmethod
    def return_book(cls, request: BookReturnRequest) -> UserLoanHistory:
        user = User.find_by_name(request.user_name)
        if not user:
            raise UserNotFoundError(f"User '{request.user_name}' not found.")

        history = UserLoanHistory.find_by_book_name_and_status(
            request.book_name, UserLoanStatus.LOANED, user_id=user.id)
        if not history:
            raise LoanNotFoundError(
                f"User '{user.name}' has no active loan for '{request.book_name}'.")

        history.do_return()
        try:
            db.commit()
        except Exception as e:
            db.rollback()
            raise DatabaseInsertError(f"Failed to return loan: {str(e)}.")
        logger.info(f"'{user.name}' returned '{history.book_name}'")
        return history

    @classmethod
    def count_loaned_book(cls) -> int:
        return UserLoanHistory.count_by_status(UserLoanStatus.LOANED)

    @classmethod
    def get_book_statistics(cls) -> List[BookStatResponse]:
        return [
            BookStatResponse(type=book_type, count=count)
            for book_type, count in Book.get_stats()
        ]

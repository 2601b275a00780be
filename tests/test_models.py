#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_models
    ~~~~~~~~~~~~~~~~~

    This module tests model lookups, the loan state machine
    and the one-active-loan-per-book index.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from libraryapp.core.models import Book, BookType, User, UserLoanHistory, UserLoanStatus
from libraryapp.core.exceptions import LoanNotFoundError


def test_loan_history_state_machine(db_session, make_user, make_book):
    """Test a history goes LOANED -> RETURNED once and never back."""
    user = make_user("Alice")
    history = user.loan_book(make_book("Dune"))
    assert history.is_loaned

    history.do_return()
    assert history.status == UserLoanStatus.RETURNED

    with pytest.raises(LoanNotFoundError):
        history.do_return()

def test_one_active_loan_per_book_index(db_session, make_user, make_history):
    """Test the database itself refuses a second LOANED row for a book."""
    alice = make_user("Alice")
    bob = make_user("Bob")
    make_history(alice, "Dune")

    with pytest.raises(IntegrityError) as excinfo:
        make_history(bob, "Dune")
    db_session.rollback()
    assert UserLoanHistory.is_active_loan_conflict(excinfo.value)

    # Returned rows do not count against the index
    make_history(alice, "Foundation", UserLoanStatus.RETURNED)
    make_history(bob, "Foundation", UserLoanStatus.RETURNED)
    make_history(bob, "Foundation")
    assert UserLoanHistory.count_by_status(UserLoanStatus.LOANED) == 2

def test_lookups_return_none_on_miss(db_session):
    assert Book.find_by_name("Missing") is None
    assert User.find_by_name("Nobody") is None
    assert User.get(1) is None
    assert UserLoanHistory.find_by_book_name_and_status("Missing", UserLoanStatus.LOANED) is None

def test_get_stats_only_lists_types_with_books(db_session, make_book):
    make_book("A", BookType.LANGUAGE)

    assert [tuple(row) for row in Book.get_stats()] == [(BookType.LANGUAGE, 1)]

def test_get_many_pages_by_id(db_session, make_user):
    for name in ("A", "B", "C", "D"):
        make_user(name)

    assert [u.name for u in User.get_many()] == ["A", "B", "C", "D"]
    assert [u.name for u in User.get_many(offset=1, limit=2)] == ["B", "C"]

#!/usr/bin/env python

"""
    User operations for libraryapp: registering, listing,
    renaming & deleting users, and the per-user loan history view.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from typing import List, Optional
from libraryapp.core.db import session as db
from libraryapp.core.models import User
from libraryapp.core.exceptions import DatabaseInsertError, UserNotFoundError
from libraryapp.schemas.user import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    UserLoanHistoryResponse,
)

logger = logging.getLogger(__name__)


class UserService:

    @classmethod
    def _commit(cls, action: str):
        try:
            db.commit()
        except Exception as e:
            db.rollback()
            raise DatabaseInsertError(f"Failed to {action}: {str(e)}.")

    @classmethod
    def save_user(cls, request: UserCreateRequest) -> User:
        user = User(name=request.name, age=request.age)
        db.add(user)
        cls._commit("add user to db")
        logger.info(f"Registered user '{user.name}'")
        return user

    @classmethod
    def get_users(cls, offset: Optional[int] = None, limit: Optional[int] = None) -> List[UserResponse]:
        return [
            UserResponse.model_validate(user)
            for user in User.get_many(offset=offset, limit=limit)
        ]

    @classmethod
    def update_user_name(cls, request: UserUpdateRequest) -> User:
        user = User.get(request.id)
        if not user:
            raise UserNotFoundError(f"User #{request.id} not found.")
        old_name, user.name = user.name, request.name
        cls._commit("rename user")
        logger.info(f"Renamed user #{user.id} '{old_name}' -> '{user.name}'")
        return user

    @classmethod
    def delete_user(cls, name: str) -> None:
        """Deletes the user named `name` along with its loan histories."""
        user = User.find_by_name(name)
        if not user:
            raise UserNotFoundError(f"User '{name}' not found.")
        db.delete(user)
        cls._commit("delete user")
        logger.info(f"Deleted user '{name}'")

    @classmethod
    def get_user_loan_histories(cls) -> List[UserLoanHistoryResponse]:
        return [
            UserLoanHistoryResponse.of(user)
            for user in User.find_all_with_histories()
        ]

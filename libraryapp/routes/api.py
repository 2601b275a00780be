#!/usr/bin/env python

"""
    API routes for libraryapp,
    including the user and book endpoints.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query, status
from libraryapp.core.books import BookService
from libraryapp.core.users import UserService
from libraryapp.core.exceptions import (
    BookAlreadyLoanedError,
    BookNotFoundError,
    DatabaseInsertError,
    InvalidUserError,
    LoanNotFoundError,
    UserNotFoundError,
)
from libraryapp.schemas.book import (
    BookRequest,
    BookLoanRequest,
    BookReturnRequest,
    BookStatResponse,
)
from libraryapp.schemas.user import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    UserLoanHistoryResponse,
)

router = APIRouter()


@router.post('/user', status_code=status.HTTP_200_OK)
async def save_user(request: UserCreateRequest):
    try:
        UserService.save_user(request)
    except InvalidUserError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseInsertError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get('/user', response_model=List[UserResponse])
async def get_users(offset: Optional[int] = Query(None, ge=0), limit: Optional[int] = Query(None, ge=0)):
    return UserService.get_users(offset=offset, limit=limit)

@router.put('/user', status_code=status.HTTP_200_OK)
async def update_user_name(request: UserUpdateRequest):
    try:
        UserService.update_user_name(request)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidUserError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseInsertError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.delete('/user', status_code=status.HTTP_200_OK)
async def delete_user(name: str):
    try:
        UserService.delete_user(name)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseInsertError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get('/user/loan', response_model=List[UserLoanHistoryResponse])
async def get_user_loan_histories():
    return UserService.get_user_loan_histories()


@router.post('/book', status_code=status.HTTP_200_OK)
async def save_book(request: BookRequest):
    try:
        BookService.save_book(request)
    except DatabaseInsertError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.post('/book/loan', status_code=status.HTTP_200_OK)
async def loan_book(request: BookLoanRequest):
    try:
        BookService.loan_book(request)
    except (UserNotFoundError, BookNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BookAlreadyLoanedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except DatabaseInsertError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.put('/book/return', status_code=status.HTTP_200_OK)
async def return_book(request: BookReturnRequest):
    try:
        BookService.return_book(request)
    except (UserNotFoundError, LoanNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseInsertError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get('/book/loan', response_model=int)
async def count_loaned_book():
    return BookService.count_loaned_book()

@router.get('/book/stat', response_model=List[BookStatResponse])
async def get_book_statistics():
    return BookService.get_book_statistics()

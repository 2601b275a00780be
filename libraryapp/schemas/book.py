#!/usr/bin/env python
"""
    Book Schemas for libraryapp,
    request bodies for registering, loaning & returning books
    and the per-type statistics response.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from pydantic import BaseModel, Field
from libraryapp.core.models import BookType

class BookRequest(BaseModel):
    name: str = Field(..., min_length=1)
    type: BookType

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Effective Java",
                "type": "COMPUTER"
            }
        }

class BookLoanRequest(BaseModel):
    user_name: str
    book_name: str

class BookReturnRequest(BaseModel):
    user_name: str
    book_name: str

class BookStatResponse(BaseModel):
    type: BookType
    count: int

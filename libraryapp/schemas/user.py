from pydantic import BaseModel, Field
from typing import List, Optional
from libraryapp.core.models import UserLoanStatus

class UserCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    age: Optional[int] = Field(None, ge=0)

class UserUpdateRequest(BaseModel):
    id: int
    name: str = Field(..., min_length=1)

class UserResponse(BaseModel):
    id: int
    name: str
    age: Optional[int] = None

    class Config:
        from_attributes = True

class BookHistoryResponse(BaseModel):
    name: str
    status: UserLoanStatus

    @classmethod
    def of(cls, history):
        return cls(name=history.book_name, status=history.status)

class UserLoanHistoryResponse(BaseModel):
    name: str
    books: List[BookHistoryResponse] = []

    @classmethod
    def of(cls, user):
        return cls(
            name=user.name,
            books=[BookHistoryResponse.of(h) for h in user.loan_histories]
        )

"""Response envelopes: every API answer is either a Success or a Failure."""
from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

# primary keys are signed 64-bit integers in every supported backend
MAX_ID = 2**63 - 1
RowId = Annotated[int, Field(ge=1, le=MAX_ID)]


class Success(BaseModel, Generic[T]):
    success: Literal[True] = True
    data: T


class SuccessList(BaseModel, Generic[T]):
    success: Literal[True] = True
    data: list[T]
    count: int


class Failure(BaseModel):
    success: Literal[False] = False
    error: str
    code: str

"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: takes a request model, returns a response model.

    Use cases orchestrate domain services and raise domain errors; routes
    translate those errors into HTTP responses.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass

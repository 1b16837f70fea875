"""Product base model shared by every concrete product type."""
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict


class Product(BaseModel, ABC):
    """Base class for all products created by a family factory.

    Products are plain value objects: two products are equal when their
    fields are equal, regardless of identity.
    """
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="forbid",
    )

    family: str
    role: str

    @abstractmethod
    def describe(self) -> str:
        """Human readable description of the product."""

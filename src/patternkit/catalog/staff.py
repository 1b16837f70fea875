"""Employee payloads for organisation trees."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    position: Optional[str] = None

    def describe(self) -> str:
        if self.position:
            return f"{self.name} ({self.position})"
        return self.name

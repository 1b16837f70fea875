"""Ordered step configuration for the stepwise assembler."""
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from patternkit.domain.core.exceptions import ValidationError
from patternkit.domain.core.value_objects import validate_name


@dataclass(frozen=True)
class BuildSpec:
    """Non-empty ordered sequence of step names."""
    steps: Tuple[str, ...]

    def __post_init__(self):
        steps = tuple(self.steps)
        if not steps:
            raise ValidationError("A build spec needs at least one step")
        for step in steps:
            validate_name("Step name", step)
        object.__setattr__(self, "steps", steps)

    @classmethod
    def of(cls, steps: Union["BuildSpec", Iterable[str]]) -> "BuildSpec":
        if isinstance(steps, BuildSpec):
            return steps
        if isinstance(steps, str):
            raise ValidationError("Step order must be a sequence of step names, not a string")
        return cls(tuple(steps))

    def __iter__(self) -> Iterator[str]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return " -> ".join(self.steps)

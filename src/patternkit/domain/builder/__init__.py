"""Stepwise assembly of products through a builder."""

from .assembler import StepwiseAssembler
from .build_spec import BuildSpec
from .builder import Builder
from .exceptions import StepFailedError

__all__ = ["StepwiseAssembler", "BuildSpec", "Builder", "StepFailedError"]

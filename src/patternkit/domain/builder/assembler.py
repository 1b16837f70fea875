"""Stepwise assembler - drives a builder through a fixed step order.

The assembler plays the director role: it knows the order of steps but
nothing about the product being assembled.
"""
from typing import Any, Callable, Iterable, Optional, Union

from patternkit.domain.builder.build_spec import BuildSpec
from patternkit.domain.builder.exceptions import StepFailedError
from patternkit.helpers.logger import get_logger

_RESERVED_NAMES = ("get_product", "reset")


def resolve_step(builder: Any, name: str) -> Callable[[], Any]:
    """
    Resolve a step name to the builder's bound method.

    Any object works as a builder; subclassing ``Builder`` is not required.

    Raises:
        AttributeError: If the builder has no such step, or the name is
            private or reserved
    """
    if name.startswith("_") or name in _RESERVED_NAMES:
        raise AttributeError(f"'{name}' is not a build step of {type(builder).__name__}")
    method = getattr(builder, name)
    if not callable(method):
        raise AttributeError(f"'{name}' is not a build step of {type(builder).__name__}")
    return method


class StepwiseAssembler:
    """Runs builder steps in order and returns the finished product."""

    def __init__(self, default_steps: Optional[Union[BuildSpec, Iterable[str]]] = None):
        """
        Initialize the assembler.

        Args:
            default_steps: Step order used when ``run_steps`` is called without one
        """
        self._default_steps = BuildSpec.of(default_steps) if default_steps is not None else None
        self.logger = get_logger(__name__)

    @property
    def default_steps(self) -> Optional[BuildSpec]:
        return self._default_steps

    def run_steps(self, builder: Any,
                  step_order: Optional[Union[BuildSpec, Iterable[str]]] = None) -> Any:
        """
        Invoke the builder's steps in order, then return ``get_product()``.

        Running steps again on the same builder overwrites earlier values.

        Args:
            builder: Any object with the named step methods and ``get_product``
            step_order: Steps to run; defaults to the assembler's default steps

        Returns:
            The product returned by ``builder.get_product()``

        Raises:
            StepFailedError: If a step is missing or raises; no product is returned
            ValidationError: If no step order is available
        """
        if step_order is None:
            step_order = self._default_steps
        spec = BuildSpec.of(step_order if step_order is not None else ())

        for step in spec:
            try:
                resolve_step(builder, step)()
            except Exception as e:
                self.logger.error(
                    "Build step failed",
                    builder=type(builder).__name__,
                    step=step,
                    error=str(e),
                )
                raise StepFailedError(step, e) from e

        product = builder.get_product()
        self.logger.debug("Assembled product", builder=type(builder).__name__, steps=str(spec))
        return product

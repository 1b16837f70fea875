"""Builder capability interface."""
from abc import ABC, abstractmethod
from typing import Any


class Builder(ABC):
    """Exposes one method per build step plus ``get_product``.

    Step methods take no arguments and mutate the in-progress product. Calling
    them again overwrites earlier values. ``get_product`` called before any
    step returns the product in its unset state.

    Subclassing is optional: the assembler accepts any object with the step
    methods and ``get_product``.
    """

    @abstractmethod
    def get_product(self) -> Any:
        """Return the product assembled so far."""

"""Family Registry - Registry pattern for product family factories.

Maps a family name to the factory that builds one product per role, so that
callers pick a family by name and always receive a consistent set of
products without knowing the concrete product types.
"""

from typing import Dict, List, Tuple
import threading

from patternkit.domain.core.exceptions import InvariantViolationError, ValidationError
from patternkit.domain.core.value_objects import Role, validate_name
from patternkit.domain.family import (
    DuplicateFamilyError,
    FamilyConstructionError,
    FamilyFactory,
    Product,
    ProductFamily,
    UnknownFamilyError,
)
from patternkit.helpers.logger import get_logger


class FamilyRegistration:
    """Container for family registration information."""

    def __init__(self, family: str, factory: FamilyFactory, roles: Tuple[Role, ...]):
        """
        Initialize family registration.

        Args:
            family: Family name (e.g., 'modern', 'victorian')
            factory: Factory producing the family's products
            roles: Roles declared by the factory at registration time
        """
        self.family = family
        self.factory = factory
        self.roles = roles

    def __repr__(self) -> str:
        return f"FamilyRegistration(family='{self.family}', roles={[r.name for r in self.roles]})"


class FamilyRegistry:
    """
    Registry for product family factories.

    Registration is expected to happen once at startup; ``create_family`` may
    then be called any number of times and never modifies registry state.
    """

    def __init__(self):
        """Initialize family registry."""
        self._registrations: Dict[str, FamilyRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

        self.logger.debug("Family registry initialized")

    def register_family(self, name: str, factory: FamilyFactory) -> None:
        """
        Register a family name with its factory.

        Args:
            name: Family name
            factory: Factory producing one product per declared role

        Raises:
            DuplicateFamilyError: If the family name is already registered
            ValidationError: If the name or the factory's roles are invalid
        """
        validate_name("Family name", name)
        if not isinstance(factory, FamilyFactory):
            raise ValidationError(f"Factory for family '{name}' must be a FamilyFactory")

        roles = tuple(Role.of(role) for role in factory.roles)
        if not roles:
            raise ValidationError(f"Factory for family '{name}' declares no roles")
        if len(set(roles)) != len(roles):
            raise ValidationError(f"Factory for family '{name}' declares duplicate roles")

        with self._registry_lock:
            if name in self._registrations:
                self.logger.error("Duplicate family registration", family=name)
                raise DuplicateFamilyError(name)

            registration = FamilyRegistration(family=name, factory=factory, roles=roles)
            self._registrations[name] = registration

        self.logger.info("Registered family", family=name)
        self.logger.debug("Family registration", registration=repr(registration))

    def create_family(self, name: str) -> ProductFamily:
        """
        Create every product of a family.

        Either all roles are built or none are returned.

        Args:
            name: Family name

        Returns:
            Bundle with one product per role, all tagged with ``name``

        Raises:
            UnknownFamilyError: If the family is not registered
            FamilyConstructionError: If any role fails to construct
        """
        registration = self._get_registration(name)

        products: Dict[Role, Product] = {}
        for role in registration.roles:
            try:
                product = registration.factory.create(role)
                self._check_product(name, role, product)
            except Exception as e:
                self.logger.error(
                    "Failed to construct family",
                    family=name,
                    role=role.name,
                    error=str(e),
                )
                raise FamilyConstructionError(name, role.name, e) from e
            products[role] = product

        self.logger.debug("Created family", family=name, roles=[r.name for r in products])
        return ProductFamily(name, products)

    def get_roles(self, name: str) -> List[str]:
        """
        Get the role names a family produces, in creation order.

        Raises:
            UnknownFamilyError: If the family is not registered
        """
        return [role.name for role in self._get_registration(name).roles]

    def get_registered_families(self) -> List[str]:
        """
        Get list of registered family names.

        Returns:
            Sorted list of family names
        """
        with self._registry_lock:
            return sorted(self._registrations)

    def is_registered(self, name: str) -> bool:
        """
        Check if a family is registered.

        Args:
            name: Family name to check

        Returns:
            True if the family is registered, False otherwise
        """
        with self._registry_lock:
            return name in self._registrations

    def unregister(self, name: str) -> None:
        """
        Remove a family registration.

        Raises:
            UnknownFamilyError: If the family is not registered
        """
        with self._registry_lock:
            if name not in self._registrations:
                raise UnknownFamilyError(name, sorted(self._registrations))
            del self._registrations[name]
        self.logger.info("Unregistered family", family=name)

    def clear_registrations(self) -> None:
        """
        Clear all family registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Cleared all family registrations")

    def _get_registration(self, name: str) -> FamilyRegistration:
        """
        Get family registration for the given name.

        Raises:
            UnknownFamilyError: If the family is not registered
        """
        with self._registry_lock:
            if name not in self._registrations:
                raise UnknownFamilyError(name, sorted(self._registrations))

            return self._registrations[name]

    @staticmethod
    def _check_product(family: str, role: Role, product: object) -> None:
        """Reject products that would break family consistency."""
        if not isinstance(product, Product):
            raise InvariantViolationError(
                f"Factory returned {type(product).__name__} for role '{role}', expected a Product"
            )
        if product.family != family:
            raise InvariantViolationError(
                f"Product for role '{role}' is tagged '{product.family}', expected '{family}'"
            )
        if product.role != role.name:
            raise InvariantViolationError(
                f"Product for role '{role}' reports role '{product.role}'"
            )

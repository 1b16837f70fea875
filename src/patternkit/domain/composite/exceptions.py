from patternkit.domain.core.exceptions import DomainException


class TreeStructureError(DomainException):
    """Base class for rejected tree mutations. The tree is left unchanged."""
    pass


class CycleError(TreeStructureError):
    """Raised when adding a child would make a container its own descendant."""
    def __init__(self, container_label: str, child_name: str):
        super().__init__(
            f"Adding '{child_name}' to '{container_label}' would create a cycle"
        )
        self.container_label = container_label
        self.child_name = child_name


class NotAContainerError(TreeStructureError):
    """Raised when a child operation targets a leaf."""
    def __init__(self, node_name: str):
        super().__init__(f"'{node_name}' is a leaf and cannot hold children")
        self.node_name = node_name

"""Toolkit bootstrap - wires registries, assembler, configuration and logging."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

from patternkit.config import ConfigurationManager, ToolkitConfig
from patternkit.domain.builder import Builder, BuildSpec, StepwiseAssembler
from patternkit.domain.composite import Node, describe
from patternkit.domain.family import FamilyFactory, ProductFamily
from patternkit.domain.prototype import Prototype
from patternkit.helpers.logger import get_logger, setup_logging
from patternkit.infrastructure.registry import FamilyRegistry, TemplateRegistry


class Toolkit:
    """Composition root owning one of each registry and the assembler.

    Families and templates are meant to be registered once, right after
    construction, and only read afterwards.
    """

    def __init__(self, config: Optional[ToolkitConfig] = None) -> None:
        """Initialize the instance."""
        self.config = config if config is not None else ToolkitConfig()
        self.families = FamilyRegistry()
        self.templates = TemplateRegistry()
        self.assembler = StepwiseAssembler(default_steps=self.config.builder.default_steps)
        self.logger = get_logger(__name__)

    def register_family(self, name: str, factory: FamilyFactory) -> None:
        self.families.register_family(name, factory)

    def create_family(self, name: str) -> ProductFamily:
        return self.families.create_family(name)

    def register_template(self, key: str, template: Prototype) -> None:
        self.templates.register_template(key, template)

    def clone(self, key: str) -> Prototype:
        return self.templates.clone(key)

    def run_steps(self, builder: Builder,
                  step_order: Optional[Union[BuildSpec, Iterable[str]]] = None) -> Any:
        return self.assembler.run_steps(builder, step_order)

    def describe(self, node: Node) -> str:
        """Describe a tree using the configured indentation."""
        return describe(node, indent=self.config.composite.indent_unit)

    def register_catalog(self) -> None:
        """Register the sample furniture families and document templates."""
        from patternkit.catalog import Author, Document, register_furniture_families

        register_furniture_families(self.families)

        report = Document(title="Quarterly Report", author=Author(name="Finance Team"))
        report.add_section("Summary")
        report.add_section("Figures")
        report.tags.append("report")
        self.templates.register_template("report", report)

        letter = Document(title="Cover Letter", author=Author(name="Human Resources"))
        letter.add_section("Greeting", "Dear applicant,")
        letter.tags.append("letter")
        self.templates.register_template("letter", letter)

        self.logger.info(
            "Registered sample catalog",
            families=self.families.get_registered_families(),
            templates=self.templates.get_registered_templates(),
        )


def create_toolkit(config: Optional[ToolkitConfig] = None,
                   overrides: Optional[Dict[str, Any]] = None,
                   register_catalog: bool = False) -> Toolkit:
    """
    Build a toolkit and configure logging.

    Args:
        config: Ready configuration; loaded through ConfigurationManager if None
        overrides: Configuration overrides applied when ``config`` is None
        register_catalog: Register the sample families and templates

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if config is None:
        config = ConfigurationManager(overrides).get_config()
    setup_logging(config.logging)

    toolkit = Toolkit(config)
    if register_catalog:
        toolkit.register_catalog()
    return toolkit

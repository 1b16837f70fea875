import pytest
from datetime import date

from patternkit.catalog import Author, Document, register_furniture_families
from patternkit.domain.builder import StepwiseAssembler
from patternkit.domain.composite import Container, Leaf
from patternkit.infrastructure.registry import FamilyRegistry, TemplateRegistry


@pytest.fixture
def family_registry():
    """Registry with the modern and victorian furniture families."""
    registry = FamilyRegistry()
    register_furniture_families(registry)
    return registry


@pytest.fixture
def report_template():
    report = Document(
        title="Quarterly Report",
        author=Author(name="Finance Team", email="finance@example.com"),
        created=date(2024, 1, 15),
        tags=["report", "finance"],
        metadata={"department": "finance"},
    )
    report.add_section("Summary", "Revenue grew.")
    report.add_section("Figures", "Table 1", "Table 2")
    return report


@pytest.fixture
def template_registry(report_template):
    registry = TemplateRegistry()
    registry.register_template("report", report_template)
    return registry


@pytest.fixture
def assembler():
    return StepwiseAssembler()


@pytest.fixture
def org_tree():
    """Eve -> (David -> (Alice, Bob), Charlie)."""
    eve = Container("Eve")
    david = Container("David")
    david.add(Leaf("Alice"))
    david.add(Leaf("Bob"))
    eve.add(david)
    eve.add(Leaf("Charlie"))
    return eve

"""End-to-end scenarios through the toolkit composition root."""

import logging

import pytest
import structlog

from patternkit import Toolkit, create_toolkit
from patternkit.catalog import Employee, MEAL_STEPS, Meal, VegMealBuilder, VictorianSofa
from patternkit.config import ToolkitConfig
from patternkit.domain.composite import Container, CycleError, Leaf, add_child, count
from patternkit.domain.core.exceptions import ConfigurationError, DomainException
from patternkit.domain.family import UnknownFamilyError
from patternkit.domain.prototype import UnknownTemplateError


@pytest.fixture
def toolkit():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield create_toolkit(register_catalog=True)
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.integration
class TestEndToEnd:
    """Scenarios combining families, builders, templates and trees."""

    def test_furniture_scenario(self, toolkit):
        bundle = toolkit.create_family("modern")

        assert bundle["chair"].describe() == "Sitting on a modern chair."
        assert not isinstance(bundle["sofa"], VictorianSofa)

    def test_catalog_registrations(self, toolkit):
        assert toolkit.families.get_registered_families() == ["modern", "victorian"]
        assert toolkit.templates.get_registered_templates() == ["letter", "report"]

    def test_meal_with_configured_default_steps(self, toolkit):
        meal = toolkit.run_steps(VegMealBuilder())
        assert meal == Meal(main_course="Veggie Burger", side_dish="Fries", drink="Juice")

    def test_cloned_templates_are_independent(self, toolkit):
        first = toolkit.clone("report")
        second = toolkit.clone("report")

        first.sections.clear()

        assert len(second.sections) == 2
        assert len(toolkit.clone("report").sections) == 2

    def test_org_chart_with_products_as_payloads(self, toolkit):
        eve = Container("Eve")
        david = Container("David")
        add_child(david, Leaf(Employee(name="Alice")))
        add_child(david, Leaf(Employee(name="Bob")))
        add_child(eve, david)
        add_child(eve, Leaf(Employee(name="Charlie")))

        office = Container("Office")
        bundle = toolkit.create_family("victorian")
        for role in bundle:
            add_child(office, Leaf(bundle[role]))
        add_child(office, Leaf(toolkit.run_steps(VegMealBuilder(), MEAL_STEPS)))
        add_child(office, Leaf(toolkit.clone("letter")))
        add_child(eve, office)

        lines = toolkit.describe(eve).splitlines()
        assert len(lines) == count(eve) == 10
        assert lines[0] == "Eve"
        assert lines[2] == "    Alice"
        assert "    Sitting on a victorian chair." in lines
        assert "    Meal: Veggie Burger, Fries, Juice" in lines
        assert "    Cover Letter by Human Resources (1 sections)" in lines

        with pytest.raises(CycleError):
            add_child(office, eve)
        assert count(eve) == 10

    def test_errors_share_a_base_class(self, toolkit):
        with pytest.raises(DomainException):
            toolkit.create_family("art-deco")
        with pytest.raises(UnknownFamilyError):
            toolkit.create_family("art-deco")
        with pytest.raises(UnknownTemplateError):
            toolkit.clone("invoice")


def test_configured_indent():
    config = ToolkitConfig.model_validate({"composite": {"indent": 1, "indent_char": "-"}})
    toolkit = Toolkit(config)

    root = Container("root")
    root.add(Leaf("child"))

    assert toolkit.describe(root) == "root\n-child"


def test_toolkit_without_catalog_is_empty():
    toolkit = Toolkit()
    assert toolkit.families.get_registered_families() == []
    assert toolkit.templates.get_registered_templates() == []


def test_create_toolkit_rejects_invalid_overrides():
    with pytest.raises(ConfigurationError):
        create_toolkit(overrides={"builder": {"default_steps": []}})


def test_create_toolkit_rejects_malformed_default_step():
    with pytest.raises(ConfigurationError):
        create_toolkit(overrides={"builder": {"default_steps": ["side dish"]}})

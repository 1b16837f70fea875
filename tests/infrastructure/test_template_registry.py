"""Tests for the template registry and document prototypes."""

import pytest

from patternkit.catalog import Author, Document, ModernChair
from patternkit.domain.core.exceptions import InvariantViolationError, ValidationError
from patternkit.domain.prototype import (
    DuplicateTemplateError,
    Prototype,
    TemplateValidationError,
    UnknownTemplateError,
)
from patternkit.infrastructure.registry import TemplateRegistry


class SelfReturningPrototype(Prototype):
    def clone(self):
        return self


class TestTemplateRegistry:
    """Test template registry functionality."""

    def test_clone_is_equal_but_distinct(self, template_registry, report_template):
        first = template_registry.clone("report")
        second = template_registry.clone("report")

        assert first == second == report_template
        assert first is not second
        assert first is not report_template

    def test_nested_objects_are_not_shared(self, template_registry, report_template):
        clone = template_registry.clone("report")

        assert clone.author is not report_template.author
        assert clone.sections is not report_template.sections
        for copied, original in zip(clone.sections, report_template.sections):
            assert copied is not original
            assert copied.paragraphs is not original.paragraphs
        assert clone.tags is not report_template.tags
        assert clone.metadata is not report_template.metadata

    def test_mutating_clone_leaves_template_and_siblings(self, template_registry, report_template):
        first = template_registry.clone("report")
        second = template_registry.clone("report")

        first.title = "Annual Report"
        first.author.name = "Board"
        first.sections[0].paragraphs.append("Costs fell.")
        first.add_section("Outlook")
        first.tags.append("draft")
        first.metadata["status"] = "draft"

        assert report_template.title == "Quarterly Report"
        assert report_template.author.name == "Finance Team"
        assert report_template.sections[0].paragraphs == ["Revenue grew."]
        assert len(report_template.sections) == 2
        assert report_template.tags == ["report", "finance"]
        assert "status" not in report_template.metadata
        assert second == report_template
        assert template_registry.clone("report") == report_template

    def test_immutable_fields_may_be_shared(self, template_registry, report_template):
        clone = template_registry.clone("report")
        assert clone.created == report_template.created

    def test_duplicate_template_rejected(self, template_registry, report_template):
        with pytest.raises(DuplicateTemplateError) as exc:
            template_registry.register_template(
                "report", Document(title="Other", author=Author(name="Someone"))
            )

        assert exc.value.key == "report"
        assert template_registry.clone("report") == report_template

    def test_unknown_template(self, template_registry):
        with pytest.raises(UnknownTemplateError) as exc:
            template_registry.clone("invoice")

        assert exc.value.key == "invoice"
        assert exc.value.available == ["report"]

    def test_non_prototype_rejected(self):
        registry = TemplateRegistry()

        with pytest.raises(TemplateValidationError):
            registry.register_template("chair", ModernChair())
        assert not registry.is_registered("chair")

    def test_invalid_key_rejected(self, report_template):
        with pytest.raises(ValidationError):
            TemplateRegistry().register_template("my report", report_template)

    def test_clone_returning_template_is_rejected(self):
        registry = TemplateRegistry()
        registry.register_template("broken", SelfReturningPrototype())

        with pytest.raises(InvariantViolationError):
            registry.clone("broken")

    def test_registration_queries(self, template_registry, report_template):
        template_registry.register_template("letter", report_template.clone())

        assert template_registry.get_registered_templates() == ["letter", "report"]
        assert template_registry.is_registered("letter")

        template_registry.unregister("letter")
        assert not template_registry.is_registered("letter")
        with pytest.raises(UnknownTemplateError):
            template_registry.unregister("letter")

    def test_clear_registrations(self, template_registry):
        template_registry.clear_registrations()
        assert template_registry.get_registered_templates() == []

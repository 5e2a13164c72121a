"""Tests for principle and variant value objects."""
import pytest

from solid_showcase.domain.base.exceptions import DemoNotFoundError, ValidationError
from solid_showcase.domain.base.value_objects import Principle, Variant


class TestPrinciple:
    def test_from_string_ignores_case_and_whitespace(self):
        assert Principle.from_string(" SRP ") is Principle.SRP

    def test_from_string_unknown(self):
        with pytest.raises(DemoNotFoundError) as exc_info:
            Principle.from_string("kiss")
        assert exc_info.value.principle == "kiss"
        assert "srp" in exc_info.value.available

    def test_full_names(self):
        assert Principle.DIP.full_name == "Dependency Inversion Principle"
        assert all(p.full_name.endswith("Principle") for p in Principle)


class TestVariant:
    def test_both_expands_violation_first(self):
        assert Variant.BOTH.expand() == [Variant.BAD, Variant.GOOD]

    def test_concrete_variant_expands_to_itself(self):
        assert Variant.GOOD.expand() == [Variant.GOOD]

    def test_from_string_unknown(self):
        with pytest.raises(ValidationError, match="Unknown variant"):
            Variant.from_string("ugly")

"""Tests for declarative constraints and the shared validator."""

from __future__ import annotations

from eden.domain.constraints import (
    ConstraintViolation,
    MaxLength,
    Range,
    Required,
    format_violations,
    get_validator,
)
from eden.domain.entities import Comment, Product, User


def _valid_user(**overrides: object) -> User:
    fields: dict[str, object] = {
        "name": "Alice",
        "user_name": "alice",
        "cpf": "11111111111",
        "email": "alice@example.com",
        "password": "hash",
    }
    fields.update(overrides)
    return User(**fields)


class TestConstraintTypes:
    def test_required_rejects_none_and_blank(self) -> None:
        rule = Required("name", "missing")
        assert not rule.is_satisfied(None)
        assert not rule.is_satisfied("   ")
        assert rule.is_satisfied("x")
        assert rule.is_satisfied(0)

    def test_max_length_boundary(self) -> None:
        rule = MaxLength("cpf", 11, "too long")
        assert rule.is_satisfied("1" * 11)
        assert not rule.is_satisfied("1" * 12)
        assert rule.is_satisfied(None)

    def test_range_bounds(self) -> None:
        rule = Range("rating", "out of range", minimum=0, maximum=5)
        assert rule.is_satisfied(0)
        assert rule.is_satisfied(5)
        assert not rule.is_satisfied(-0.1)
        assert not rule.is_satisfied(5.1)
        assert rule.is_satisfied(None)

    def test_range_rejects_non_finite(self) -> None:
        rule = Range("price", "out of range", minimum=0)
        assert not rule.is_satisfied(float("nan"))
        assert not rule.is_satisfied(float("inf"))
        assert not rule.is_satisfied(float("-inf"))


class TestValidator:
    def test_valid_entity_has_no_violations(self) -> None:
        assert get_validator().validate(_valid_user()) == frozenset()

    def test_validator_is_shared(self) -> None:
        assert get_validator() is get_validator()

    def test_reports_every_violation(self) -> None:
        user = _valid_user(name="x" * 101, cpf="123456789012", password=None)
        fields = {v.field for v in get_validator().validate(user)}
        assert fields == {"name", "cpf", "password"}

    def test_optional_cellphone_limit(self) -> None:
        assert get_validator().validate(_valid_user(cellphone=None)) == frozenset()
        violations = get_validator().validate(_valid_user(cellphone="1" * 16))
        assert {v.field for v in violations} == {"cellphone"}

    def test_product_nan_price(self) -> None:
        product = Product(
            title="Lamp",
            description="Desk lamp",
            price=float("nan"),
            sender_zip_code="01001000",
            usage_time_id=1,
            condition_type_id=1,
            user_id=1,
        )
        assert {v.field for v in get_validator().validate(product)} == {"price"}

    def test_product_negative_price(self) -> None:
        product = Product(
            title="Lamp",
            description="Desk lamp",
            price=-1.0,
            sender_zip_code="01001000",
            usage_time_id=1,
            condition_type_id=1,
            user_id=1,
        )
        violations = get_validator().validate(product)
        assert violations == {ConstraintViolation("price", "The 'price' must not be negative")}

    def test_comment_limit(self) -> None:
        comment = Comment(product_id=1, user_id=1, comment="y" * 91)
        (violation,) = get_validator().validate(comment)
        assert violation.field == "comment"

    def test_entity_without_constraints(self) -> None:
        assert get_validator().validate(object()) == frozenset()


class TestFormatViolations:
    def test_sorted_by_field(self) -> None:
        violations = frozenset(
            {ConstraintViolation("title", "bad title"), ConstraintViolation("price", "bad price")}
        )
        assert format_violations(violations) == "Validation errors: bad price; bad title"

"""Unit tests for load balancer naming rules."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from lb_manager.domain.exceptions import ValidationError
from lb_manager.domain.services import name_builder
from lb_manager.domain.services.name_builder import (
    NAME_MAX_LENGTH,
    app_name_from_name,
    build_name,
    check_detail,
    check_name,
    check_strict_name,
    cluster_from_group_name,
    uses_reserved_format,
)


class TestBuildName:
    """Tests for build_name."""

    def test_app_and_stack(self) -> None:
        """Test the stack is appended with a hyphen."""
        assert build_name("helloworld", "test", "") == "helloworld-test"

    def test_app_only(self) -> None:
        """Test an application alone is the whole name."""
        assert build_name("helloworld", "", "") == "helloworld"
        assert build_name("helloworld") == "helloworld"

    def test_app_stack_and_detail(self) -> None:
        """Test all three components are joined in order."""
        assert build_name("helloworld", "test", "frontend") == "helloworld-test-frontend"

    def test_detail_without_stack_keeps_empty_stack_slot(self) -> None:
        """Test a detail without a stack leaves an empty stack component."""
        assert build_name("helloworld", "", "frontend") == "helloworld--frontend"
        assert build_name("helloworld", None, "frontend") == "helloworld--frontend"

    def test_deterministic(self) -> None:
        """Test the same inputs always yield the same name."""
        names = {build_name("helloworld", "prod", "a-b") for _ in range(5)}
        assert names == {"helloworld-prod-a-b"}

    def test_exactly_max_length_succeeds(self) -> None:
        """Test a name exactly at the maximum is accepted."""
        app_name = "a" * (NAME_MAX_LENGTH - len("-stack"))
        name = build_name(app_name, "stack", "")
        assert len(name) == NAME_MAX_LENGTH

    def test_one_over_max_length_fails(self) -> None:
        """Test a name one character over the maximum is rejected."""
        app_name = "a" * (NAME_MAX_LENGTH - len("-stack") + 1)

        with pytest.raises(ValidationError) as exc_info:
            build_name(app_name, "stack", "")

        error = exc_info.value
        assert error.details["field"] == "app_name"
        assert error.details["length"] == NAME_MAX_LENGTH + 1
        assert error.field_errors[0].code == name_builder.NAME_TOO_LONG

    def test_custom_max_length(self) -> None:
        """Test the maximum can be overridden."""
        assert build_name("abc", "de", max_length=6) == "abc-de"
        with pytest.raises(ValidationError):
            build_name("abc", "def", max_length=6)


class TestCharacterChecks:
    """Tests for the component character classes."""

    def test_check_strict_name(self) -> None:
        """Test application names must be non-empty alphanumerics."""
        assert check_strict_name("helloworld")
        assert check_strict_name("Hello123")
        assert not check_strict_name("")
        assert not check_strict_name(None)
        assert not check_strict_name("hello-world")
        assert not check_strict_name("hello_world")
        assert not check_strict_name("hello world")

    def test_check_name(self) -> None:
        """Test stacks may be empty or alphanumeric."""
        assert check_name("")
        assert check_name(None)
        assert check_name("prod")
        assert not check_name("prod-east")
        assert not check_name("prod!")

    def test_check_detail(self) -> None:
        """Test details may additionally contain hyphens."""
        assert check_detail("")
        assert check_detail(None)
        assert check_detail("frontend")
        assert check_detail("front-end-2")
        assert not check_detail("front_end")
        assert not check_detail("front.end")

    @pytest.mark.parametrize("check", [check_strict_name, check_name, check_detail])
    def test_trailing_newline_rejected(self, check: Callable[[str], bool]) -> None:
        """Test a trailing line break does not satisfy the character class."""
        assert not check("x\n")
        assert not check("x\ny")


class TestReservedFormat:
    """Tests for uses_reserved_format."""

    @pytest.mark.parametrize(
        "value",
        ["v001", "v123456", "blue-v042", "123", "x-7", "c0prod", "d0", "frontend-z0east"],
    )
    def test_reserved_values(self, value: str) -> None:
        """Test push versions, bare numbers and labeled variables are reserved."""
        assert uses_reserved_format(value)

    @pytest.mark.parametrize(
        "value",
        ["", None, "helloworld", "v1", "v12", "v1234567", "version", "app123", "c1", "frontend"],
    )
    def test_unreserved_values(self, value: str | None) -> None:
        """Test ordinary components are not reserved."""
        assert not uses_reserved_format(value)


class TestNameParsing:
    """Tests for the helpers that read names back."""

    def test_app_name_from_name(self) -> None:
        """Test the application is the text before the first hyphen."""
        assert app_name_from_name("helloworld-test-frontend") == "helloworld"
        assert app_name_from_name("helloworld--frontend") == "helloworld"
        assert app_name_from_name("helloworld") == "helloworld"

    def test_cluster_from_group_name(self) -> None:
        """Test the push suffix is stripped from group names."""
        assert cluster_from_group_name("helloworld-test-v003") == "helloworld-test"
        assert cluster_from_group_name("helloworld-test") == "helloworld-test"
        assert cluster_from_group_name("helloworld-v1") == "helloworld-v1"

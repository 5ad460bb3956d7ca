"""Tagged value for the stack component of a load balancer name."""

from __future__ import annotations

from dataclasses import dataclass

from ..enums import StackChoiceKind


@dataclass(frozen=True)
class StackChoice:
    """Either an existing stack, a newly typed stack, or no stack at all.

    Build instances with :meth:`existing`, :meth:`new` or :meth:`none` so an
    existing and a new stack can never both be set.

    Attributes:
        kind: Which variant this is
        name: Stack name, empty for the NONE variant
    """

    kind: StackChoiceKind
    name: str = ""

    def __post_init__(self) -> None:
        if self.kind is StackChoiceKind.NONE and self.name:
            raise ValueError("A StackChoice without a stack cannot carry a name")
        if self.kind is not StackChoiceKind.NONE and not self.name:
            raise ValueError(f"A {self.kind.value} StackChoice requires a name")

    @classmethod
    def existing(cls, name: str) -> StackChoice:
        """Select a stack that already exists."""
        return cls(StackChoiceKind.EXISTING, name)

    @classmethod
    def new(cls, name: str) -> StackChoice:
        """Introduce a stack typed in by the operator."""
        return cls(StackChoiceKind.NEW, name)

    @classmethod
    def none(cls) -> StackChoice:
        """No stack component."""
        return cls(StackChoiceKind.NONE)

    @classmethod
    def from_fields(cls, stack: str | None, new_stack: str | None) -> StackChoice:
        """Convert the two raw form fields into a single choice.

        Raises:
            ValueError: If both fields are filled in
        """
        if stack and new_stack:
            raise ValueError("Only one of stack and new stack may be supplied")
        if new_stack:
            return cls.new(new_stack)
        if stack:
            return cls.existing(stack)
        return cls.none()

    @property
    def is_new(self) -> bool:
        return self.kind is StackChoiceKind.NEW

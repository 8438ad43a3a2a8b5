"""Project enums."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class RemoveBlankOption(_EnumMixin):
    """Opt-in flag for blank-page removal."""

    YES = "yes"

    @classmethod
    def is_yes(cls, option: RemoveBlankOption | None) -> bool:
        """Return whether the option requests blank-page removal."""
        return option is cls.YES


class PageRotation(IntEnum):
    """Absolute page rotations accepted by the typed rotate operation."""

    ROTATION_90 = 90
    ROTATION_180 = 180
    ROTATION_270 = 270

    @classmethod
    def from_str(cls, value: str) -> PageRotation:
        """Parse a rotation from its degree string.

        Args:
            value: Raw degree value, e.g. ``"90"``.

        Raises:
            ValueError: If the value is not one of the supported angles.

        Returns:
            PageRotation: Parsed rotation.
        """
        try:
            return cls(int(value.strip()))
        except ValueError as exc:
            supported = ", ".join(str(member.value) for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

"""Domain exceptions for parentpaths.

All library errors inherit from ParentPathsError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

The concrete errors also subclass TypeError, since both describe a caller
passing a value of the wrong shape.
"""

from __future__ import annotations

from typing import Any


class ParentPathsError(Exception):
    """Base class for all parentpaths exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class InvalidArgumentError(ParentPathsError, TypeError):
    """Raised when the fragments argument is not a sequence of strings.

    Attributes:
        value: The offending argument.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"invalid argument. First argument must be a sequence of strings. "
            f"Value: `{value!r}`."
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest the expected argument shape."""
        return "Pass a list of relative path strings, e.g. ['pyproject.toml']"


class InvalidOptionError(ParentPathsError, TypeError):
    """Raised when resolution options are malformed.

    Attributes:
        option: Name of the offending option, or None when the options
            object itself has the wrong type.
        value: The offending value.
        choices: Accepted values for the option, if it is an enumeration.
    """

    def __init__(
        self,
        message: str,
        option: str | None = None,
        value: Any = None,
        choices: list[str] | None = None,
    ) -> None:
        self.option = option
        self.value = value
        self.choices = choices if choices is not None else []
        super().__init__(message)

    @property
    def recovery_hint(self) -> str | None:
        """List the accepted values when the option is an enumeration."""
        if self.choices:
            return f"Valid values for '{self.option}': {', '.join(self.choices)}"
        return None

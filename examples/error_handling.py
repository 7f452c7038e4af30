"""Error handling patterns with recovery hints.

This example demonstrates how to handle invalid input and use the
recovery_hint property to provide actionable guidance.
"""

from parentpaths import (
    InvalidArgumentError,
    InvalidOptionError,
    ParentPathsError,
    resolve_parent_paths,
)


# Pattern 1: Report a bad mode with the list of valid ones
def resolve_with_mode(fragments: list[str], mode: str) -> list[str | None]:
    """Resolve fragments, explaining invalid modes."""
    try:
        return resolve_parent_paths(fragments, {"mode": mode})
    except InvalidOptionError as e:
        print(f"Error: {e}")
        print(f"Hint: {e.recovery_hint}")
        return []


# Pattern 2: Guard against callers passing a single string
def resolve_user_input(value: object) -> list[str | None]:
    """Resolve fragments from untrusted input."""
    try:
        return resolve_parent_paths(value)  # type: ignore[arg-type]
    except InvalidArgumentError as e:
        print(f"Error: {e}")
        print(f"Hint: {e.recovery_hint}")
        return []


# Pattern 3: Catch everything from the library at once
def resolve_safely(fragments: list[str], options: dict[str, str]) -> list[str | None]:
    """Resolve fragments, returning an empty list on any library error."""
    try:
        return resolve_parent_paths(fragments, options)
    except ParentPathsError as e:
        print(f"Error: {e}")
        return []


if __name__ == "__main__":
    resolve_with_mode(["pyproject.toml"], "sideways")
    resolve_user_input("pyproject.toml")
    print(resolve_safely(["pyproject.toml"], {"mode": "each"}))

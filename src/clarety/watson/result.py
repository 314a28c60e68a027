"""Success/error envelope returned by every service operation."""

from dataclasses import dataclass

from clarety.watson.errors import WatsonError


@dataclass(frozen=True, slots=True)
class Result[T]:
    """Outcome of one operation: either a value or a WatsonError."""

    ok: bool
    value: T | None = None
    error: WatsonError | None = None

    @staticmethod
    def success[V](value: V) -> "Result[V]":
        """Build a success result."""
        return Result(ok=True, value=value)

    @staticmethod
    def fail(error: WatsonError) -> "Result":
        """Build an error result."""
        return Result(ok=False, error=error)

    def unwrap(self) -> T:
        """Return the value, or raise the carried error.

        Raises:
            WatsonError: The result is a failure.

        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

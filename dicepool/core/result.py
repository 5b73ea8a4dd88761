"""
Result object for non-raising error handling in dicepool.

Library callers that prefer not to catch exceptions (e.g. a chat bot that
rejects user input and reprompts) can use the ``try_*`` entry points, which
return a Result instead of raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """
    Machine-readable error classification for failed operations.
    """

    # Notation errors
    MALFORMED_NOTATION = "malformed_notation"
    VALUE_TOO_LARGE = "value_too_large"

    def __str__(self) -> str:
        """Return the error code value."""
        return self.value


@dataclass
class Result:
    """
    Represents the result of an operation that can succeed or fail.

    Attributes:
        success: Whether the operation succeeded
        data: The result data if successful
        error: Error message if failed
        error_code: Machine-readable error code if failed

    Examples:
        >>> result = Result.ok(descriptor)
        >>> if result.success:
        ...     print(result.data.roll())

        >>> result = Result.fail("Could not parse", ErrorCode.MALFORMED_NOTATION)
        >>> if not result.success:
        ...     print(f"Error: {result.error}")
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @staticmethod
    def ok(data: Any = None) -> 'Result':
        """Create a successful result."""
        return Result(success=True, data=data)

    @staticmethod
    def fail(error: str, code: Optional[str | ErrorCode] = None) -> 'Result':
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            code: Machine-readable error code (ErrorCode enum or string)

        Returns:
            Result with success=False
        """
        error_code_str = code.value if isinstance(code, ErrorCode) else code
        return Result(success=False, error=error, error_code=error_code_str)

    def __bool__(self) -> bool:
        """Allow using Result in boolean context: if result: ..."""
        return self.success

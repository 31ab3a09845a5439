"""Custom exceptions for the i18n system.

Missing table data never raises; these cover caller contract violations
and the opt-in strict placeholder policy.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.i18n.models import PlaceholderMismatch


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            _(segments, *values)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class TemplateArityError(I18nError, ValueError):
    """Raised when a template's segment count is not its value count plus one.

    Example:
        >>> _(("Hello ", "!"))
        Traceback (most recent call last):
        ...
        TemplateArityError: Template has 2 segments but 0 values; expected 1 segments
    """

    def __init__(self, segment_count: int, value_count: int):
        self.segment_count = segment_count
        self.value_count = value_count
        super().__init__(
            f"Template has {segment_count} segments but {value_count} values; "
            f"expected {value_count + 1} segments"
        )


class StructuralMismatchError(I18nError):
    """Raised in strict mode when a translation's placeholders don't fit its template.

    Attributes:
        mismatch: The PlaceholderMismatch diagnostic describing the problem.
    """

    def __init__(self, mismatch: "PlaceholderMismatch"):
        self.mismatch = mismatch
        super().__init__(str(mismatch))

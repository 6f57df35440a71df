"""Shared domain utilities.

Example usage:
    >>> from pomotree.domain.shared import Ok, Err, Result
    >>>
    >>> def parse_phase(raw: str) -> Result[str, str]:
    ...     if raw not in ("Work", "ShortBreak", "LongBreak"):
    ...         return Err(f"Unknown phase {raw!r}")
    ...     return Ok(raw)
"""

from pomotree.domain.shared.result import Err, Ok, Result

__all__ = [
    "Ok",
    "Err",
    "Result",
]

"""Error hierarchy for DOT parsing."""

from __future__ import annotations

from collections.abc import Sequence


class ParseError(ValueError):
    """Base error for all parse failures.

    ``str()`` renders the whole chain, innermost failure first, followed by
    this error's message and every context line added while it propagated.
    """

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        cause: Exception | None = None,
        causes: Sequence[Exception] = (),
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.cause = cause
        self.causes = list(causes)
        self.context: list[str] = []

    def add_context(self, line: str) -> ParseError:
        self.context.append(line)
        return self

    def __str__(self) -> str:
        lines = [str(self.cause)] if self.cause is not None else []
        lines.append(self.message)
        lines.extend(self.context)
        return "\n".join(lines)


class DotSyntaxError(ParseError):
    """A required literal, delimiter or value was absent or malformed."""


class GrammarArityError(ParseError):
    """A one-or-more repetition matched zero times."""

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TypeVar

from dotgraph.errors import DotSyntaxError, GrammarArityError, ParseError

T = TypeVar("T")


class Scanner:
    """Cursor over DOT source with the primitives the grammar is built from.

    Readers raise ``DotSyntaxError`` without consuming input. Combinators
    rewind to where the attempt started whenever it fails.
    """

    def __init__(self, source: str):
        self._source = source
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    def at_end(self) -> bool:
        return self._index >= len(self._source)

    def peek(self) -> str:
        if self.at_end():
            return ""
        return self._source[self._index]

    def rest(self) -> str:
        return self._source[self._index :]

    # --- literals ---

    def string(self, literal: str) -> str:
        if not self._source.startswith(literal, self._index):
            raise self._error(f"Expected {literal!r}")
        self._index += len(literal)
        return literal

    def char(self, expected: str) -> str:
        if self.peek() != expected:
            raise self._error(f"Expected {expected!r}")
        self._index += 1
        return expected

    def strings(self, literals: Sequence[str]) -> str:
        for literal in literals:
            if self._source.startswith(literal, self._index):
                self._index += len(literal)
                return literal
        expected = " or ".join(repr(literal) for literal in literals)
        raise self._error(f"Expected {expected}")

    # --- whitespace and lines ---

    def whitespace(self) -> str:
        start = self._index
        self.optional_whitespace()
        if self._index == start:
            raise self._error("Expected whitespace")
        return self._source[start : self._index]

    def optional_whitespace(self) -> str:
        start = self._index
        while self._index < len(self._source) and self._source[self._index].isspace():
            self._index += 1
        return self._source[start : self._index]

    def skip_to_newline(self) -> str:
        start = self._index
        end = self._source.find("\n", start)
        self._index = len(self._source) if end == -1 else end + 1
        return self._source[start : self._index]

    def expect_end(self) -> None:
        self.optional_whitespace()
        if not self.at_end():
            raise self._error("Unexpected trailing input")

    # --- tokens ---

    def integer(self) -> int:
        index = self._index
        if self._source.startswith("-", index):
            index += 1
        digits_start = index
        index = self._skip_digits(index)
        if index == digits_start:
            raise self._error("Expected an integer")
        value = int(self._source[self._index : index])
        self._index = index
        return value

    def bare_id(self) -> str:
        index = self._index
        if index >= len(self._source) or not _is_identifier_start(self._source[index]):
            raise self._error("Expected an identifier")
        while index < len(self._source) and _is_identifier_part(self._source[index]):
            index += 1
        value = self._source[self._index : index]
        self._index = index
        return value

    def numeral(self) -> float:
        start = self._index
        if self._source.startswith("-", start):
            start += 1
        integral_end = self._skip_digits(start)
        end = integral_end
        if self._source.startswith(".", integral_end):
            fraction_end = self._skip_digits(integral_end + 1)
            if integral_end > start or fraction_end > integral_end + 1:
                end = fraction_end
        if end == start:
            raise self._error("Expected a number")
        value = float(self._source[self._index : end])
        self._index = end
        return value

    def quoted_string(self) -> str:
        if self.peek() != '"':
            raise self._error("Expected a quoted string")
        index = self._index + 1
        result: list[str] = []

        while index < len(self._source):
            char = self._source[index]
            if char == '"':
                self._index = index + 1
                return "".join(result)
            if char == "\\" and index + 1 < len(self._source):
                following = self._source[index + 1]
                if following in '"\\':
                    result.append(following)
                else:
                    result.append(char + following)
                index += 2
                continue
            result.append(char)
            index += 1

        raise self._error("Unterminated quoted string")

    def html_string(self) -> str:
        if self.peek() != "<":
            raise self._error("Expected an HTML string")
        depth = 0
        index = self._index

        while index < len(self._source):
            char = self._source[index]
            if char == "<":
                depth += 1
            elif char == ">":
                depth -= 1
                if depth == 0:
                    value = self._source[self._index + 1 : index]
                    self._index = index + 1
                    return value
            index += 1

        raise self._error("Unterminated HTML string")

    # --- combinators ---

    def optional(self, rule: Callable[[], T]) -> T | None:
        start = self._index
        try:
            return rule()
        except ParseError:
            self._index = start
            return None

    def many(self, rule: Callable[[], T]) -> list[T]:
        results: list[T] = []
        while True:
            start = self._index
            try:
                results.append(rule())
            except ParseError:
                self._index = start
                return results
            if self._index == start:
                # A rule that matched nothing would match forever.
                return results

    def many1(self, rule: Callable[[], T], description: str) -> list[T]:
        start = self._index
        try:
            first = rule()
        except ParseError as error:
            self._index = start
            raise GrammarArityError(
                f"Expected at least one {description} at index {start}",
                position=start,
                cause=error,
            ) from error
        return [first, *self.many(rule)]

    def one_of(self, *rules: Callable[[], T], expected: str) -> T:
        start = self._index
        failures: list[ParseError] = []
        for rule in rules:
            try:
                return rule()
            except ParseError as error:
                self._index = start
                failures.append(error)
        raise DotSyntaxError(
            f"Expected {expected} at index {start}", position=start, causes=failures
        )

    @contextmanager
    def annotate(self, label: str) -> Iterator[None]:
        try:
            yield
        except ParseError as error:
            error.add_context(label)
            raise

    def _skip_digits(self, index: int) -> int:
        while index < len(self._source) and self._source[index] in "0123456789":
            index += 1
        return index

    def _error(self, message: str) -> DotSyntaxError:
        return DotSyntaxError(f"{message} at index {self._index}", position=self._index)


def _is_identifier_start(char: str) -> bool:
    return char.isascii() and (char.isalpha() or char == "_")


def _is_identifier_part(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")

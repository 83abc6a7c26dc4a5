"""Incremental decoder turning a stream of text fragments into JSON values.

Fragments may split a JSON object anywhere, including inside a string
literal, so nothing is parsed until a candidate object is structurally
closed. Text that is not part of an object (prose, code fences, commas
between objects) is skipped.
"""

import json
import logging
from typing import Any, AsyncIterable, AsyncIterator, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


def _find_object_end(buffer: str, start: int) -> int:
    """Return the index of the brace closing the object opened at ``start``.

    Braces inside double-quoted strings are ignored, honouring backslash
    escapes. Returns -1 when the object is not closed yet.
    """
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(buffer)):
        ch = buffer[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _find_brace_end(buffer: str, start: int) -> int:
    """Like :func:`_find_object_end` but counting braces only."""
    depth = 0
    for i in range(start, len(buffer)):
        if buffer[i] == "{":
            depth += 1
        elif buffer[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _is_json(text: str) -> bool:
    try:
        json.loads(text)
    except json.JSONDecodeError:
        return False
    return True


class JsonFragmentDecoder:
    """Stateful decoder for a single stream. Not restartable."""

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Text received but not yet consumed by a decoded value."""
        return self._buffer

    def feed(self, fragment: Optional[str]) -> List[Any]:
        """Append a fragment and return every value completed by it, in order.

        Non-string fragments are ignored.
        """
        if not isinstance(fragment, str) or not fragment:
            return []
        self._buffer += fragment

        values: List[Any] = []
        start = self._buffer.find("{")
        while start != -1:
            end = _find_object_end(self._buffer, start)
            if end == -1:
                start = self._resume_after_unclosed(start)
                if start == -1:
                    break
                continue
            candidate = self._buffer[start : end + 1]
            try:
                value = json.loads(candidate)
            except json.JSONDecodeError as e:
                logger.debug(f"Skipping malformed object at offset {start}: {e}")
                start = self._buffer.find("{", start + 1)
                continue
            values.append(value)
            self._buffer = self._buffer[end + 1 :]
            start = self._buffer.find("{")

        # Nothing before the first candidate brace can start a value.
        self._buffer = self._buffer[start:] if start != -1 else ""
        return values

    def _resume_after_unclosed(self, start: int) -> int:
        """Find where decoding continues when the object at ``start`` never closes.

        An unbalanced quote keeps the quote-aware scan inside a string for the
        rest of the buffer. Counting braces alone still closes such a span.
        When that span is not valid JSON and a complete object follows it,
        decoding resumes at that object. Returns -1 to wait for more text.
        """
        brace_end = _find_brace_end(self._buffer, start)
        if brace_end == -1 or _is_json(self._buffer[start : brace_end + 1]):
            return -1

        candidate = self._buffer.find("{", brace_end + 1)
        while candidate != -1:
            end = _find_object_end(self._buffer, candidate)
            if end != -1 and _is_json(self._buffer[candidate : end + 1]):
                logger.debug(f"Skipping unterminated object at offset {start}")
                return candidate
            candidate = self._buffer.find("{", candidate + 1)
        return -1

    def close(self) -> None:
        """Discard whatever trailing partial text is left."""
        if self._buffer.strip():
            logger.debug(f"Discarding {len(self._buffer)} undecoded trailing characters")
        self._buffer = ""


async def decode_json_stream(fragments: AsyncIterable[Optional[str]]) -> AsyncIterator[Any]:
    """Yield each JSON object found in an async stream of text fragments.

    Values are yielded as soon as their closing brace arrives. A trailing
    object that never closes is never yielded.
    """
    decoder = JsonFragmentDecoder()
    async for fragment in fragments:
        for value in decoder.feed(fragment):
            yield value
    decoder.close()


def iter_json_stream(fragments: Iterable[Optional[str]]) -> Iterator[Any]:
    """Synchronous counterpart of :func:`decode_json_stream`."""
    decoder = JsonFragmentDecoder()
    for fragment in fragments:
        yield from decoder.feed(fragment)
    decoder.close()

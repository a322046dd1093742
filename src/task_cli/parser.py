"""Tokenizer for pending-task lines and command arguments.

A pending task is written as ``<priority> <text>``: one or more digits, at
least one whitespace character, then the task text running to the end of the
line. The same grammar is used for the arguments of ``add`` and for lines read
back from the pending file.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

LINE_BREAKS = "\r\n\u2028\u2029"


@dataclass
class ParsedTask:
    """A successfully parsed ``<priority> <text>`` string."""
    priority: int
    text: str


@dataclass
class ParseError:
    """Describes why a string is not a valid task line."""
    message: str
    position: int = 0


def parse_task_line(line: str) -> Tuple[Optional[ParsedTask], Optional[ParseError]]:
    """Parse ``line`` into a priority and text.

    Returns a ``(ParsedTask, None)`` pair on success and ``(None, ParseError)``
    otherwise. The text is kept verbatim apart from the separating whitespace.
    """
    if not line:
        return None, ParseError("empty line")
    for pos, ch in enumerate(line):
        if ch in LINE_BREAKS:
            return None, ParseError("task spans more than one line", pos)

    pos = 0
    while pos < len(line) and line[pos] in "0123456789":
        pos += 1
    if pos == 0:
        return None, ParseError("line does not start with a priority", 0)
    digits_end = pos

    while pos < len(line) and line[pos].isspace():
        pos += 1
    if pos == digits_end:
        return None, ParseError("priority is not followed by whitespace", pos)

    text = line[pos:]
    if not text:
        # "3  " still has a one-character text: the last whitespace character.
        if pos - digits_end < 2:
            return None, ParseError("missing task text", pos)
        text = line[-1]

    return ParsedTask(priority=int(line[:digits_end]), text=text), None


def strip_quotes(text: str) -> str:
    """Remove one pair of double quotes wrapping the whole text."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def parse_index(arg: str) -> Optional[int]:
    """Read the leading integer of a display-index argument.

    Leading whitespace and an optional sign are accepted and trailing garbage
    is ignored, so ``"3rd"`` gives 3. Returns ``None`` when no digits lead the
    argument.
    """
    value = arg.lstrip()
    sign = 1
    if value[:1] in ("+", "-"):
        sign = -1 if value[0] == "-" else 1
        value = value[1:]

    end = 0
    while end < len(value) and value[end] in "0123456789":
        end += 1
    if end == 0:
        return None
    return sign * int(value[:end])

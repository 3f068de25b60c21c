"""Positional template interpolation for translated messages.

Patterns use ``{}`` and ``{N}`` placeholders. An empty placeholder takes its
argument index from the position of its segment in the pattern split on
``}``, not from a running count of placeholders, so ``"{1}{}"`` renders the
second argument twice.
"""

from typing import Any, List, Sequence

from localegate.i18n.exceptions import (
    InvalidPositionalArgumentError,
    UnmatchedCurlyBracketError,
)


def _resolve_index(pattern: str, specifier: str, position: int) -> int:
    if not specifier:
        return position
    if not (specifier.isascii() and specifier.isdigit()):
        raise InvalidPositionalArgumentError(pattern, specifier)
    try:
        return int(specifier)
    except ValueError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise InvalidPositionalArgumentError(pattern, specifier) from e


def try_format(pattern: str, args: Sequence[Any] = ()) -> str:
    """Substitute positional arguments into a message pattern.

    Args:
        pattern: Translated message pattern, e.g. ``"Hello, {0}!"``.
        args: Values rendered with ``str()``. Unreferenced extras are ignored.

    Returns:
        The formatted message.

    Raises:
        UnmatchedCurlyBracketError: On a stray ``}``, a doubled ``{`` or a
            ``{`` that is never closed.
        InvalidPositionalArgumentError: On a non-numeric placeholder or an
            index outside ``args``.
    """
    segments = pattern.split("}")
    last = len(segments) - 1

    parts: List[str] = []
    finished = False
    for position, segment in enumerate(segments):
        if finished:
            raise UnmatchedCurlyBracketError(pattern)
        if "{" not in segment:
            finished = True
            parts.append(segment)
            continue
        if position == last:
            # an opening brace with no closing one after it
            raise UnmatchedCurlyBracketError(pattern)

        pieces = segment.split("{")
        if len(pieces) > 2:
            raise UnmatchedCurlyBracketError(pattern)
        text, specifier = pieces

        index = _resolve_index(pattern, specifier, position)
        if index >= len(args):
            raise InvalidPositionalArgumentError(pattern, specifier)

        parts.append(text)
        parts.append(str(args[index]))

    return "".join(parts)

"""
Skip and Validity Gate
======================

Cheap checks run before, or instead of, full resolution. Both use the same
label/comment stripping as the resolver.

- is_skippable: blank, label-only and directive lines need no resolution.
  Only stripping and the skip patterns are consulted.
- validate_line / is_structurally_valid: does the line resolve at all?
  Used on its own to check a whole file without computing costs.
"""

from typing import Iterable, Optional

from asm2table.errors import ParseFailure
from asm2table.resolver.resolver import LineResolver

_default_resolver = LineResolver()


def is_skippable(line: str, resolver: Optional[LineResolver] = None) -> bool:
    """Return True for blank, label-only and directive lines."""
    _, result = (resolver or _default_resolver).classify_line(line)
    return result is not None


def validate_line(line: str, resolver: Optional[LineResolver] = None) -> None:
    """
    Check that a line resolves.

    Raises:
        ParseFailure: the specific failure for the line
    """
    (resolver or _default_resolver).resolve(line)


def is_structurally_valid(line: str, resolver: Optional[LineResolver] = None) -> bool:
    try:
        validate_line(line, resolver)
    except ParseFailure:
        return False
    return True


def validate_lines(
    lines: Iterable[str], resolver: Optional[LineResolver] = None
) -> list[ParseFailure]:
    """
    Validate every line, collecting failures in source order.

    Each failure carries its 1-indexed line number.
    """
    failures = []
    for line_number, line in enumerate(lines, start=1):
        try:
            validate_line(line, resolver)
        except ParseFailure as e:
            failures.append(e.at_line(line_number))
    return failures

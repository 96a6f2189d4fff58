from __future__ import annotations

import logging
from typing import List, Sequence

from . import io
from .errors import LineOutOfRangeError, MissingAsteriskError, PatchError
from .models import Violation

logger = logging.getLogger(__name__)


def blank_comment_line(previous_line: str) -> str:
    """Cut ``previous_line`` after its first ``*``: ``"   * foo"`` gives ``"   *"``."""
    asterisk = previous_line.find("*")
    if asterisk < 0:
        raise MissingAsteriskError(f"no comment asterisk in line {previous_line!r}")
    return previous_line[: asterisk + 1]


def insert_blank_comment_line(lines: Sequence[str], line_number: int) -> List[str]:
    # -1 for 1-indexed line numbers, -1 again for the line before it
    previous_index = line_number - 2
    if previous_index < 0 or previous_index >= len(lines):
        raise LineOutOfRangeError(f"line {line_number} has no preceding line in a {len(lines)}-line file")
    patched = list(lines)
    patched.insert(line_number - 1, blank_comment_line(lines[previous_index]))
    return patched


def apply_violation(violation: Violation) -> None:
    """Insert a blank comment line before the reported line and rewrite the file.

    The file is read fresh on every call. The rewrite truncates in place with
    no backup, so a crash mid-write can leave the file incomplete.
    """
    try:
        lines = io.read_lines(violation.path)
        patched = insert_blank_comment_line(lines, violation.line_number)
        io.write_lines(violation.path, patched)
    except (OSError, ValueError) as exc:
        raise PatchError(violation.path, exc) from exc
    logger.debug("inserted %r at %s", patched[violation.line_number - 1], violation)

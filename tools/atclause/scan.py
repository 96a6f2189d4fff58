from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from . import io
from .errors import LogReadError, ViolationParseError
from .matchers import default_matchers
from .models import MatcherDefinition, Violation

logger = logging.getLogger(__name__)


def match_line(line: str, matchers: Sequence[MatcherDefinition]) -> Optional[Violation]:
    """Return the violation reported by ``line``; the first matching format wins."""
    for matcher in matchers:
        match = matcher.match(line)
        if match is None:
            continue
        path = match.group(matcher.path_group)
        if path is None:
            raise ViolationParseError(line, f"no path captured by matcher {matcher.name!r}")
        raw_number = match.group(matcher.line_group)
        # int() would also take "1_0", " 7" or non-ASCII digits
        if raw_number is None or not (raw_number.isascii() and raw_number.isdigit()):
            raise ViolationParseError(line, f"invalid line number {raw_number!r}")
        line_number = int(raw_number)
        if line_number < 1:
            raise ViolationParseError(line, f"invalid line number {raw_number!r}")
        violation = Violation(path=path, line_number=line_number)
        logger.debug("matched %s with %s", violation, matcher.name)
        return violation
    return None


def iter_violations(lines: Iterable[str], matchers: Sequence[MatcherDefinition]) -> Iterator[Violation]:
    for line in lines:
        violation = match_line(line, matchers)
        if violation is not None:
            yield violation


def scan_log(log_path: Union[str, Path], matchers: Optional[Sequence[MatcherDefinition]] = None) -> List[Violation]:
    """Read a build log and return its at-clause violations in log order."""
    if matchers is None:
        matchers = default_matchers()
    try:
        with open(log_path, "r", encoding=io.ENCODING) as fh:
            violations = list(iter_violations((line.rstrip("\n") for line in fh), matchers))
    except (OSError, UnicodeDecodeError) as exc:
        raise LogReadError(str(log_path), str(exc)) from exc
    logger.debug("found %d violations in %s", len(violations), log_path)
    return violations

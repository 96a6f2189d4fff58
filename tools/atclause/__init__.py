from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Union

from . import order, patch, scan
from .models import MatcherDefinition, Violation


@dataclass
class RunResult:
    log_path: Path
    violations: List[Violation]
    patched_files: List[str] = field(default_factory=list)


def run(
    log_path: Union[str, Path],
    matchers: Optional[Sequence[MatcherDefinition]] = None,
    out: Optional[TextIO] = None,
) -> RunResult:
    if out is None:
        out = sys.stdout
    log = Path(log_path)

    found = scan.scan_log(log, matchers)
    violations = order.order_for_safe_application(found)

    out.write(f"Fixing {len(violations)} at-clause violations\n")

    result = RunResult(log, violations)
    for violation in violations:
        patch.apply_violation(violation)
        if violation.path not in result.patched_files:
            result.patched_files.append(violation.path)
    return result

from __future__ import annotations

from typing import List, Sequence

from .models import Violation


def order_for_safe_application(violations: Sequence[Violation]) -> List[Violation]:
    """Return the violations last-reported first.

    Logs report a file's violations top to bottom. Inserting a line shifts
    every later line of that file down by one, so edits are applied in
    reverse log order: each insertion only moves lines that were already
    handled. The reversal is global rather than per file; edits to different
    files never interact, and each file's own subsequence stays bottom-up.
    """
    return list(reversed(violations))

from __future__ import annotations

from typing import Optional


class AtClauseFixError(RuntimeError):
    """Base class for every failure raised by the at-clause fixer."""


class LogReadError(AtClauseFixError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"could not read log file {path}: {reason}")
        self.path = path


class ViolationParseError(AtClauseFixError, ValueError):
    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason} in log line: {line}")
        self.line = line


class MatcherConfigError(AtClauseFixError, ValueError):
    pass


class MissingAsteriskError(ValueError):
    pass


class LineOutOfRangeError(ValueError):
    pass


class PatchError(AtClauseFixError):
    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        message = f"could not process file {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.path = path

from __future__ import annotations

import re
from functools import cached_property
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

GroupRef = Union[int, str]


class Violation(BaseModel):
    """One reported at-clause diagnostic: a file and its 1-indexed line."""

    model_config = ConfigDict(frozen=True)

    path: str
    line_number: int = Field(ge=1)

    def __str__(self) -> str:
        return f"{self.path}:{self.line_number}"


class MatcherDefinition(BaseModel):
    """A log line format: a whole-line regex and the groups holding path and line."""

    model_config = ConfigDict(frozen=True)

    name: str
    pattern: str
    path_group: GroupRef = 1
    line_group: GroupRef = 2

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("matcher name must not be empty")
        return value

    @model_validator(mode="after")
    def groups_exist(self) -> "MatcherDefinition":
        try:
            compiled = re.compile(self.pattern, re.ASCII)
        except re.error as exc:
            raise ValueError(f"invalid pattern for matcher {self.name!r}: {exc}") from exc
        for label, group in (("path_group", self.path_group), ("line_group", self.line_group)):
            if not _has_group(compiled, group):
                raise ValueError(f"{label} {group!r} is not a group of matcher {self.name!r}")
        return self

    @cached_property
    def regex(self) -> re.Pattern[str]:
        # ASCII so \d and \w only match what the upstream tools print
        return re.compile(self.pattern, re.ASCII)

    def match(self, line: str) -> Optional[re.Match[str]]:
        return self.regex.fullmatch(line)


def _has_group(compiled: re.Pattern[str], group: GroupRef) -> bool:
    if isinstance(group, int):
        return 0 < group <= compiled.groups
    return group in compiled.groupindex

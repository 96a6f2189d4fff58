"""Known log formats for the JavadocParagraph at-clause diagnostic."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import orjson
from jsonschema import Draft202012Validator
from pydantic import ValidationError

from .errors import MatcherConfigError
from .models import MatcherDefinition

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "matchers.schema.json"

# [checkstyle] [ERROR] <path>:<line>: Javadoc at-clause '@param' should be preceded with an empty line. [JavadocParagraph]
CHECKSTYLE = MatcherDefinition(
    name="checkstyle",
    pattern=(
        r"\[checkstyle\] \[ERROR\] (.*):(\d+): Javadoc at-clause '@\w+' "
        r"should be preceded with an empty line. \[JavadocParagraph\]"
    ),
)

# [ERROR] <path>:[<line>] (javadoc) JavadocParagraph: Javadoc at-clause '@param' should be preceded with an empty line.
SEVNTU = MatcherDefinition(
    name="sevntu",
    pattern=(
        r"\[ERROR\] (.*):\[(\d+)\] \(javadoc\) JavadocParagraph: Javadoc at-clause '@\w+' "
        r"should be preceded with an empty line."
    ),
)

DEFAULT_MATCHERS: List[MatcherDefinition] = [CHECKSTYLE, SEVNTU]


def default_matchers() -> List[MatcherDefinition]:
    return list(DEFAULT_MATCHERS)


def _load_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def build_matchers(entries: Sequence[Dict[str, Any]]) -> List[MatcherDefinition]:
    matchers: List[MatcherDefinition] = []
    for index, entry in enumerate(entries):
        try:
            matchers.append(MatcherDefinition(**entry))
        except ValidationError as exc:
            raise MatcherConfigError(f"matcher #{index} is invalid: {exc}") from exc
    return matchers


def load_matchers(path: Union[str, Path], include_defaults: Optional[bool] = None) -> List[MatcherDefinition]:
    """Load a matcher configuration file.

    Custom matchers are tried after the built-in ones unless the file sets
    ``replace_defaults`` (or ``include_defaults`` is passed explicitly).
    """
    cfg_path = Path(path)
    try:
        payload = orjson.loads(cfg_path.read_bytes())
    except OSError as exc:
        raise MatcherConfigError(f"could not read matcher file {cfg_path}: {exc}") from exc
    except orjson.JSONDecodeError as exc:
        raise MatcherConfigError(f"matcher file {cfg_path} is not valid JSON: {exc}") from exc

    validator = Draft202012Validator(_load_schema())
    errors = sorted(validator.iter_errors(payload), key=lambda err: [str(part) for part in err.path])
    if errors:
        details = "; ".join(
            f"{'/'.join(str(part) for part in error.path) or '<root>'}: {error.message}" for error in errors
        )
        raise MatcherConfigError(f"matcher file {cfg_path} does not match schema: {details}")

    custom = build_matchers(payload["matchers"])
    if include_defaults is None:
        include_defaults = not payload.get("replace_defaults", False)
    matchers = default_matchers() + custom if include_defaults else custom
    names = [matcher.name for matcher in matchers]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise MatcherConfigError(f"duplicate matcher names: {', '.join(duplicates)}")
    return matchers

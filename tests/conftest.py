from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

ADDER_SOURCE = """package demo;

/**
 * Adds numbers.
 * @param a first operand
 * @param b second operand
 */
public class Adder {
    /**
     * Sum of the operands.
     * @return the total
     */
    int sum() {
        return 0;
    }
}
"""


def _checkstyle(path: Path, line: int, tag: str = "param") -> str:
    return (
        f"[checkstyle] [ERROR] {path}:{line}: Javadoc at-clause '@{tag}' "
        "should be preceded with an empty line. [JavadocParagraph]"
    )


def _sevntu(path: Path, line: int, tag: str = "param") -> str:
    return (
        f"[ERROR] {path}:[{line}] (javadoc) JavadocParagraph: Javadoc at-clause '@{tag}' "
        "should be preceded with an empty line."
    )


@pytest.fixture
def checkstyle_line() -> Callable[..., str]:
    return _checkstyle


@pytest.fixture
def sevntu_line() -> Callable[..., str]:
    return _sevntu


@pytest.fixture
def adder_java(tmp_path: Path) -> Path:
    source = tmp_path / "src" / "demo" / "Adder.java"
    source.parent.mkdir(parents=True)
    source.write_text(ADDER_SOURCE, encoding="utf-8")
    return source


@pytest.fixture
def write_log(tmp_path: Path) -> Callable[[List[str]], Path]:
    def _write(lines: List[str], name: str = "build.log") -> Path:
        log = tmp_path / name
        log.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return log

    return _write


@pytest.fixture
def sample_log(adder_java: Path, write_log) -> Path:
    return write_log(
        [
            "[INFO] Scanning for projects...",
            "[INFO] --- maven-checkstyle-plugin:3.1.0:check (validate) @ demo ---",
            _checkstyle(adder_java, 5),
            "[WARN] unrelated warning",
            _checkstyle(adder_java, 11, tag="return"),
            "[INFO] BUILD FAILURE",
        ]
    )

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

ENCODING = "utf-8"

PathLike = Union[str, Path]


def read_lines(path: PathLike) -> List[str]:
    # universal newlines: \r\n and \r arrive as \n
    with open(path, "r", encoding=ENCODING) as fh:
        text = fh.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_lines(path: PathLike, lines: Iterable[str]) -> None:
    with open(path, "w", encoding=ENCODING, newline="\n") as fh:
        for line in lines:
            fh.write(line)
            fh.write("\n")

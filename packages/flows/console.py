"""Console handed to flow scripts in place of a JavaScript ``console``."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.lines: list[str] = []

    @property
    def stream(self) -> TextIO:
        # Resolved per call so pytest's capsys sees the output.
        return self._stream if self._stream is not None else sys.stdout

    def log(self, *values: object) -> None:
        line = " ".join(str(value) for value in values)
        self.lines.append(line)
        self.stream.write(line + "\n")

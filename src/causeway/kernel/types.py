# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Value types carried by diagnostics: severity, spans, and source snippets.

All types are immutable and use only the Python standard library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """How serious a diagnostic is. Absent severity is modelled as ``None``."""

    ADVICE = "advice"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class SourceSpan:
    """A byte range inside a source snippet.

    Spans are created from ``(offset, length)`` pairs; a zero-length span
    marks a single position.
    """

    offset: int
    length: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0 or self.length < 0:
            raise ValueError(f"Span offset and length must be non-negative, got ({self.offset}, {self.length})")

    @classmethod
    def of(cls, value: SourceSpan | tuple[int, int] | int) -> SourceSpan:
        """Coerce ``(offset, length)`` tuples and bare offsets into a span."""
        if isinstance(value, SourceSpan):
            return value
        if isinstance(value, tuple):
            offset, length = value
            return cls(offset, length)
        return cls(value)

    @property
    def end(self) -> int:
        return self.offset + self.length

    def is_empty(self) -> bool:
        return self.length == 0


@dataclass(frozen=True)
class LabeledSpan:
    """A span paired with the message shown next to it."""

    label: str | None
    span: SourceSpan

    @property
    def offset(self) -> int:
        return self.span.offset

    @property
    def length(self) -> int:
        return self.span.length


@dataclass(frozen=True)
class NamedSource:
    """Source text that labels index into, with the name it is shown under."""

    name: str
    text: str

    def __len__(self) -> int:
        return len(self.text)

    def snippet(self, span: SourceSpan) -> str:
        """Return the text covered by *span*, clamped to the source bounds."""
        start = min(span.offset, len(self.text))
        return self.text[start : min(span.end, len(self.text))]

    def line_col(self, offset: int) -> tuple[int, int]:
        """Return the 1-based ``(line, column)`` of *offset*."""
        offset = min(offset, len(self.text))
        line = self.text.count("\n", 0, offset) + 1
        line_start = self.text.rfind("\n", 0, offset) + 1
        return line, offset - line_start + 1

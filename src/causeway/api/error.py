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
"""ApiError — the flat, serializable record produced at the outward boundary.

The record is created once per conversion and discarded after encoding.
It is never turned back into a report.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ApiError:
    """Machine-readable error record for API responses and log sinks.

    ``correlation_id``, ``title``, ``git_hash`` and ``history`` are always
    present in ``to_dict()`` output. ``code``, ``help`` and ``docs_url`` are
    omitted entirely when ``None``; they are never emitted as null.
    """

    correlation_id: str
    title: str
    git_hash: str
    code: str | None = None
    help: str | None = None
    docs_url: str | None = None
    history: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable one.
        if not isinstance(self.history, tuple):
            object.__setattr__(self, "history", tuple(self.history))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dict suitable for JSON responses, in wire order."""
        result: dict[str, Any] = {
            "correlation_id": self.correlation_id,
            "title": self.title,
        }
        if self.code is not None:
            result["code"] = self.code
        if self.help is not None:
            result["help"] = self.help
        result["git_hash"] = self.git_hash
        if self.docs_url is not None:
            result["docs_url"] = self.docs_url
        result["history"] = list(self.history)
        return result

    def to_json(self, *, indent: int | None = None) -> str:
        """Encode as JSON, keeping non-ASCII text as-is."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

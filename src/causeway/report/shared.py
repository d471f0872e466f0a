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
"""SharedReport — the frozen, cheaply cloneable form of a report tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from causeway.report.view import ReportView


@dataclass(frozen=True, slots=True, eq=False)
class SharedReport(ReportView):
    """Immutable report node produced by :meth:`Report.into_cloneable`.

    The tree below it is frozen as well. Cloning hands out the same object:
    nothing in it can change, so every holder may read it from any thread
    without coordination. There is no way back to an exclusive report.
    """

    current_context: object
    attachments: tuple[Any, ...] = ()
    children: tuple[SharedReport, ...] = ()

    def clone(self) -> SharedReport:
        return self

    def __copy__(self) -> SharedReport:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> SharedReport:
        return self

    def __repr__(self) -> str:
        return (
            f"SharedReport({self.current_context!r}, attachments={len(self.attachments)}, "
            f"children={len(self.children)})"
        )

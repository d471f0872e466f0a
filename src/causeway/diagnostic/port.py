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
"""Diagnostic — the optional-metadata capability an error kind may implement.

Every accessor may return ``None``; absence is the normal case and is never
signalled by raising. Callers that hold an arbitrary error value go through
the module-level lookup helpers, which treat values without the capability
as having no metadata at all.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from causeway.kernel.types import LabeledSpan, NamedSource, Severity


@runtime_checkable
class Diagnostic(Protocol):
    """Port describing per-error-kind diagnostic metadata."""

    def code(self) -> str | None: ...
    def help(self) -> str | None: ...
    def url(self) -> str | None: ...
    def severity(self) -> Severity | None: ...
    def labels(self) -> Iterable[LabeledSpan] | None: ...
    def source_code(self) -> NamedSource | None: ...
    def related(self) -> Iterable[Diagnostic] | None: ...
    def diagnostic_source(self) -> Diagnostic | None: ...


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


def diagnostic_code(value: object) -> str | None:
    """Return the stable code of *value*, or ``None``."""
    if isinstance(value, Diagnostic):
        return _text(value.code())
    return None


def diagnostic_help(value: object) -> str | None:
    """Return the remediation text of *value*, or ``None``."""
    if isinstance(value, Diagnostic):
        return _text(value.help())
    return None


def diagnostic_url(value: object) -> str | None:
    if isinstance(value, Diagnostic):
        return _text(value.url())
    return None


def diagnostic_severity(value: object) -> Severity | None:
    if isinstance(value, Diagnostic):
        return value.severity()
    return None


def diagnostic_labels(value: object) -> list[LabeledSpan] | None:
    """Return the labelled spans of *value* as a list, or ``None``."""
    if isinstance(value, Diagnostic):
        labels = value.labels()
        return None if labels is None else list(labels)
    return None


def diagnostic_source_code(value: object) -> NamedSource | None:
    if isinstance(value, Diagnostic):
        return value.source_code()
    return None


def diagnostic_related(value: object) -> list[Diagnostic] | None:
    if isinstance(value, Diagnostic):
        related = value.related()
        return None if related is None else list(related)
    return None

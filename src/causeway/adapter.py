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
"""LibReport — a raisable, Diagnostic-compatible wrapper around a report.

Callers define their own error classes, build a :class:`Report` around
them, and wrap it in ``LibReport`` to raise it through call layers::

    raise LibReport(Report(ConfigParseError(...)).attach("Cannot start without config."))

Every Diagnostic accessor is forwarded to the root context, except
:meth:`LibReport.url`, which is derived from the root's code and the
documentation base URL each time it is asked for. The adapter holds no
state of its own, so two wrappers around equal trees answer identically.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from causeway.api.conversion import ReportExt
from causeway.core.build import build_info, docs_url_for
from causeway.diagnostic.port import (
    Diagnostic,
    diagnostic_code,
    diagnostic_help,
    diagnostic_labels,
    diagnostic_related,
    diagnostic_severity,
    diagnostic_source_code,
)
from causeway.kernel.types import LabeledSpan, NamedSource, Severity
from causeway.report.report import Report
from causeway.report.shared import SharedReport

T = TypeVar("T")

AnyReport = Report | SharedReport


class LibReport(ReportExt, Exception):
    """Exception carrying a whole report tree.

    ``str(lib_report)`` is the display form of the root error.
    """

    def __init__(self, report: AnyReport) -> None:
        super().__init__(str(report.current_context))
        self.report: AnyReport = report

    @classmethod
    def from_error(cls, error: object) -> LibReport:
        """Wrap a bare error value in a single-node report."""
        if isinstance(error, BaseException):
            return cls(Report.capture(error))
        return cls(Report(error))

    def _conversion_root(self) -> AnyReport:
        return self.report

    @property
    def current_context(self) -> object:
        return self.report.current_context

    def iter_reports(self) -> Iterator[AnyReport]:
        return self.report.iter_reports()

    def downcast(self, context_type: type[T]) -> T | None:
        return self.report.downcast(context_type)

    # -- Diagnostic -------------------------------------------------------

    def code(self) -> str | None:
        return diagnostic_code(self.current_context)

    def help(self) -> str | None:
        return diagnostic_help(self.current_context)

    def url(self) -> str | None:
        """Documentation link for the root's code, computed on each call."""
        return docs_url_for(self.code(), build_info().docs_base_url)

    def severity(self) -> Severity | None:
        return diagnostic_severity(self.current_context)

    def labels(self) -> list[LabeledSpan] | None:
        return diagnostic_labels(self.current_context)

    def source_code(self) -> NamedSource | None:
        return diagnostic_source_code(self.current_context)

    def related(self) -> list[Diagnostic] | None:
        return diagnostic_related(self.current_context)

    def diagnostic_source(self) -> Diagnostic | None:
        root = self.current_context
        if isinstance(root, Diagnostic):
            return root.diagnostic_source()
        return None

    def __repr__(self) -> str:
        return f"LibReport({self.report!r})"

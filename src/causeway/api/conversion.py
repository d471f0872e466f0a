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
"""Tree-to-record conversion.

:func:`convert` is a pure function of the report content, the build
metadata and one freshly generated correlation id. It only reads the tree,
so independent threads may convert clones of the same shared report at the
same time.

Only the root node's diagnostic metadata reaches the record. A report with
several causes is classified by its primary cause; child codes and help
texts are not surfaced, even when the root has none.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Protocol
from uuid import uuid4

from causeway.api.error import ApiError
from causeway.core.build import BuildInfo, build_info, docs_url_for
from causeway.diagnostic.port import diagnostic_code, diagnostic_help

CorrelationIdSource = Callable[[], str]


class ReportNode(Protocol):
    """Read-only view of one report node, as consumed by the conversion."""

    @property
    def current_context(self) -> object: ...

    @property
    def attachments(self) -> Sequence[object]: ...

    def iter_reports(self) -> Iterator[ReportNode]: ...


def generate_correlation_id() -> str:
    return str(uuid4())


def flatten_history(nodes: Iterable[ReportNode]) -> list[str]:
    """Concatenate every node's attachments, in visitation and attachment order."""
    return [str(attachment) for node in nodes for attachment in node.attachments]


def convert(
    report: ReportNode,
    *,
    id_source: CorrelationIdSource | None = None,
    build: BuildInfo | None = None,
) -> ApiError:
    """Flatten *report* into an :class:`ApiError`. Never raises for missing metadata."""
    build = build if build is not None else build_info()
    root = report.current_context
    code = diagnostic_code(root)
    return ApiError(
        correlation_id=(id_source or generate_correlation_id)(),
        title=str(root),
        code=code,
        help=diagnostic_help(root),
        git_hash=build.git_hash,
        docs_url=docs_url_for(code, build.docs_base_url),
        history=tuple(flatten_history(report.iter_reports())),
    )


class ReportExt:
    """Adds ``to_api_error()`` to report handles.

    Subclasses provide :meth:`_conversion_root`, the node the conversion
    starts from.
    """

    __slots__ = ()

    def _conversion_root(self) -> ReportNode:
        return self  # type: ignore[return-value]

    def to_api_error(
        self,
        *,
        id_source: CorrelationIdSource | None = None,
        build: BuildInfo | None = None,
    ) -> ApiError:
        """Convert this report into a flat :class:`ApiError` with a fresh correlation id."""
        return convert(self._conversion_root(), id_source=id_source, build=build)

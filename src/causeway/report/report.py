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
"""Report — an exclusively owned, mutable error tree under construction.

A report wraps one error value of any type, an ordered list of attachments
(context strings or other objects) and an ordered list of child reports.
Children are additional causes of the same failure, not alternatives.

Lifecycle:

1. ``Report(error)`` / ``Report.new(error)`` starts an exclusive tree.
2. ``attach``, ``with_child`` and ``change_context`` grow it while it
   propagates up through call layers.
3. ``into_cloneable`` freezes it into a :class:`SharedReport`.

Once a report has been adopted by a parent or frozen, its handle is
consumed: mutating it again raises :class:`ReportConsumedException`.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from causeway.kernel.exceptions import ReportConsumedException, ReportOwnershipException
from causeway.report.shared import SharedReport
from causeway.report.view import ReportView


class Ownership(Enum):
    """Who may mutate a report node."""

    EXCLUSIVE = "exclusive"
    ADOPTED = "adopted"
    FROZEN = "frozen"


class Report(ReportView):
    """Exclusive report node. Mutating methods return ``self`` for chaining."""

    __slots__ = ("_context", "_attachments", "_children", "_ownership")

    def __init__(self, context: object) -> None:
        self._context = context
        self._attachments: list[Any] = []
        self._children: list[Report] = []
        self._ownership = Ownership.EXCLUSIVE

    @classmethod
    def new(cls, context: object) -> Report:
        return cls(context)

    @classmethod
    def capture(cls, exc: BaseException) -> Report:
        """Build a report from a raised exception and its causes.

        Exception notes become attachments. Members of an exception group,
        then the explicit ``__cause__`` (or the unsuppressed implicit
        ``__context__``), become children. A cause shared by several
        members appears under each of them; a cause that is already an
        ancestor on the same path is dropped.
        """
        root = cls._from_exception(exc)
        pending = [(root, exc, frozenset({id(exc)}))]
        visited: list[tuple[Report, list[Report]]] = []
        while pending:
            report, current, ancestors = pending.pop()
            causes = [cause for cause in _direct_causes(current) if id(cause) not in ancestors]
            children = [cls._from_exception(cause) for cause in causes]
            visited.append((report, children))
            for child, cause in zip(reversed(children), reversed(causes)):
                pending.append((child, cause, ancestors | {id(cause)}))

        # Reverse visit order adopts every subtree before its parent is adopted.
        for report, children in reversed(visited):
            for child in children:
                report.with_child(child)
        return root

    @classmethod
    def _from_exception(cls, exc: BaseException) -> Report:
        report = cls(exc)
        for note in getattr(exc, "__notes__", ()):
            report.attach(note)
        return report

    # -- read access ------------------------------------------------------

    @property
    def current_context(self) -> object:
        return self._context

    @property
    def attachments(self) -> tuple[Any, ...]:
        return tuple(self._attachments)

    @property
    def children(self) -> tuple[Report, ...]:
        return tuple(self._children)

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    def is_exclusive(self) -> bool:
        return self._ownership is Ownership.EXCLUSIVE

    # -- composition ------------------------------------------------------

    def _require_exclusive(self, operation: str) -> None:
        if self._ownership is not Ownership.EXCLUSIVE:
            raise ReportConsumedException(
                f"Cannot {operation}: report is {self._ownership.value}",
                help="Keep composing through the parent report, or the SharedReport returned by into_cloneable().",
                context={"operation": operation, "ownership": self._ownership.value},
            )

    def attach(self, attachment: Any) -> Report:
        """Append *attachment* verbatim to this node's attachments."""
        self._require_exclusive("attach")
        self._attachments.append(attachment)
        return self

    def attach_all(self, attachments: Iterable[Any]) -> Report:
        self._require_exclusive("attach")
        self._attachments.extend(attachments)
        return self

    def with_child(self, child: Report) -> Report:
        """Append *child* as the last child. The parent takes ownership of it."""
        self._require_exclusive("add a child")
        if not isinstance(child, Report):
            raise TypeError(f"Child must be an exclusive Report, got {type(child).__name__}")
        if child._ownership is Ownership.ADOPTED:
            raise ReportOwnershipException(
                "Cannot add a child: it already belongs to another report",
                context={"child": str(child)},
            )
        child._require_exclusive("be added as a child")
        if child is self:
            raise ReportOwnershipException(
                "Cannot add a child: the report would become its own descendant",
                context={"child": str(child)},
            )
        child._ownership = Ownership.ADOPTED
        self._children.append(child)
        return self

    def change_context(self, context: object) -> Report:
        """Return a new report for *context* whose only child is this report."""
        self._require_exclusive("change the context")
        return Report(context).with_child(self)

    def into_cloneable(self) -> SharedReport:
        """Freeze this tree into a :class:`SharedReport`. The handle is consumed."""
        self._require_exclusive("freeze")
        nodes = list(self.iter_reports())
        frozen: dict[int, SharedReport] = {}
        # Reverse pre-order visits every child before its parent.
        for node in reversed(nodes):
            frozen[id(node)] = SharedReport(
                node._context,
                tuple(node._attachments),
                tuple(frozen[id(child)] for child in node._children),
            )
            node._ownership = Ownership.FROZEN
        return frozen[id(self)]

    def __repr__(self) -> str:
        return (
            f"Report({self._context!r}, attachments={len(self._attachments)}, "
            f"children={len(self._children)}, ownership={self._ownership.value})"
        )


def _direct_causes(exc: BaseException) -> list[BaseException]:
    causes: list[BaseException] = []
    if isinstance(exc, BaseExceptionGroup):
        causes.extend(exc.exceptions)
    if exc.__cause__ is not None:
        causes.append(exc.__cause__)
    elif exc.__context__ is not None and not exc.__suppress_context__:
        causes.append(exc.__context__)
    return causes

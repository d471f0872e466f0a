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
"""Read operations shared by exclusive and frozen report handles."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Self, TypeVar

from causeway.api.conversion import ReportExt

T = TypeVar("T")


class ReportView(ReportExt):
    """Traversal and downcasting over a report tree.

    Subclasses expose ``current_context``, ``attachments`` and ``children``.
    """

    __slots__ = ()

    def iter_reports(self) -> Iterator[Self]:
        """Yield every node pre-order: the node, then each child's subtree left to right.

        Each call starts a fresh walk.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))  # type: ignore[attr-defined]

    def iter_contexts(self, context_type: type[T]) -> Iterator[T]:
        """Yield the context of every node, pre-order, that is an instance of *context_type*."""
        for node in self.iter_reports():
            context = node.current_context  # type: ignore[attr-defined]
            if isinstance(context, context_type):
                yield context

    def downcast(self, context_type: type[T]) -> T | None:
        """Return the root context as *context_type*, or ``None`` when it is not one."""
        context = self.current_context  # type: ignore[attr-defined]
        if isinstance(context, context_type):
            return context
        return None

    def __str__(self) -> str:
        return str(self.current_context)  # type: ignore[attr-defined]

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
"""Terminal rendering of reports with Rich.

The renderer reads a report through the Diagnostic capability of its root
and shows, in order: a severity/code header, the message, the labelled
source snippet, help, the documentation link, the root attachments, and
the tree of child causes with their own attachments.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console, Group, RenderableType
from rich.text import Text
from rich.tree import Tree

from causeway.core.build import build_info, docs_url_for
from causeway.diagnostic.port import (
    diagnostic_code,
    diagnostic_help,
    diagnostic_labels,
    diagnostic_severity,
    diagnostic_source_code,
)
from causeway.kernel.types import LabeledSpan, NamedSource, Severity

_SEVERITY_STYLE: dict[Severity | None, tuple[str, str]] = {
    Severity.ERROR: ("×", "bold red"),
    Severity.WARNING: ("⚠", "bold yellow"),
    Severity.ADVICE: ("☞", "bold cyan"),
    None: ("×", "bold red"),
}


class GraphicalReportRenderer:
    """Builds Rich renderables for a report tree."""

    def __init__(self, docs_base_url: str | None = None, context_lines: int = 1) -> None:
        self._docs_base_url = docs_base_url
        self._context_lines = context_lines

    def render(self, report: Any) -> RenderableType:
        root = report.current_context
        parts: list[RenderableType] = [self._header(root)]

        source = diagnostic_source_code(root)
        labels = diagnostic_labels(root)
        if source is not None and labels:
            parts.append(self._snippet(source, labels))

        help_text = diagnostic_help(root)
        if help_text is not None:
            parts.append(Text.assemble(("  help: ", "bold cyan"), help_text))

        code = diagnostic_code(root)
        base_url = self._docs_base_url or build_info().docs_base_url
        url = docs_url_for(code, base_url)
        if url is not None:
            parts.append(Text.assemble(("  docs: ", "dim"), (url, "underline")))

        for attachment in report.attachments:
            parts.append(Text.assemble(("  ├╴ ", "dim"), str(attachment)))

        if report.children:
            tree = Tree(Text("Caused by", style="dim"), guide_style="dim")
            for child in report.children:
                self._add_subtree(tree, child)
            parts.append(tree)

        return Group(*parts)

    def print(self, report: Any, console: Console | None = None) -> None:
        (console or Console(stderr=True)).print(self.render(report))

    def _header(self, root: object) -> Text:
        icon, style = _SEVERITY_STYLE[diagnostic_severity(root)]
        header = Text()
        code = diagnostic_code(root)
        if code is not None:
            header.append(f"{code}\n", style=style)
        header.append(f"  {icon} ", style=style)
        header.append(str(root))
        return header

    def _snippet(self, source: NamedSource, labels: list[LabeledSpan]) -> Text:
        lines = source.text.splitlines() or [""]
        first = min(source.line_col(label.offset)[0] for label in labels)
        last = max(source.line_col(label.offset)[0] for label in labels)
        line, col = source.line_col(labels[0].offset)
        width = len(str(min(last + self._context_lines, len(lines))))

        out = Text()
        out.append(f"   ╭─[{source.name}:{line}:{col}]\n", style="dim")
        start = max(first - self._context_lines, 1)
        stop = min(last + self._context_lines, len(lines))
        for number in range(start, stop + 1):
            out.append(f" {number:>{width}} │ ", style="dim")
            out.append(f"{lines[number - 1]}\n")
            for label in labels:
                label_line, label_col = source.line_col(label.offset)
                if label_line != number:
                    continue
                marker = "^" * max(label.length, 1)
                out.append(f" {'':>{width}} · ", style="dim")
                out.append(" " * (label_col - 1) + marker, style="bold magenta")
                if label.label:
                    out.append(f" {label.label}", style="bold magenta")
                out.append("\n")
        out.append("   ╰────", style="dim")
        return out

    def _add_subtree(self, tree: Tree, node: Any) -> None:
        pending: list[tuple[Tree, Any]] = [(tree, node)]
        while pending:
            parent, current = pending.pop()
            context = current.current_context
            code = diagnostic_code(context)
            label = Text(str(context), style="bold")
            if code is not None:
                label.append(f" [{code}]", style="dim")
            branch = parent.add(label)
            for attachment in current.attachments:
                branch.add(Text(str(attachment), style="italic"))
            pending.extend((branch, child) for child in reversed(current.children))

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
"""Declarative Diagnostic implementations for error classes.

Usage::

    @diagnostic(code="config::invalid_format", help="Ensure the configuration file is valid JSON.")
    @dataclass(eq=False)
    class ConfigParseError(DiagnosticMixin, Exception):
        path: str
        src: NamedSource = source_code()
        span: SourceSpan = label("syntax error here")

        def __str__(self) -> str:
            return f"Failed to parse config at {self.path}"

``@diagnostic`` stores class-level metadata; ``DiagnosticMixin`` reads it
back and scans dataclass fields marked with :func:`label`,
:func:`source_code` and :func:`related`. Anything not declared stays
``None``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from causeway.kernel.types import LabeledSpan, NamedSource, Severity, SourceSpan

T = TypeVar("T")

_DIAGNOSTIC_ATTR = "__causeway_diagnostic__"

_LABEL_KEY = "causeway.label"
_SOURCE_CODE_KEY = "causeway.source_code"
_RELATED_KEY = "causeway.related"

HelpText = str | Callable[[Any], str | None] | None


@dataclass(frozen=True)
class DiagnosticInfo:
    """Class-level metadata recorded by :func:`diagnostic`."""

    code: str | None = None
    help: HelpText = None
    severity: Severity | None = None
    url: str | None = None


_EMPTY = DiagnosticInfo()


def diagnostic(
    *,
    code: str | None = None,
    help: HelpText = None,
    severity: Severity | None = None,
    url: str | None = None,
) -> Callable[[type[T]], type[T]]:
    """Attach diagnostic metadata to an error class.

    *help* may be a callable receiving the error instance, for text that
    depends on field values.
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _DIAGNOSTIC_ATTR, DiagnosticInfo(code=code, help=help, severity=severity, url=url))
        return cls

    return decorator


def diagnostic_info(cls_or_instance: Any) -> DiagnosticInfo:
    """Return the metadata declared with :func:`diagnostic`, or an empty record."""
    return getattr(cls_or_instance, _DIAGNOSTIC_ATTR, _EMPTY)


def label(message: str | None = None, **kwargs: Any) -> Any:
    """Mark a dataclass field holding a span as a labelled location."""
    return dataclasses.field(metadata={_LABEL_KEY: message}, **kwargs)


def source_code(**kwargs: Any) -> Any:
    """Mark a dataclass field holding the :class:`NamedSource` labels index into."""
    return dataclasses.field(metadata={_SOURCE_CODE_KEY: True}, **kwargs)


def related(**kwargs: Any) -> Any:
    """Mark a dataclass field holding a sequence of related diagnostics."""
    kwargs.setdefault("default_factory", list)
    return dataclasses.field(metadata={_RELATED_KEY: True}, **kwargs)


def _marked_fields(instance: Any, key: str) -> list[dataclasses.Field[Any]]:
    if not dataclasses.is_dataclass(instance):
        return []
    return [f for f in dataclasses.fields(instance) if key in f.metadata]


class DiagnosticMixin:
    """Default Diagnostic implementation driven by declared metadata.

    Subclasses may override any accessor; the defaults never raise.
    """

    def code(self) -> str | None:
        return diagnostic_info(self).code

    def help(self) -> str | None:
        text = diagnostic_info(self).help
        if callable(text):
            return text(self)
        return text

    def url(self) -> str | None:
        return diagnostic_info(self).url

    def severity(self) -> Severity | None:
        return diagnostic_info(self).severity

    def labels(self) -> Iterable[LabeledSpan] | None:
        fields = _marked_fields(self, _LABEL_KEY)
        if not fields:
            return None
        spans: list[LabeledSpan] = []
        for f in fields:
            value = getattr(self, f.name)
            if value is None:
                continue
            spans.append(LabeledSpan(f.metadata[_LABEL_KEY], SourceSpan.of(value)))
        return spans

    def source_code(self) -> NamedSource | None:
        for f in _marked_fields(self, _SOURCE_CODE_KEY):
            value = getattr(self, f.name)
            if value is not None:
                return value
        return None

    def related(self) -> Iterable[Any] | None:
        items: list[Any] = []
        for f in _marked_fields(self, _RELATED_KEY):
            items.extend(getattr(self, f.name) or ())
        return items or None

    def diagnostic_source(self) -> Any | None:
        return None

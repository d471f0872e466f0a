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
"""Causeway — error reports as cause trees, flattened once into a stable API record."""

__version__ = "0.1.0"

from causeway.adapter import LibReport
from causeway.api import ApiError, ReportExt, convert, generate_correlation_id, report_api_error
from causeway.core import BuildInfo, build_info
from causeway.diagnostic import Diagnostic, DiagnosticMixin, diagnostic, label, related, source_code
from causeway.kernel import (
    CausewayException,
    LabeledSpan,
    NamedSource,
    ReportConsumedException,
    ReportOwnershipException,
    Severity,
    SourceSpan,
)
from causeway.report import Report, SharedReport

__all__ = [
    "__version__",
    # Report tree
    "Report",
    "SharedReport",
    # Diagnostic
    "Diagnostic",
    "DiagnosticMixin",
    "diagnostic",
    "label",
    "related",
    "source_code",
    "Severity",
    "SourceSpan",
    "LabeledSpan",
    "NamedSource",
    # Adapter and conversion
    "LibReport",
    "ReportExt",
    "ApiError",
    "convert",
    "generate_correlation_id",
    "report_api_error",
    # Build
    "BuildInfo",
    "build_info",
    # Exceptions
    "CausewayException",
    "ReportConsumedException",
    "ReportOwnershipException",
]

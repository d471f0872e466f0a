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
"""Causeway Diagnostic — optional per-error-kind metadata capability."""

from causeway.diagnostic.derive import (
    DiagnosticInfo,
    DiagnosticMixin,
    diagnostic,
    diagnostic_info,
    label,
    related,
    source_code,
)
from causeway.diagnostic.port import (
    Diagnostic,
    diagnostic_code,
    diagnostic_help,
    diagnostic_labels,
    diagnostic_related,
    diagnostic_severity,
    diagnostic_source_code,
    diagnostic_url,
)

__all__ = [
    # Port
    "Diagnostic",
    "diagnostic_code",
    "diagnostic_help",
    "diagnostic_labels",
    "diagnostic_related",
    "diagnostic_severity",
    "diagnostic_source_code",
    "diagnostic_url",
    # Declarative implementation
    "DiagnosticInfo",
    "DiagnosticMixin",
    "diagnostic",
    "diagnostic_info",
    "label",
    "related",
    "source_code",
]

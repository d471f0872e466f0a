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
"""Error kinds used by the demo CLI.

This is the pattern consuming code follows: define plain exception classes
with declared diagnostics, raise and catch them internally, and wrap them in
a LibReport only at the outward boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from causeway.diagnostic import DiagnosticMixin, diagnostic, label, source_code
from causeway.kernel.types import NamedSource, SourceSpan


class CliError(DiagnosticMixin, Exception):
    """Base class for demo CLI errors."""


@diagnostic(code="config::invalid_format", help="Ensure the configuration file is valid JSON.")
@dataclass(eq=False)
class ConfigParseError(CliError):
    """Config file could not be parsed; carries the snippet for rendering."""

    path: str
    src: NamedSource = source_code()
    span: SourceSpan = label("syntax error here")

    def __str__(self) -> str:
        return f"Failed to parse config at {self.path}"


@diagnostic(
    code="network::timeout",
    help="Check network connectivity and consider increasing the timeout.",
)
@dataclass(eq=False)
class NetworkTimeout(CliError):
    timeout: int

    def __str__(self) -> str:
        return f"Network timeout after {self.timeout}s"


@diagnostic(code="io::error")
@dataclass(eq=False)
class IoError(CliError):
    """Wraps an OSError raised while touching the filesystem."""

    source: OSError

    def __str__(self) -> str:
        return f"IO error: {self.source}"

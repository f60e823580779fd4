# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Shared leaf-level types used across license_sniffer.

This module must have **zero** imports from other ``license_sniffer``
modules to avoid circular-import chains.  It is safe to import from
any module in the project.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

__all__ = [
    'UNKNOWN',
    'DependencyRecord',
    'LicenseResult',
    'LicenseTemplate',
    'ModuleVisit',
]


@dataclass(frozen=True)
class LicenseResult:
    """Outcome of a license detection strategy.

    Attributes:
        names: License identifiers in the order they were found.
            Empty when the license is unknown.
        text: Full license body, if one was found or generated.
    """

    names: tuple[str, ...] = ()
    text: str | None = None

    @property
    def is_known(self) -> bool:
        """``True`` if at least one license name was detected."""
        return bool(self.names)

    def with_text(self, text: str | None) -> LicenseResult:
        """Return a copy of this result carrying *text*."""
        return replace(self, text=text)

    def describe(self) -> str:
        """Return the license names as a single human-readable string."""
        if not self.names:
            return 'Unknown'
        return ', '.join(self.names)

    def __str__(self) -> str:
        """Return :meth:`describe`."""
        return self.describe()


#: Shared "no license detected" result.  Never mutated; derive a new
#: value with :meth:`LicenseResult.with_text` instead.
UNKNOWN = LicenseResult()


@dataclass(frozen=True)
class LicenseTemplate:
    """A reference license text from the catalog.

    Attributes:
        name: Canonical license name (always ``aliases[0]``).
        aliases: Every name that refers to this license.
        text: Template body with ``<year>`` and ``<copyright holders>``
            placeholders.
    """

    name: str
    aliases: tuple[str, ...]
    text: str


@dataclass(frozen=True)
class ModuleVisit:
    """Pending work item for the dependency tree walker."""

    module_path: Path
    parent_chain: tuple[str, ...] = ()


@dataclass(frozen=True)
class DependencyRecord:
    """License of one module in a dependency tree.

    Attributes:
        module_path: Directory of the module.
        names: Detected license names.
        text: Detected or generated license text.
        dependency_chain: ``name@version`` of every ancestor, ending
            with the module itself.
    """

    module_path: Path
    names: tuple[str, ...]
    text: str | None
    dependency_chain: tuple[str, ...]

    @property
    def is_known(self) -> bool:
        """``True`` if the module's license was detected."""
        return bool(self.names)

    @property
    def identity(self) -> str:
        """The module's own ``name@version``."""
        return self.dependency_chain[-1] if self.dependency_chain else ''

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""
        return {
            'path': str(self.module_path),
            'names': list(self.names),
            'license': LicenseResult(self.names).describe(),
            'dependency_chain': list(self.dependency_chain),
            'has_text': self.text is not None,
        }

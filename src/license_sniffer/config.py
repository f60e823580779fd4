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

r"""Configuration for license_sniffer.

Settings live in an optional ``license-sniffer.toml`` next to the root
``package.json``::

    [license-sniffer]
    generate_body = true
    catalog = "tools/licenses.toml"
    format = "json"
    color = false

Priority order (highest wins):

1. CLI flags (``--no-body``, ``--json``)
2. ``LICENSE_SNIFFER_NO_BODY`` / ``LICENSE_SNIFFER_FORMAT`` env vars
3. ``license-sniffer.toml``
4. Built-in defaults
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from license_sniffer.catalog import LicenseCatalog
from license_sniffer.errors import ConfigError
from license_sniffer.sniffer import SniffOptions

__all__ = [
    'CONFIG_FILENAME',
    'SnifferConfig',
    'load_config',
    'resolve_config',
]

CONFIG_FILENAME: Final[str] = 'license-sniffer.toml'

_SECTION: Final[str] = 'license-sniffer'
_FORMATS: Final[frozenset[str]] = frozenset({'table', 'json'})
_KNOWN_KEYS: Final[frozenset[str]] = frozenset({'generate_body', 'catalog', 'format', 'color'})


@dataclass(frozen=True)
class SnifferConfig:
    """Resolved license_sniffer settings.

    Attributes:
        generate_body: Render template text when none is on disk.
        catalog: Path to a replacement catalog TOML, relative to the
            config file's directory.  Empty for the built-in catalog.
        format: CLI output format, ``"table"`` or ``"json"``.
        color: Force color on or off; ``None`` auto-detects.
        root: Directory the config was loaded from.
    """

    generate_body: bool = True
    catalog: str = ''
    format: str = 'table'
    color: bool | None = None
    root: Path | None = None

    def catalog_path(self) -> Path | None:
        """Return the absolute catalog path, or ``None`` for the built-in one."""
        if not self.catalog:
            return None
        path = Path(self.catalog)
        if not path.is_absolute() and self.root is not None:
            path = self.root / path
        return path

    def to_options(self) -> SniffOptions:
        """Build :class:`SniffOptions`, loading the custom catalog if set."""
        path = self.catalog_path()
        catalog = LicenseCatalog.load(path) if path is not None else None
        return SniffOptions(generate_body=self.generate_body, catalog=catalog)


def _parse_section(raw: dict[str, Any]) -> SnifferConfig:
    """Validate the ``[license-sniffer]`` table."""
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(
            f'Unknown key(s) in [{_SECTION}]: {", ".join(unknown)}',
            hint=f'Valid keys: {", ".join(sorted(_KNOWN_KEYS))}.',
        )

    generate_body = raw.get('generate_body', True)
    if not isinstance(generate_body, bool):
        raise ConfigError(f'{_SECTION}.generate_body must be a boolean')

    catalog = raw.get('catalog', '')
    if not isinstance(catalog, str):
        raise ConfigError(f'{_SECTION}.catalog must be a string path')

    fmt = raw.get('format', 'table')
    if fmt not in _FORMATS:
        raise ConfigError(f'{_SECTION}.format must be one of: {", ".join(sorted(_FORMATS))}')

    color = raw.get('color')
    if color is not None and not isinstance(color, bool):
        raise ConfigError(f'{_SECTION}.color must be a boolean')

    return SnifferConfig(generate_body=generate_body, catalog=catalog, format=fmt, color=color)


def load_config(root: Path) -> SnifferConfig:
    """Load ``license-sniffer.toml`` from *root*.

    A missing file yields the defaults.

    Raises:
        ConfigError: The file is not valid TOML or has invalid settings.
    """
    path = root / CONFIG_FILENAME
    if not path.is_file():
        return SnifferConfig(root=root)
    try:
        with path.open('rb') as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f'Cannot read {path}: {exc}') from exc

    section = data.get(_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f'[{_SECTION}] in {path} must be a table')
    return replace(_parse_section(section), root=root)


def resolve_config(
    base: SnifferConfig,
    *,
    no_body: bool = False,
    output_format: str | None = None,
    color: bool | None = None,
) -> SnifferConfig:
    """Merge env vars and CLI flags into *base*.

    Args:
        base: Config from ``license-sniffer.toml``.
        no_body: ``True`` if ``--no-body`` was passed.
        output_format: ``--json`` / ``--format`` override.
        color: ``--color`` / ``--no-color`` override.

    Returns:
        Resolved :class:`SnifferConfig`.
    """
    generate_body = base.generate_body
    fmt = base.format

    env_no_body = os.environ.get('LICENSE_SNIFFER_NO_BODY', '').lower()
    if env_no_body in ('1', 'true', 'yes'):
        generate_body = False

    env_format = os.environ.get('LICENSE_SNIFFER_FORMAT', '').strip().lower()
    if env_format:
        if env_format not in _FORMATS:
            raise ConfigError(f'LICENSE_SNIFFER_FORMAT must be one of: {", ".join(sorted(_FORMATS))}')
        fmt = env_format

    if no_body:
        generate_body = False
    if output_format is not None:
        fmt = output_format

    return replace(
        base,
        generate_body=generate_body,
        format=fmt,
        color=base.color if color is None else color,
    )

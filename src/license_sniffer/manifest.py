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

r"""Read ``package.json`` manifests and extract their license names.

Supported license field shapes::

    "license": "MIT"
    "license": {"type": "MIT", "url": "..."}
    "licenses": [{"type": "MIT"}, {"type": "Apache-2.0"}]
    "licenses": ["MIT", "Apache-2.0"]

``license`` takes precedence over ``licenses``.  Values are kept
verbatim: an SPDX expression such as ``"MIT OR Apache-2.0"`` is one
name.

Usage::

    from license_sniffer.manifest import resolve_manifest_licenses

    resolve_manifest_licenses({'license': 'MIT'}).names  # ("MIT",)
    resolve_manifest_licenses('{"licenses": [{"type": "BSD"}]}').names  # ("BSD",)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from license_sniffer._fs import read_text_file
from license_sniffer._types import LicenseResult
from license_sniffer.errors import ParseError

__all__ = [
    'MANIFEST_FILENAME',
    'manifest_identity',
    'parse_manifest',
    'read_manifest',
    'resolve_manifest_licenses',
]

#: Manifest file name inside every module directory.
MANIFEST_FILENAME: Final[str] = 'package.json'


def parse_manifest(text: str, *, source: str = '<string>') -> dict[str, Any]:
    """Parse manifest JSON text into a dict.

    Raises:
        ParseError: *text* is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f'Invalid JSON in {source}: {exc}',
            hint='Check the manifest for unquoted keys or trailing commas.',
        ) from exc
    if not isinstance(data, dict):
        raise ParseError(f'Expected a JSON object in {source}, got {type(data).__name__}')
    return data


async def read_manifest(module_path: Path) -> dict[str, Any]:
    """Read and parse the ``package.json`` of the module at *module_path*.

    Raises:
        NotFoundError: The module has no manifest.
        ParseError: The manifest is malformed.
    """
    manifest_path = module_path / MANIFEST_FILENAME
    text = await read_text_file(manifest_path)
    return parse_manifest(text, source=str(manifest_path))


def manifest_identity(manifest: Mapping[str, Any]) -> str:
    """Return ``name@version`` for *manifest*."""
    return f'{manifest.get("name", "")}@{manifest.get("version", "")}'


def _names_from(value: object) -> list[str]:
    """Resolve one license field value to an ordered list of names."""
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, Mapping):
        lic_type = value.get('type')
        return [lic_type] if isinstance(lic_type, str) and lic_type else []
    if isinstance(value, list):
        names: list[str] = []
        for item in value:
            names.extend(_names_from(item))
        return names
    return []


def resolve_manifest_licenses(manifest: Mapping[str, Any] | str) -> LicenseResult:
    """Return the license names declared by *manifest*.

    Args:
        manifest: A parsed manifest, or its JSON text.

    Returns:
        A :class:`LicenseResult` with the declared names and no text.
        Names are empty when neither field is usable.

    Raises:
        ParseError: *manifest* is a string that is not a JSON object.
    """
    if isinstance(manifest, str):
        manifest = parse_manifest(manifest)
    names = _names_from(manifest.get('license'))
    if not names:
        names = _names_from(manifest.get('licenses'))
    return LicenseResult(names=tuple(names))

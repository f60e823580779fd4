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

"""Tests for the shared result and record types."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from license_sniffer._types import UNKNOWN, DependencyRecord, LicenseResult


class TestLicenseResult:
    """Tests for LicenseResult."""

    def test_unknown_has_no_names_or_text(self) -> None:
        """Test unknown has no names or text."""
        assert UNKNOWN.names == ()
        assert UNKNOWN.text is None
        assert not UNKNOWN.is_known

    def test_known_when_names_present(self) -> None:
        """Test known when names present."""
        assert LicenseResult(names=('MIT',)).is_known

    def test_frozen(self) -> None:
        """Test frozen."""
        with pytest.raises(AttributeError):
            UNKNOWN.text = 'x'  # type: ignore[misc]

    def test_with_text_derives_new_value(self) -> None:
        """Test with_text leaves the shared unknown result untouched."""
        derived = UNKNOWN.with_text('some text')
        assert derived.text == 'some text'
        assert derived is not UNKNOWN
        assert UNKNOWN.text is None

    def test_with_text_keeps_names(self) -> None:
        """Test with_text keeps names."""
        result = LicenseResult(names=('MIT', 'ISC')).with_text('body')
        assert result.names == ('MIT', 'ISC')
        assert result.text == 'body'

    def test_describe_joins_names(self) -> None:
        """Test describe joins names."""
        assert LicenseResult(names=('MIT', 'Apache-2.0')).describe() == 'MIT, Apache-2.0'

    def test_describe_unknown(self) -> None:
        """Test describe unknown."""
        assert UNKNOWN.describe() == 'Unknown'
        assert str(UNKNOWN) == 'Unknown'


class TestDependencyRecord:
    """Tests for DependencyRecord."""

    def _record(self, *, names: tuple[str, ...] = ('MIT',)) -> DependencyRecord:
        return DependencyRecord(
            module_path=Path('/app/node_modules/lib'),
            names=names,
            text=None,
            dependency_chain=('app@1.0.0', 'lib@2.0.0'),
        )

    def test_identity_is_last_chain_entry(self) -> None:
        """Test identity is last chain entry."""
        assert self._record().identity == 'lib@2.0.0'

    def test_is_known(self) -> None:
        """Test is known."""
        assert self._record().is_known
        assert not self._record(names=()).is_known

    def test_to_dict_is_json_serializable(self) -> None:
        """Test to_dict is JSON serializable."""
        data = json.loads(json.dumps(self._record().to_dict()))
        assert data == {
            'path': str(Path('/app/node_modules/lib')),
            'names': ['MIT'],
            'license': 'MIT',
            'dependency_chain': ['app@1.0.0', 'lib@2.0.0'],
            'has_text': False,
        }

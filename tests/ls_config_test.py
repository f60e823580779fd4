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

"""Tests for license-sniffer.toml loading and override resolution."""

from __future__ import annotations

from pathlib import Path

import pytest
from license_sniffer.config import CONFIG_FILENAME, SnifferConfig, load_config, resolve_config
from license_sniffer.errors import CatalogError, ConfigError


def _write(root: Path, body: str) -> Path:
    (root / CONFIG_FILENAME).write_text(body)
    return root


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('LICENSE_SNIFFER_NO_BODY', raising=False)
    monkeypatch.delenv('LICENSE_SNIFFER_FORMAT', raising=False)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_file_defaults(self, tmp_path: Path) -> None:
        """Test missing file defaults."""
        config = load_config(tmp_path)
        assert config == SnifferConfig(root=tmp_path)
        assert config.generate_body is True
        assert config.format == 'table'
        assert config.color is None

    def test_all_keys(self, tmp_path: Path) -> None:
        """Test all keys."""
        _write(
            tmp_path,
            '[license-sniffer]\ngenerate_body = false\ncatalog = "lic.toml"\nformat = "json"\ncolor = true\n',
        )
        config = load_config(tmp_path)
        assert config.generate_body is False
        assert config.catalog == 'lic.toml'
        assert config.format == 'json'
        assert config.color is True
        assert config.root == tmp_path

    def test_missing_section_defaults(self, tmp_path: Path) -> None:
        """Test missing section defaults."""
        _write(tmp_path, '[other]\nx = 1\n')
        assert load_config(tmp_path) == SnifferConfig(root=tmp_path)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Test unknown key."""
        _write(tmp_path, '[license-sniffer]\ngenerate_bdy = false\n')
        with pytest.raises(ConfigError, match='Unknown key') as excinfo:
            load_config(tmp_path)
        assert 'generate_body' in excinfo.value.hint

    @pytest.mark.parametrize(
        ('body', 'message'),
        [
            ('generate_body = "no"', 'generate_body must be a boolean'),
            ('catalog = 3', 'catalog must be a string path'),
            ('format = "yaml"', 'format must be one of: json, table'),
            ('color = "auto"', 'color must be a boolean'),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, body: str, message: str) -> None:
        """Test invalid values."""
        _write(tmp_path, f'[license-sniffer]\n{body}\n')
        with pytest.raises(ConfigError, match=message):
            load_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test invalid toml."""
        _write(tmp_path, '[license-sniffer\n')
        with pytest.raises(ConfigError, match='Cannot read'):
            load_config(tmp_path)

    def test_section_not_a_table(self, tmp_path: Path) -> None:
        """Test section not a table."""
        _write(tmp_path, '"license-sniffer" = 1\n')
        with pytest.raises(ConfigError, match='must be a table'):
            load_config(tmp_path)


class TestResolveConfig:
    """Tests for resolve_config()."""

    def test_no_overrides(self) -> None:
        """Test no overrides."""
        base = SnifferConfig(format='json')
        assert resolve_config(base) == base

    def test_env_no_body(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test env no body."""
        monkeypatch.setenv('LICENSE_SNIFFER_NO_BODY', 'true')
        assert resolve_config(SnifferConfig()).generate_body is False

    def test_env_no_body_other_value_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test env no body other value ignored."""
        monkeypatch.setenv('LICENSE_SNIFFER_NO_BODY', '0')
        assert resolve_config(SnifferConfig()).generate_body is True

    def test_env_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test env format."""
        monkeypatch.setenv('LICENSE_SNIFFER_FORMAT', 'JSON')
        assert resolve_config(SnifferConfig()).format == 'json'

    def test_env_format_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test env format invalid."""
        monkeypatch.setenv('LICENSE_SNIFFER_FORMAT', 'xml')
        with pytest.raises(ConfigError, match='LICENSE_SNIFFER_FORMAT'):
            resolve_config(SnifferConfig())

    def test_flags_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test flags beat env."""
        monkeypatch.setenv('LICENSE_SNIFFER_FORMAT', 'json')
        assert resolve_config(SnifferConfig(), output_format='table').format == 'table'

    def test_no_body_flag(self) -> None:
        """Test no body flag."""
        assert resolve_config(SnifferConfig(), no_body=True).generate_body is False

    def test_color_flag(self) -> None:
        """Test color flag."""
        assert resolve_config(SnifferConfig(color=True), color=False).color is False
        assert resolve_config(SnifferConfig(color=True)).color is True


class TestToOptions:
    """Tests for SnifferConfig.to_options()."""

    def test_builtin_catalog(self) -> None:
        """Test builtin catalog."""
        options = SnifferConfig(generate_body=False).to_options()
        assert options.generate_body is False
        assert options.catalog is None

    def test_relative_catalog_path(self, tmp_path: Path) -> None:
        """Test relative catalog path."""
        (tmp_path / 'lic.toml').write_text('[[license]]\nname = "House"\ntext = "Keep out."\n')
        options = SnifferConfig(catalog='lic.toml', root=tmp_path).to_options()
        assert options.catalog is not None
        assert options.catalog.names() == ('House',)

    def test_missing_catalog(self, tmp_path: Path) -> None:
        """Test missing catalog."""
        with pytest.raises(CatalogError):
            SnifferConfig(catalog='nope.toml', root=tmp_path).to_options()

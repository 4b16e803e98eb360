"""Tests for the configuration module."""

from pathlib import Path

import pytest

from orderly._cli.config import (
    ConfigError,
    OrderlyConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfig:
    """Tests for loading the [tool.orderly] section."""

    def test_full_configuration(self, tmp_path: Path) -> None:
        """Should parse every supported key."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.orderly]
graph = "deps/graph.toml"
include_dependencies = true
output = "build/order.toml"
""",
        )

        config = load_config(pyproject)

        assert config.graph == tmp_path / "deps/graph.toml"
        assert config.include_dependencies is True
        assert config.output == tmp_path / "build/order.toml"
        assert config.project_root == tmp_path

    def test_absolute_graph_path(self, tmp_path: Path) -> None:
        """Should keep absolute paths as they are."""
        graph = tmp_path / "elsewhere" / "graph.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.orderly]\ngraph = "{graph.as_posix()}"\n')

        config = load_config(pyproject)

        assert config.graph == graph

    def test_invalid_graph_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when graph is not a string."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.orderly]\ngraph = 123\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_invalid_include_dependencies_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when include_dependencies is not a boolean."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.orderly]\ninclude_dependencies = "yes"\n')

        with pytest.raises(ConfigError, match="expected boolean"):
            load_config(pyproject)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for invalid TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("invalid toml [[[")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestLoadConfigEmptySection:
    """Tests for empty or missing configuration."""

    def test_no_tool_orderly_section(self, tmp_path: Path) -> None:
        """Should return empty config when no [tool.orderly] section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config.graph is None
        assert config.include_dependencies is None
        assert config.output is None
        assert config.project_root == tmp_path

    def test_get_config_without_pyproject(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should return a default config outside of any project."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("orderly._cli.config.find_pyproject_toml", lambda: None)

        assert get_config() == OrderlyConfig()


class TestOrderlyConfigDataclass:
    """Tests for the OrderlyConfig dataclass."""

    def test_default_values(self) -> None:
        """Should have None as default values."""
        config = OrderlyConfig()

        assert config.graph is None
        assert config.include_dependencies is None
        assert config.output is None
        assert config.project_root is None

    def test_frozen(self) -> None:
        """Should be frozen (immutable)."""
        config = OrderlyConfig()

        with pytest.raises(AttributeError):
            config.graph = Path("graph.toml")  # type: ignore[misc]

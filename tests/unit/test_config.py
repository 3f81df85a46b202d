"""
Assets config loader tests.
"""

from pathlib import Path

import pytest

from src.config import CONFIG_PATH_ENV, AssetsConfig, load_config


def _write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


class TestConfigDefaults:
    def test_missing_default_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(default_path=tmp_path / "assets.yaml")

        assert config == AssetsConfig()
        assert config.icons.tool == "svgexport"
        assert config.icons.icon_dir == "src-tauri/icons"
        assert config.icons.source == "icon.svg"
        assert config.style.filename == "tailwind.config.js"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "assets.yaml", "")
        assert load_config(path) == AssetsConfig()


class TestConfigLoading:
    def test_partial_override(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "assets.yaml", "icons:\n  tool: /usr/local/bin/svgexport\n")

        config = load_config(path)

        assert config.icons.tool == "/usr/local/bin/svgexport"
        assert config.icons.icon_dir == "src-tauri/icons"

    def test_env_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write(tmp_path / "custom.yaml", "style:\n  output_dir: web\n")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

        config = load_config(default_path=tmp_path / "assets.yaml")

        assert config.style.output_dir == "web"

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_env_missing_file_raises(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "nope.yaml"))
        with pytest.raises(FileNotFoundError):
            load_config()


class TestConfigValidation:
    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "assets.yaml", "icons:\n  timeout: 30\n")
        with pytest.raises(ValueError, match="Config validation failed"):
            load_config(path)

    def test_empty_tool_rejected(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "assets.yaml", "icons:\n  tool: ''\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "assets.yaml", "icons: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_repo_config_is_valid(self) -> None:
        repo_config = Path(__file__).parent.parent.parent / "assets.yaml"
        assert load_config(repo_config) == AssetsConfig()

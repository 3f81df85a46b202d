import stat
import sys
from pathlib import Path

import pytest

# Stand-in for svgexport: fails when the source is missing, otherwise
# writes a small file whose content records the requested size.
FAKE_RENDERER = """\
import sys
from pathlib import Path

source, destination, size = sys.argv[1:4]
if not Path(source).is_file():
    print(f"Error: {source} not found", file=sys.stderr)
    sys.exit(1)
Path(destination).write_text(f"rendered {size}\\n")
"""

SAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">'
    '<rect width="64" height="64" rx="12" fill="#0071e3"/></svg>\n'
)


@pytest.fixture
def fake_renderer(tmp_path: Path) -> Path:
    """
    Creates an executable renderer script in a temp bin directory.
    """
    if sys.platform == "win32":
        pytest.skip("fake renderer relies on a shebang line")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "svgexport"
    script.write_text(f"#!{sys.executable}\n{FAKE_RENDERER}")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project root with src-tauri/icons/icon.svg in place."""
    root = tmp_path / "project"
    icon_dir = root / "src-tauri" / "icons"
    icon_dir.mkdir(parents=True)
    (icon_dir / "icon.svg").write_text(SAMPLE_SVG)
    return root


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ASSETS_CONFIG_PATH", raising=False)

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from tests.fakes import FakeCompiler


@dataclass
class ThemeProject:
    root: Path
    styles_dir: Path
    var_file: Path

    def write_style(self, name: str, content: str) -> Path:
        path = self.styles_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path


@pytest.fixture
def project(tmp_path: Path) -> ThemeProject:
    """A variable file and a styles directory with one themed rule."""
    styles = tmp_path / "styles"
    styles.mkdir()
    var_file = tmp_path / "vars.less"
    var_file.write_text("@primary-color: #1890ff;\n")
    (styles / "a.less").write_text(".btn { color: #1890ff; font-size: 12px; }\n")
    return ThemeProject(root=tmp_path, styles_dir=styles, var_file=var_file)


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()

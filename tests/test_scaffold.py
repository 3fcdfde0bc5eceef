from __future__ import annotations

from pathlib import Path

import pytest

from stubsmith.scaffold import FileGenerator
from stubsmith.template import TemplateRenderer, TemplateRenderingError


@pytest.fixture()
def generator() -> FileGenerator:
    return FileGenerator(TemplateRenderer())


@pytest.fixture()
def stub(tmp_path: Path) -> Path:
    path = tmp_path / "class.stub"
    path.write_text("class {{ class_name }}:\n    pass\n", encoding="utf-8")
    return path


def test_generate_writes_rendered_stub(tmp_path: Path, generator: FileGenerator, stub: Path):
    destination = tmp_path / "app" / "models" / "post.py"
    result = generator.generate(stub, destination, {"class_name": "Post"})

    assert result == destination
    assert destination.read_text(encoding="utf-8") == "class Post:\n    pass\n"


def test_generate_respects_force(tmp_path: Path, generator: FileGenerator, stub: Path):
    destination = tmp_path / "post.py"
    destination.write_text("custom", encoding="utf-8")

    with pytest.raises(FileExistsError):
        generator.generate(stub, destination, {"class_name": "Post"})
    assert destination.read_text(encoding="utf-8") == "custom"

    generator.generate(stub, destination, {"class_name": "Post"}, force=True)
    assert destination.read_text(encoding="utf-8").startswith("class Post:")


def test_generate_passes_missing_policy(tmp_path: Path, generator: FileGenerator, stub: Path):
    destination = tmp_path / "post.py"

    with pytest.raises(TemplateRenderingError):
        generator.generate(stub, destination, {}, missing="error")
    assert not destination.exists()

    generator.generate(stub, destination, {}, missing="empty")
    assert destination.read_text(encoding="utf-8") == "class :\n    pass\n"

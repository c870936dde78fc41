from pathlib import Path

import pytest

from wordsmith.builders.html import DocumentAssembler
from wordsmith.components.base import BREAK_PAGE_HTML
from wordsmith.config import BuildOptions, Config, CoverConfig, Dimensions, load_config
from wordsmith.errors import ConfigCoverNotDefined, FileEncodingError, InvalidComponentClosingTag, ProjectNotFound, ThemeNotFound
from wordsmith.pipeline.build import build

WS_YAML = """\
title: "Field Guide"
authors: ["A. Writer"]
document:
  dimensions: [210, 297]
  margins: {left: 10, top: 20, right: 10, bottom: 20}
cover:
  file: "cover.jpg"
  dimensions: [210, 297]
"""

def make_project(root: Path, contents=None, ws_yaml: str = WS_YAML) -> Path:
    (root / "themes").mkdir(parents=True)
    (root / "content").mkdir()
    (root / "assets" / "images").mkdir(parents=True)
    (root / "themes" / "light.html").write_text(
        "<style>@font-face { src: url(@themes_path/font.ttf); }</style>", encoding="utf-8"
    )
    (root / "themes" / "__base-head.html").write_text('<meta name="base">', encoding="utf-8")
    (root / "ws.yaml").write_text(ws_yaml, encoding="utf-8")
    (root / ".ws-lock").touch()
    for name, body in (contents or {"01.md": "# Intro\n"}).items():
        (root / "content" / name).write_text(body, encoding="utf-8")
    return root

def assembler_for(project: Path, **kw) -> DocumentAssembler:
    return DocumentAssembler(load_config(project), project, **kw)

def test_content_is_joined_in_filename_order(tmp_path: Path) -> None:
    project = make_project(tmp_path, {"b.md": "B\n", "a.md": "A\n", "c.md": "C\n", "notes.txt": "skip"})
    (project / "content" / "zz.md").mkdir()

    assembler = assembler_for(project, converter=lambda s: s.strip())
    assert assembler.get_content_html() == "A B C"

def test_content_resolves_only_assets_path(tmp_path: Path) -> None:
    project = make_project(tmp_path, {"01.md": "![x](@assets_path/images/x.png)\n\n@themes_path @break\n"})
    out = assembler_for(project).get_content_html()
    assert f'src="{project / "assets"}/images/x.png"' in out
    assert "@themes_path @break" in out

def test_margin_style(tmp_path: Path) -> None:
    style = assembler_for(make_project(tmp_path)).get_document_margin_style()
    assert "size: 210mm 297mm;" in style
    assert "padding-left: 10mm !important;" in style
    assert "padding-top: 20mm !important;" in style

def test_cover_falls_back_to_title(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    assert assembler_for(project).get_cover_html() == "<h1>Field Guide</h1>"
    assert DocumentAssembler(Config.default(), project).get_cover_html() == "<h1>Default title</h1>"

def test_cover_image(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    (project / "assets" / "images" / "cover.jpg").write_bytes(b"\xff\xd8\xff")
    config = Config(title="Field Guide", cover=CoverConfig("cover.jpg", Dimensions(100, 150)))

    cover = DocumentAssembler(config, project).get_cover_html()
    assert f'<img src="{project / "assets" / "images" / "cover.jpg"}"' in cover
    assert 'style="width:100mm;height:150mm;" class="cover"' in cover
    assert 'alt="Field Guide"' in cover

def test_build_writes_compiled_document(tmp_path: Path) -> None:
    project = make_project(tmp_path, {
        "01.md": "# One\n\n@info\nCareful\n@endinfo\n",
        "02.md": "@break\n\n# Two\n",
    })
    html_file, html = assembler_for(project).build()

    assert html_file == project / "output" / "html.html"
    assert html_file.read_text(encoding="utf-8") == html
    assert html.startswith('<!DOCTYPE html><head><meta charset="utf-8">')
    assert html.endswith("</body></html>")
    assert f"url({project / 'themes'}/font.ttf)" in html
    assert '<meta name="base">' in html
    assert f"<h1>Field Guide</h1>{BREAK_PAGE_HTML}" in html
    assert '<blockquote class="info-block">' in html
    for marker in ("@info", "@endinfo", "@break", "@themes_path", "@assets_path"):
        assert marker not in html
    assert html.index("header-id-one") < html.index("header-id-two")

def test_build_is_deterministic(tmp_path: Path) -> None:
    project = make_project(tmp_path, {"b.md": "Second @break\n", "a.md": "@quote First @end\n"})
    html_file, first = assembler_for(project).build()
    first_bytes = html_file.read_bytes()
    _, second = assembler_for(project).build()
    assert first == second
    assert html_file.read_bytes() == first_bytes

def test_missing_theme_fails_before_output(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    with pytest.raises(ThemeNotFound):
        assembler_for(project, theme="sepia").build()
    assert not (project / "output").exists()

def test_missing_content_dir_is_an_error(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    (project / "content" / "01.md").unlink()
    (project / "content").rmdir()
    with pytest.raises(FileNotFoundError):
        assembler_for(project).build()

def test_bad_custom_block_aborts_build(tmp_path: Path) -> None:
    project = make_project(tmp_path, {"01.md": "@warn oops @enddanger\n"})
    with pytest.raises(InvalidComponentClosingTag):
        assembler_for(project).build()
    assert not (project / "output" / "html.html").exists()

class FakeRenderer:
    def __init__(self):
        self.calls = []

    def generate(self, html_file: Path, pdf_file: Path) -> Path:
        self.calls.append((html_file, pdf_file, html_file.exists()))
        pdf_file.write_bytes(b"%PDF-1.4")
        return pdf_file

def test_build_command_renders_pdf_and_cleans_html(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    renderer = FakeRenderer()
    result = build(BuildOptions(project_dir=project), renderer=renderer)

    assert result.pdf_file == project / "output" / "pdf.pdf"
    assert result.pdf_file.read_bytes() == b"%PDF-1.4"
    assert renderer.calls == [(project / "output" / "html.html", result.pdf_file, True)]
    assert not result.html_file.exists()

def test_build_command_options(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    result = build(BuildOptions(project_dir=project, output_name="book", keep_html=True), renderer=FakeRenderer())
    assert result.pdf_file == project / "output" / "book.pdf"
    assert result.html_file.exists()

    result = build(BuildOptions(project_dir=project, html_only=True), renderer=FakeRenderer())
    assert result.pdf_file is None
    assert result.html_file.exists()

def test_build_command_requires_lock_file(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    (project / ".ws-lock").unlink()
    with pytest.raises(ProjectNotFound):
        build(BuildOptions(project_dir=project), renderer=FakeRenderer())

def test_build_command_missing_cover_block(tmp_path: Path) -> None:
    project = make_project(tmp_path, ws_yaml='title: "No cover"\n')
    renderer = FakeRenderer()
    with pytest.raises(ConfigCoverNotDefined):
        build(BuildOptions(project_dir=project), renderer=renderer)
    assert not (project / "output").exists()
    assert renderer.calls == []

def test_margin_style_keeps_fractional_millimetres(tmp_path: Path) -> None:
    project = make_project(tmp_path, ws_yaml=WS_YAML.replace("top: 20", "top: 20.5"))
    style = assembler_for(project).get_document_margin_style()
    assert "padding-top: 20.5mm !important;" in style
    assert ".0mm" not in style

def test_content_that_is_not_utf8_names_the_file(tmp_path: Path) -> None:
    project = make_project(tmp_path)
    bad = project / "content" / "02-bad.md"
    bad.write_bytes(b"caf\xe9\n")
    with pytest.raises(FileEncodingError) as exc:
        assembler_for(project).build()
    assert exc.value.path == str(bad)

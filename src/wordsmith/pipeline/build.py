from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from wordsmith.builders.html import DocumentAssembler
from wordsmith.builders.pdf import PdfRenderer
from wordsmith.config import LOCK_FILE, BuildOptions, load_config
from wordsmith.errors import ProjectNotFound
from wordsmith.logging import get_logger

log = get_logger()

@dataclass(frozen=True)
class BuildResult:
    html_file: Path
    pdf_file: Optional[Path]

def build(opts: BuildOptions, renderer: Optional[PdfRenderer] = None) -> BuildResult:
    project = opts.project_dir
    if not (project / LOCK_FILE).exists():
        raise ProjectNotFound(str(project))

    log.debug("Building %s", project)
    config = load_config(project)

    assembler = DocumentAssembler(config, project, theme=opts.theme_name)
    html_file, _ = assembler.build()

    if opts.html_only:
        log.info("html only: %s", html_file)
        return BuildResult(html_file=html_file, pdf_file=None)

    pdf_file = assembler.get_output_file(f"{opts.output_name}.pdf")
    (renderer or PdfRenderer()).generate(html_file, pdf_file)

    if not opts.keep_html:
        assembler.clean_after_build()

    log.debug("Build is complete")
    return BuildResult(html_file=html_file, pdf_file=pdf_file)

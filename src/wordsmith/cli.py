from __future__ import annotations

import argparse
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError

from wordsmith.config import BuildOptions
from wordsmith.errors import WordsmithError
from wordsmith.logging import get_logger, set_verbosity
from wordsmith.pipeline.build import build
from wordsmith.pipeline.init import init_project

log = get_logger()

def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="wordsmith", description="Build PDF documents from markdown")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Verbose mode (-v, -vv, -vvv); errors only by default")
    sub = p.add_subparsers(dest="cmd", required=True)

    i = sub.add_parser("init", help="Initialize a new project in the directory")
    i.add_argument("folder", nargs="?", default=None, help="Folder to be created (default: current directory)")

    b = sub.add_parser("build", help="Build the project and generate a PDF file")
    b.add_argument("theme", nargs="?", default=None, help="Theme to use: light, dark or any themes/<name>.html")
    b.add_argument("--output", default="pdf", help="PDF file name inside output/ (without extension)")
    b.add_argument("--keep-html", action="store_true", help="Keep output/html.html after rendering")
    b.add_argument("--html-only", action="store_true", help="Only generate output/html.html, skip the PDF")

    args = p.parse_args(argv)
    set_verbosity(args.verbose)

    cwd = Path.cwd().resolve()
    log.debug("Running on %s", cwd)

    try:
        if args.cmd == "init":
            written = init_project(cwd, args.folder)
            print(f"Done! Created {len(written)} files.")
            return 0

        opts = BuildOptions(
            project_dir=cwd,
            theme=args.theme,
            output_name=args.output,
            keep_html=bool(args.keep_html),
            html_only=bool(args.html_only),
        )
        print("Building...")
        result = build(opts)
        print(f"Done! {result.pdf_file or result.html_file}")
        return 0
    except (WordsmithError, OSError, PlaywrightError) as e:
        log.error("%s", e)
        return 1

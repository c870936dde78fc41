from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable

from wordsmith.errors import FileEncodingError

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def reset_dir(p: Path) -> None:
    if p.exists():
        shutil.rmtree(p)
    p.mkdir(parents=True)

def iter_md_files(root: Path) -> Iterable[Path]:
    """Markdown files directly under root, in path order. Subdirectories are skipped."""
    for p in sorted(root.iterdir()):
        if p.is_file() and p.suffix == ".md":
            yield p

def read_text_utf8(p: Path) -> str:
    data = p.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileEncodingError(str(p), str(e)) from e

def write_text_utf8(p: Path, s: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(s, encoding="utf-8", newline="\n")

def remove_file(p: Path) -> bool:
    if not p.is_file():
        return False
    p.unlink()
    return True

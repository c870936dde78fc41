from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from wordsmith.config import LOCK_FILE
from wordsmith.core.stubs import PROJECT_FILES
from wordsmith.errors import ProjectConflict
from wordsmith.io.fs import ensure_dir, write_text_utf8
from wordsmith.logging import get_logger

log = get_logger()

def init_project(base: Path, folder: Optional[str] = None) -> List[Path]:
    """
    Scaffold a new project in base (or base/folder) and return the files written.

    Refuses to touch a directory that already holds a project lock file.
    """
    project = base / folder if folder else base
    ensure_dir(project)

    lock = project / LOCK_FILE
    if lock.exists():
        raise ProjectConflict(str(project))

    written: List[Path] = []
    for rel, content in PROJECT_FILES.items():
        p = project / rel
        log.info("Creating file: %s", p)
        write_text_utf8(p, content)
        written.append(p)

    lock.touch()
    written.append(lock)
    return written

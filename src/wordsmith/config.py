from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from wordsmith.errors import ConfigCoverFileIsInvalid, ConfigCoverNotDefined, ConfigValidationError
from wordsmith.io.fs import read_text_utf8

CONFIG_FILE = "ws.yaml"
LOCK_FILE = ".ws-lock"
DEFAULT_TITLE = "Default title"
DEFAULT_THEME = "light"

@dataclass(frozen=True)
class Dimensions:
    width: float = 21.0
    height: float = 29.0

    def get_values(self) -> Tuple[float, float]:
        return self.width, self.height

@dataclass(frozen=True)
class PositionValues:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def get_values(self) -> Tuple[float, float, float, float]:
        return self.left, self.top, self.right, self.bottom

@dataclass(frozen=True)
class DocumentConfig:
    dimensions: Dimensions = field(default_factory=Dimensions)  # mm
    margins: PositionValues = field(default_factory=PositionValues)  # mm

@dataclass(frozen=True)
class CoverConfig:
    filename: str
    dimensions: Dimensions = field(default_factory=Dimensions)
    position: PositionValues = field(default_factory=PositionValues)

@dataclass(frozen=True)
class Config:
    title: str = DEFAULT_TITLE
    authors: Tuple[str, ...] = ()
    document: DocumentConfig = field(default_factory=DocumentConfig)
    cover: Optional[CoverConfig] = None  # only absent when ws.yaml itself is missing

    @classmethod
    def default(cls) -> "Config":
        return cls()

@dataclass(frozen=True)
class BuildOptions:
    """Per-invocation settings coming from the command line rather than ws.yaml."""
    project_dir: Path
    theme: Optional[str] = None
    output_name: str = "pdf"
    keep_html: bool = False
    html_only: bool = False

    @property
    def theme_name(self) -> str:
        return self.theme or DEFAULT_THEME

def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)

class _Reader:
    """Pulls typed values out of the parsed YAML, recording problems instead of failing."""

    def __init__(self) -> None:
        self.problems: List[str] = []

    def mapping(self, v: Any, where: str) -> Dict[str, Any]:
        if v is None:
            return {}
        if not isinstance(v, dict):
            self.problems.append(f"{where}: expected a mapping")
            return {}
        return v

    def number(self, v: Any, where: str, default: float) -> float:
        if v is None:
            return default
        if not _is_number(v):
            self.problems.append(f"{where}: expected a number, got {v!r}")
            return default
        return float(v)

    def dimensions(self, v: Any, where: str) -> Dimensions:
        if v is None:
            return Dimensions()
        if not isinstance(v, list) or len(v) != 2:
            self.problems.append(f"{where}: expected a list of two numbers")
            return Dimensions()
        d = Dimensions()
        return Dimensions(
            self.number(v[0], f"{where}[0]", d.width),
            self.number(v[1], f"{where}[1]", d.height),
        )

    def position(self, v: Any, where: str) -> PositionValues:
        m = self.mapping(v, where)
        return PositionValues(
            *(self.number(m.get(side), f"{where}.{side}", 0.0) for side in ("left", "top", "right", "bottom"))
        )

    def title(self, v: Any) -> str:
        if v is None:
            return DEFAULT_TITLE
        if not isinstance(v, str):
            self.problems.append(f"title: expected a string, got {v!r}")
            return DEFAULT_TITLE
        return v

    def authors(self, v: Any) -> Tuple[str, ...]:
        if v is None:
            return ()
        if not isinstance(v, list):
            self.problems.append("authors: expected a list of strings")
            return ()
        out: List[str] = []
        for i, a in enumerate(v):
            if not isinstance(a, str):
                self.problems.append(f"authors[{i}]: expected a string, got {a!r}")
                continue
            out.append(a)
        return tuple(out)

def parse_config(data: Any) -> Config:
    """
    Build a Config from an already-parsed ws.yaml document:

        title: "Sample"
        authors:
          - Name <name@email.com>
        document:
          dimensions: [210, 297]   # mm
          margins: {left: 0, top: 0, right: 0, bottom: 0}
        cover:
          file: "cover.jpg"
          dimensions: [210, 297]
          position: {left: 0, top: 0, right: 0, bottom: 0}

    The cover section is mandatory. All other malformed fields are collected
    and raised together as a single ConfigValidationError.
    """
    if data is None:
        return Config.default()
    if not isinstance(data, dict):
        raise ConfigValidationError(["top-level: expected a mapping"])

    cover_raw = data.get("cover")
    if not isinstance(cover_raw, dict):
        raise ConfigCoverNotDefined()
    filename = cover_raw.get("file")
    if not isinstance(filename, str) or not filename.strip():
        raise ConfigCoverFileIsInvalid()

    r = _Reader()
    title = r.title(data.get("title"))
    authors = r.authors(data.get("authors"))

    doc_raw = r.mapping(data.get("document"), "document")
    document = DocumentConfig(
        dimensions=r.dimensions(doc_raw.get("dimensions"), "document.dimensions"),
        margins=r.position(doc_raw.get("margins"), "document.margins"),
    )
    cover = CoverConfig(
        filename=filename,
        dimensions=r.dimensions(cover_raw.get("dimensions"), "cover.dimensions"),
        position=r.position(cover_raw.get("position"), "cover.position"),
    )

    if r.problems:
        raise ConfigValidationError(r.problems)

    return Config(title=title, authors=authors, document=document, cover=cover)

def load_config(project_dir: Path) -> Config:
    p = project_dir / CONFIG_FILE
    if not p.exists():
        return Config.default()
    try:
        data = yaml.safe_load(read_text_utf8(p))
    except yaml.YAMLError as e:
        raise ConfigValidationError([f"malformed YAML: {e}"]) from e
    return parse_config(data)

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Mapping, Tuple

from wordsmith.components.base import Component
from wordsmith.components.break_tag import BreakTag
from wordsmith.components.custom_block import CustomBlock
from wordsmith.components.paths import assets_path, themes_path
from wordsmith.errors import InvalidTag

class Stage(str, Enum):
    BREAK = "break"
    CUSTOM_BLOCK = "custom_block"
    ASSETS_PATH = "assets_path"
    THEMES_PATH = "themes_path"

    @classmethod
    def parse(cls, name: str) -> "Stage":
        try:
            return cls(name)
        except ValueError:
            raise InvalidTag(name) from None

# Breaks and custom blocks must run before the path substitutions.
DEFAULT_STAGES: Tuple[Stage, ...] = (
    Stage.BREAK,
    Stage.CUSTOM_BLOCK,
    Stage.ASSETS_PATH,
    Stage.THEMES_PATH,
)

class ComponentPipeline:
    """
    Applies the tag components to a text buffer in a fixed order.

    `args` holds the resolved directory paths under the keys "assets_path"
    and "themes_path". A missing key substitutes the empty string.
    """

    def __init__(self, args: Mapping[str, str], stages: Iterable[Stage] = DEFAULT_STAGES):
        self.args: Dict[str, str] = dict(args)
        self.stages: Tuple[Stage, ...] = tuple(stages)

    @classmethod
    def from_names(cls, args: Mapping[str, str], names: Iterable[str]) -> "ComponentPipeline":
        return cls(args, [Stage.parse(n) for n in names])

    def get_string_arg(self, key: str) -> str:
        return self.args.get(key, "")

    def component_for(self, stage: Stage) -> Component:
        if stage is Stage.BREAK:
            return BreakTag()
        if stage is Stage.CUSTOM_BLOCK:
            return CustomBlock()
        if stage is Stage.ASSETS_PATH:
            return assets_path(self.get_string_arg("assets_path"))
        return themes_path(self.get_string_arg("themes_path"))

    def compile_tag_themes_path(self, text: str) -> str:
        return self.component_for(Stage.THEMES_PATH).compile(text)

    def compile_tag_assets_path(self, text: str) -> str:
        return self.component_for(Stage.ASSETS_PATH).compile(text)

    def compile_custom_block(self, text: str) -> str:
        return self.component_for(Stage.CUSTOM_BLOCK).compile(text)

    def compile_break_tag(self, text: str) -> str:
        return self.component_for(Stage.BREAK).compile(text)

    def compile_all(self, text: str) -> str:
        out = text
        for stage in self.stages:
            out = self.component_for(stage).compile(out)
        return out

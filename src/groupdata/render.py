"""Render an `ApiDescription` as GroupData text.

The layout is hand-aligned rather than produced by `json.dumps`:

        "API": {
          "overview":   [],
          "guides":     [],
          "interfaces": [ "A",
                          "B" ],
          ...
        }

Every section value opens at the same column, so the section key is padded
to `SECTION_KEY_WIDTH` characters (with at least one space).
"""

from __future__ import annotations

import dataclasses
from typing import List, Sequence

from .classifier import ApiDescription
from .schema import CallbackPolicy

SECTION_KEY_WIDTH = 11
ENTRY_ALIGNMENT = 14


@dataclasses.dataclass
class RenderOptions:
    tab_size: int = 2
    base_indent: int = 4


class GroupDataRenderer:
    def __init__(self, options: RenderOptions | None = None):
        self.options = options or RenderOptions()
        self._level = self.options.base_indent

    def render(self, api_name: str, description: ApiDescription, policy: CallbackPolicy) -> str:
        self._level = self.options.base_indent
        data = description.sorted()
        separate = CallbackPolicy(policy) is CallbackPolicy.SEPARATE

        output = self._line(f'"{api_name}": {{\n')
        self._level += 1

        output += self._line(self._empty_section("overview") + ",\n")
        output += self._line(self._empty_section("guides") + ",\n")
        output += self._section("interfaces", data.interfaces.names()) + ",\n"
        output += self._section("dictionaries", data.dictionaries.names()) + ",\n"
        output += self._section("types", data.types.names()) + ",\n"
        output += self._line(self._empty_section("methods") + ",\n")
        output += self._line(self._empty_section("properties") + ",\n")
        output += self._line(self._empty_section("events") + ",\n")
        if separate:
            output += self._section("callbacks", data.callbacks.names()) + "\n"

        self._level -= 1
        output += self._line("}\n")
        return output

    def _line(self, text: str) -> str:
        return " " * (self._level * self.options.tab_size) + text

    @staticmethod
    def _key(section: str) -> str:
        padding = max(SECTION_KEY_WIDTH - len(section), 1)
        return f'"{section}":' + " " * padding

    def _empty_section(self, section: str) -> str:
        return self._key(section) + "[]"

    def _section(self, section: str, names: Sequence[str]) -> str:
        if not names:
            return self._line(self._empty_section(section))
        if len(names) == 1:
            return self._line(f'{self._key(section)}[ "{names[0]}" ]')

        lines: List[str] = [self._line(f'{self._key(section)}[ "{names[0]}",\n')]
        self._level += 1
        align = " " * ENTRY_ALIGNMENT
        for index, name in enumerate(names[1:], start=1):
            ending = ",\n" if index < len(names) - 1 else " ]"
            lines.append(self._line(f'{align}"{name}"{ending}'))
        self._level -= 1
        return "".join(lines)


def render(
    api_name: str,
    description: ApiDescription,
    policy: CallbackPolicy = CallbackPolicy.SEPARATE,
    *,
    options: RenderOptions | None = None,
) -> str:
    return GroupDataRenderer(options).render(api_name, description, policy)

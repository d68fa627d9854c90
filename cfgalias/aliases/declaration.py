"""
Alias declaration lists.

Text syntax (one batch per file):

    // comments run to end of line
    wasm: { target_arch = "wasm32" },
    android: { target_os = "android" },
    /* block comments are allowed too */
    surfman: { all(unix, feature = "surfman", not(wasm)) },

Each entry is `name : { expression-source }`. Entries are separated by
commas; a trailing comma is allowed. The expression source is the raw text
between balanced braces and is parsed later, one alias at a time, so a bad
expression fails only its own alias. Braces inside string literals do not
count towards balancing.

YAML syntax:

    aliases:
      wasm: 'target_arch = "wasm32"'
      dummy: not(wasm)

or, when a name is declared more than once:

    aliases:
      - name: wasm
        cfg: 'target_arch = "wasm32"'
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..rules.dsl_lexer import scan_string
from ..rules.dsl_nodes import IDENTIFIER_PATTERN
from ..rules.errors import DeclarationError, ExprSyntaxError


YAML_SUFFIXES = (".yml", ".yaml")


@dataclass(frozen=True)
class AliasDeclaration:
    """
    One `name : { source }` entry.

    Attributes:
        name: Alias identifier
        source: Expression source text, unparsed
        position: Offset of the name in the declaration text (entry index for YAML)
    """
    name: str
    source: str
    position: int = 0

    def as_pair(self) -> tuple[str, str]:
        return (self.name, self.source)


class _DeclarationReader:
    """Character-level reader for the text declaration syntax."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _found(self) -> str:
        if self.pos >= len(self.text):
            return "end of input"
        return f"'{self.text[self.pos]}'"

    def _skip_trivia(self) -> None:
        """Skip whitespace and comments."""
        text = self.text
        while self.pos < len(text):
            if text[self.pos].isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = len(text) if end == -1 else end + 1
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise DeclarationError(self.pos, "'*/'", "end of input")
                self.pos = end + 2
            else:
                return

    def _expect_char(self, char: str) -> None:
        self._skip_trivia()
        if self.pos >= len(self.text) or self.text[self.pos] != char:
            raise DeclarationError(self.pos, f"'{char}'", self._found())
        self.pos += 1

    def _read_name(self) -> str:
        match = IDENTIFIER_PATTERN.match(self.text, self.pos)
        if not match:
            raise DeclarationError(self.pos, "alias name", self._found())
        self.pos = match.end()
        return match.group(0)

    def _read_body(self) -> str:
        """Read up to the matching '}' (the opening brace is consumed)."""
        start = self.pos
        depth = 1
        text = self.text
        while self.pos < len(text):
            c = text[self.pos]
            if c == '"':
                try:
                    _, self.pos = scan_string(text, self.pos)
                except ExprSyntaxError as e:
                    raise DeclarationError(e.position, e.expected, e.found) from e
                continue
            if c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    body = text[start:self.pos]
                    self.pos += 1
                    return body
            self.pos += 1
        raise DeclarationError(start - 1, "matching '}'", "end of input")

    def read_all(self) -> list[AliasDeclaration]:
        declarations: list[AliasDeclaration] = []
        while True:
            self._skip_trivia()
            if self.pos >= len(self.text):
                break
            name_pos = self.pos
            name = self._read_name()
            self._expect_char(":")
            self._expect_char("{")
            body = self._read_body()
            declarations.append(AliasDeclaration(name, body.strip(), name_pos))

            self._skip_trivia()
            if self.pos >= len(self.text):
                break
            if self.text[self.pos] != ",":
                raise DeclarationError(self.pos, "',' or end of input", self._found())
            self.pos += 1
        return declarations


def parse_declarations(text: str) -> list[AliasDeclaration]:
    """
    Split a declaration list into (name, source) entries.

    Args:
        text: Declaration text in `name : { expression }` syntax.

    Returns:
        Declarations in source order. Names may repeat.

    Raises:
        DeclarationError: If the list structure is malformed.
    """
    if not isinstance(text, str):
        raise TypeError(f"Declaration text must be a string, got {type(text).__name__}")
    return _DeclarationReader(text).read_all()


def _check_entry(name: Any, source: Any, where: str) -> None:
    if not isinstance(name, str) or not IDENTIFIER_PATTERN.fullmatch(name):
        raise ValueError(f"Invalid alias name {name!r} in {where}")
    if not isinstance(source, str):
        raise ValueError(
            f"Alias '{name}' in {where} must map to an expression string, "
            f"got {type(source).__name__}"
        )


def declarations_from_data(data: Any, where: str = "<data>") -> list[AliasDeclaration]:
    """
    Build declarations from loaded YAML data.

    Args:
        data: Parsed YAML document (None, or a mapping with an `aliases` key).
        where: Name of the source, for error messages.

    Returns:
        Declarations in document order.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    if data is None:
        return []
    if not isinstance(data, dict) or "aliases" not in data:
        raise ValueError(f"Declaration file must hold an 'aliases' key: {where}")

    aliases = data["aliases"]
    if aliases is None:
        return []

    declarations: list[AliasDeclaration] = []
    if isinstance(aliases, dict):
        for i, (name, source) in enumerate(aliases.items()):
            _check_entry(name, source, where)
            declarations.append(AliasDeclaration(name, source.strip(), i))
    elif isinstance(aliases, list):
        for i, entry in enumerate(aliases):
            if not isinstance(entry, dict) or "name" not in entry or "cfg" not in entry:
                raise ValueError(
                    f"Entry {i} in {where} must be a mapping with 'name' and 'cfg'"
                )
            _check_entry(entry["name"], entry["cfg"], where)
            declarations.append(AliasDeclaration(entry["name"], entry["cfg"].strip(), i))
    else:
        raise ValueError(f"'aliases' must be a mapping or a list in {where}")
    return declarations


def load_declarations(path: Path | str) -> list[AliasDeclaration]:
    """
    Load a declaration batch from a file.

    `.yml`/`.yaml` files use the YAML syntax; anything else is read as the
    text syntax.

    Raises:
        FileNotFoundError: If the file does not exist
        DeclarationError: If a text declaration list is malformed
        ValueError: If a YAML file is malformed or has the wrong shape
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() not in YAML_SUFFIXES:
            return parse_declarations(f.read())
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in declaration file {path}: {e}") from e
    return declarations_from_data(data, str(path))


__all__ = [
    "AliasDeclaration",
    "parse_declarations",
    "declarations_from_data",
    "load_declarations",
]

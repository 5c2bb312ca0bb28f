"""Localised texts with simple ``{{.Field}}`` placeholders and language switching."""

from __future__ import annotations

import math
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Union

from .catalog import load_languages

DEFAULT_LANGUAGE = "english"

_ACTION = re.compile(r"\{\{(-\s)?(.*?)(\s-)?\}\}", re.DOTALL)
_FIELD_PATH = re.compile(r"(?:\.[A-Za-z_][A-Za-z0-9_]*)+")

_Segment = Union[str, tuple[str, ...]]


class _TemplateParseError(Exception):
    pass


class _TemplateExecError(Exception):
    pass


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    prefix = "-" if sign else ""
    if digits == [0]:
        return prefix + "0"
    point_exponent = len(digits) + exponent - 1
    if point_exponent < -4 or point_exponent >= 6:
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(map(str, digits[1:]))
        exp_sign = "-" if point_exponent < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(point_exponent):02d}"
    plain = Decimal((0, tuple(digits), exponent))
    return prefix + format(plain, "f")


def _format_value(value: Any) -> str:
    if value is None:
        return "<no value>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Mapping):
        return _format_mapping(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in value) + "]"
    return str(value)


def _format_mapping(data: Mapping[str, Any] | None) -> str:
    if not data:
        return "map[]"
    items = sorted(data.items(), key=lambda kv: str(kv[0]))
    return "map[" + " ".join(f"{k}:{_format_value(v)}" for k, v in items) + "]"


def _parse(text: str) -> list[_Segment]:
    segments: list[_Segment] = []
    literal_start = 0
    trim_next = False
    for match in _ACTION.finditer(text):
        literal = text[literal_start:match.start()]
        if trim_next:
            literal = literal.lstrip()
        if match.group(1):
            literal = literal.rstrip()
        if "{{" in literal:
            raise _TemplateParseError("unexpected action delimiter")
        if literal:
            segments.append(literal)
        body = match.group(2).strip()
        if body == ".":
            segments.append(())
        elif _FIELD_PATH.fullmatch(body):
            segments.append(tuple(body[1:].split(".")))
        elif not (body.startswith("/*") and body.endswith("*/")):
            raise _TemplateParseError(f"unsupported action: {body!r}")
        trim_next = bool(match.group(3))
        literal_start = match.end()
    tail = text[literal_start:]
    if trim_next:
        tail = tail.lstrip()
    if "{{" in tail:
        raise _TemplateParseError("unclosed action")
    if tail:
        segments.append(tail)
    return segments


def _lookup(data: Any, names: tuple[str, ...]) -> Any:
    value = data
    for name in names:
        if not isinstance(value, Mapping):
            raise _TemplateExecError(f"cannot evaluate field {name}")
        value = value.get(name)
    return value


@dataclass
class TextTemplate:
    """A text that may hold ``{{.Field}}`` placeholders, parsed on first use."""

    text: str
    _segments: list[_Segment] | None = field(default=None, init=False, repr=False)
    _parse_failed: bool = field(default=False, init=False, repr=False)

    def _parsed(self) -> list[_Segment]:
        if self._segments is None:
            try:
                self._segments = _parse(self.text)
            except _TemplateParseError:
                self._segments = ["TMPL_PARSE_ERR:" + self.text]
                self._parse_failed = True
        return self._segments

    def render(self, data: Mapping[str, Any] | None) -> str:
        """Fill the placeholders from data.

        A text that cannot be parsed renders as ``TMPL_PARSE_ERR:`` followed by
        the text; a failure while filling renders as ``TXT_ERR: text, data``.
        """
        parts = []
        try:
            for segment in self._parsed():
                if isinstance(segment, str):
                    parts.append(segment)
                else:
                    parts.append(_format_value(_lookup(data, segment)))
        except _TemplateExecError:
            return f"TXT_ERR: {self.text}, {_format_mapping(data)}"
        return "".join(parts)


class TextProvider:
    """Texts in several languages, with one language current at a time."""

    def __init__(self, catalog: Mapping[str, Mapping[str, str]]) -> None:
        self.languages: list[str] = sorted(catalog)
        self.templates: dict[str, dict[str, TextTemplate]] = {
            language: {key: TextTemplate(text) for key, text in texts.items()}
            for language, texts in catalog.items()
        }
        self.current_language_index = 0
        self.set_default()

    @property
    def current_language(self) -> str:
        if not self.languages:
            raise LookupError("no languages loaded")
        return self.languages[self.current_language_index]

    def set_default(self) -> None:
        """Select the default language, or the first one if it is missing."""
        if DEFAULT_LANGUAGE in self.languages:
            self.current_language_index = self.languages.index(DEFAULT_LANGUAGE)
        else:
            self.current_language_index = 0

    def switch(self) -> str:
        """Move to the next language and return its name, capitalised."""
        if not self.languages:
            raise LookupError("no languages loaded")
        self.current_language_index = (self.current_language_index + 1) % len(self.languages)
        name = self.languages[self.current_language_index]
        return name[:1].upper() + name[1:]

    def text(self, key: str) -> str:
        """Return the raw text for key in the current language."""
        return self.execute_template(key, None)

    def execute_template(self, key: str, data: Mapping[str, Any] | None) -> str:
        """Return the text for key rendered with data; the raw text if data is None."""
        template = self.templates[self.current_language].get(key)
        if template is None:
            return f"TMPL_NOT_FOUND: {key}, {_format_mapping(data)}"
        if data is None:
            return template.text
        return template.render(data)


def load_text_provider(directory: str | os.PathLike[str]) -> TextProvider:
    """Build a provider from the language catalogs in directory."""
    return TextProvider(load_languages(directory))
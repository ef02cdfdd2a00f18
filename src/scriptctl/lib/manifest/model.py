# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The ``package.json`` data model.

Only the two fields the CLI reports on are modelled: the required ``name``
and the optional ``scripts`` table. Every other key in the document is
ignored. ``parse_manifest`` works on text and raises ``ManifestParseError``;
``load_manifest`` adds the file read and raises ``ManifestReadError`` when the
file cannot be read at all.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class ManifestError(Exception):
    """Base class for manifest loading failures."""


class ManifestReadError(ManifestError):
    """The manifest file could not be opened, read or decoded as UTF-8."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ManifestParseError(ManifestError):
    """The manifest is not valid JSON or does not match the expected shape."""


@dataclass(frozen=True)
class Manifest:
    """Parsed ``package.json``."""

    name: str
    scripts: dict[str, str] | None = None

    @property
    def has_scripts(self) -> bool:
        return bool(self.scripts)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.scripts is not None:
            data["scripts"] = dict(self.scripts)
        return data


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _expect(field: str, value: Any, expected: str) -> ManifestParseError:
    return ManifestParseError(
        f"invalid type for field `{field}`: expected {expected}, got {_json_type(value)}"
    )


def _check_unicode(field: str, text: str) -> None:
    """Reject strings holding lone surrogates (from escapes like ``\\ud800``)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ManifestParseError(
            f"invalid unicode in field `{field}`: lone surrogate at position {e.start}"
        ) from e


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"invalid number `{constant}`: NaN and Infinity are not JSON")


def _parse_scripts(raw: Any) -> dict[str, str] | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise _expect("scripts", raw, "a map of strings")
    for key, value in raw.items():
        _check_unicode("scripts", key)
        if not isinstance(value, str):
            raise _expect(f"scripts.{key}", value, "a string")
        _check_unicode(f"scripts.{key}", value)
    return dict(raw)


def parse_manifest(text: str) -> Manifest:
    """Parse ``package.json`` content into a ``Manifest``.

    Raises:
        ManifestParseError: on malformed JSON (carrying the decoder's message),
            a non-object document, a missing ``name`` or wrongly typed fields.
            Strings that cannot be encoded as UTF-8 are rejected as well.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, over-long integer literals, NaN/Infinity, too deep nesting
        raise ManifestParseError(str(e)) from e

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"invalid type: expected a JSON object, got {_json_type(data)}"
        )
    if "name" not in data:
        raise ManifestParseError("missing field `name`")

    name = data["name"]
    if not isinstance(name, str):
        raise _expect("name", name, "a string")
    _check_unicode("name", name)

    return Manifest(name=name, scripts=_parse_scripts(data.get("scripts")))


def load_manifest(path: Path) -> Manifest:
    """Read and parse the manifest at *path*.

    Raises:
        ManifestReadError: if the file cannot be read as UTF-8 text.
        ManifestParseError: if the content is not a valid manifest.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(path, str(e)) from e
    return parse_manifest(text)


def dump_manifest(manifest: Manifest) -> str:
    """Serialize *manifest* back to ``package.json`` form."""
    return json.dumps(manifest.to_dict(), indent=2) + "\n"

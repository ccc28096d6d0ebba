"""
Catalogue loading for the emoji image sets.

Each img-*.json file is a list of emoji records. Files are read in
directory order; the records of each file are reversed before being
appended, so newly added entries (at the tail of a file) come first.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import CATALOGUE_GLOB
from .errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModifierRecord:
    """A skin-tone (or other) variant of a parent emoji"""
    name: str
    image: str
    unicode: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "image": self.image, "unicode": self.unicode}


@dataclass(frozen=True)
class EmojiRecord:
    name: str
    image: str
    category: Optional[str] = None
    unicode: Optional[str] = None
    aliases: tuple[str, ...] = ()
    modifiers: tuple[ModifierRecord, ...] = ()

    def identifiers(self) -> list[str]:
        """Name followed by every alias, in catalogue order"""
        return [self.name, *self.aliases]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "image": self.image,
            "unicode": self.unicode,
            "aliases": list(self.aliases),
            "modifiers": [m.to_dict() for m in self.modifiers],
        }


# =============================================================================
# Schema checks
# =============================================================================

def _where(source: str, index: int, key: str) -> str:
    return f"{source}: record {index}: '{key}'"


def _required_str(entry: dict, key: str, where: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value:
        raise ParseError(f"{where} must be a non-empty string, got {value!r}")
    return value


def _optional_str(entry: dict, key: str, where: str) -> Optional[str]:
    value = entry.get(key)
    if value is not None and not isinstance(value, str):
        raise ParseError(f"{where} must be a string or null, got {value!r}")
    return value


def _parse_modifier(entry, source: str, index: int, position: int) -> ModifierRecord:
    key = f"modifiers[{position}]"
    if not isinstance(entry, dict):
        raise ParseError(f"{_where(source, index, key)} must be an object")
    return ModifierRecord(
        name=_required_str(entry, "name", _where(source, index, f"{key}.name")),
        image=_required_str(entry, "image", _where(source, index, f"{key}.image")),
        unicode=_optional_str(entry, "unicode", _where(source, index, f"{key}.unicode")),
    )


def parse_record(entry, source: str = "<catalogue>", index: int = 0) -> EmojiRecord:
    """Build an EmojiRecord from one parsed JSON object.

    A null category is accepted here; rendering rejects it later.
    """
    if not isinstance(entry, dict):
        raise ParseError(f"{source}: record {index} must be an object, got {type(entry).__name__}")

    aliases = entry.get("aliases")
    if aliases is None:
        aliases = []
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise ParseError(f"{_where(source, index, 'aliases')} must be a list of strings")

    modifiers = entry.get("modifiers")
    if modifiers is None:
        modifiers = []
    if not isinstance(modifiers, list):
        raise ParseError(f"{_where(source, index, 'modifiers')} must be a list")

    return EmojiRecord(
        name=_required_str(entry, "name", _where(source, index, "name")),
        image=_required_str(entry, "image", _where(source, index, "image")),
        category=_optional_str(entry, "category", _where(source, index, "category")),
        unicode=_optional_str(entry, "unicode", _where(source, index, "unicode")),
        aliases=tuple(aliases),
        modifiers=tuple(
            _parse_modifier(m, source, index, i) for i, m in enumerate(modifiers)
        ),
    )


def parse_catalogue(data, source: str = "<catalogue>") -> list[EmojiRecord]:
    """Check the shape of a parsed catalogue and build its records"""
    if not isinstance(data, list):
        raise ParseError(f"{source}: expected a list of emoji, got {type(data).__name__}")
    return [parse_record(entry, source, i) for i, entry in enumerate(data)]


def read_catalogue(path: Path) -> list[EmojiRecord]:
    """Read and parse a single catalogue file"""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"{path.name}: invalid JSON: {e}") from e
    return parse_catalogue(data, path.name)


def load_all(directory: Path) -> list[EmojiRecord]:
    """Load every img-*.json catalogue in a directory.

    No de-duplication happens here; duplicate names and aliases are
    reported by the validate task.
    """
    emoji: list[EmojiRecord] = []
    files = list(Path(directory).glob(CATALOGUE_GLOB))

    for catalogue in files:
        records = read_catalogue(catalogue)
        logger.debug(f"Loaded {len(records)} emoji from {catalogue.name}")
        emoji.extend(reversed(records))

    logger.info(f"Loaded {len(emoji)} emoji from {len(files)} catalogues in {directory}")
    return emoji

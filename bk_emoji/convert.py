"""
Generate Apple emoji catalogue records from an emoji-data export.

emoji-data (https://github.com/iamcal/emoji-data) ships emoji.json, a
list of descriptors like:

    {
        "short_name": "wave",
        "short_names": ["wave"],
        "unified": "1F44B",
        "image": "1f44b.png",
        "category": "People",
        "has_img_apple": true,
        "skin_variations": {
            "1F3FB": {"unified": "1F44B-1F3FB", "image": "1f44b-1f3fb.png", ...},
            ...
        }
    }
"""

import json

from .catalogue import EmojiRecord, ModifierRecord
from .constants import APPLE_IMAGE_DIR, FIRST_SKIN_TONE, FLAG_PATTERN
from .errors import ParseError

REQUIRED_FIELDS = ("short_name", "short_names", "image", "unified")
STRING_FIELDS = ("short_name", "image", "unified")


def convert_modifiers(name: str, variations) -> tuple[ModifierRecord, ...]:
    if not isinstance(variations, dict):
        raise ParseError(f"emoji-data entry {name!r}: 'skin_variations' must be an object")

    modifiers = []
    # Tones follow the export's own key order
    for i, (key, skin) in enumerate(variations.items()):
        if not isinstance(skin, dict) or not all(
            isinstance(skin.get(field), str) for field in ("image", "unified")
        ):
            raise ParseError(
                f"emoji-data entry {name!r}: skin variation {key!r} needs string 'image' and 'unified'"
            )
        modifiers.append(ModifierRecord(
            name=f"skin-tone-{i + FIRST_SKIN_TONE}",
            image=APPLE_IMAGE_DIR + skin["image"],
            unicode=skin["unified"],
        ))
    return tuple(modifiers)


def convert_descriptor(e: dict) -> EmojiRecord:
    missing = [key for key in REQUIRED_FIELDS if key not in e]
    if missing:
        raise ParseError(f"emoji-data entry {e.get('short_name')!r} is missing {missing}")

    name = e["short_name"]
    for key in STRING_FIELDS:
        if not isinstance(e[key], str):
            raise ParseError(f"emoji-data entry {name!r}: {key!r} must be a string, got {e[key]!r}")

    short_names = e["short_names"]
    if not isinstance(short_names, list) or not all(isinstance(a, str) for a in short_names):
        raise ParseError(f"emoji-data entry {name!r}: 'short_names' must be a list of strings")
    aliases = [alias for alias in short_names if alias != name]

    # Uncategorised flags are left with no category otherwise, and the
    # tables task will refuse to render them
    category = e.get("category")
    if category is not None and not isinstance(category, str):
        raise ParseError(f"emoji-data entry {name!r}: 'category' must be a string or null")
    if category is None and FLAG_PATTERN.search(name):
        category = "Flags"

    variations = e.get("skin_variations")
    return EmojiRecord(
        name=name,
        category=category,
        image=APPLE_IMAGE_DIR + e["image"],
        unicode=e["unified"],
        aliases=tuple(aliases),
        modifiers=convert_modifiers(name, variations) if variations is not None else (),
    )


def convert(parsed) -> list[EmojiRecord]:
    """Convert every emoji-data entry that has an Apple image"""
    if not isinstance(parsed, list):
        raise ParseError(f"emoji-data JSON must be a list, got {type(parsed).__name__}")

    records = []
    for e in parsed:
        if not isinstance(e, dict):
            raise ParseError(f"emoji-data entries must be objects, got {type(e).__name__}")
        if not e.get("has_img_apple"):
            continue
        records.append(convert_descriptor(e))

    return records


def to_json(records: list[EmojiRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)

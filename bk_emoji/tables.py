"""
README emoji tables.

Generates the Markdown tables that get copy and pasted into the README
whenever the catalogues change.
"""

import logging

from .catalogue import EmojiRecord
from .constants import (
    BUILDKITE_CATEGORY,
    CATEGORY_ORDER,
    IMAGE_BASE_URL,
    SKIN_TONE_PATTERN,
    TABLE_IMAGE_SIZE,
)
from .errors import DataIntegrityError

logger = logging.getLogger(__name__)

Row = tuple[str, str]


def image_tag(image: str, alt: str) -> str:
    return (
        f'<img src="{IMAGE_BASE_URL}{image}" '
        f'width="{TABLE_IMAGE_SIZE}" height="{TABLE_IMAGE_SIZE}" alt="{alt}"/>'
    )


def aliases_cell(emoji: EmojiRecord) -> str:
    """`:name:` plus every alias, de-duplicated in first-seen order"""
    names = dict.fromkeys(emoji.identifiers())
    return ", ".join(f"`:{name}:`" for name in names)


def group_rows(emoji: list[EmojiRecord]) -> dict[str, list[Row]]:
    """Group table rows by category, keeping catalogue order within each group.

    Skin tone emoji are skipped (they only show up as modifiers).
    """
    groups: dict[str, list[Row]] = {}

    for e in emoji:
        if SKIN_TONE_PATTERN.search(e.name):
            continue
        if e.category is None:
            raise DataIntegrityError(f"No category for emoji: {e!r}")

        rows = groups.setdefault(e.category, [])
        rows.append((image_tag(e.image, e.name), aliases_cell(e)))

        for modifier in e.modifiers:
            rows.append((
                image_tag(modifier.image, e.name),
                f"`:{e.name}::{modifier.name}:`",
            ))

    return groups


def render_section(name: str, rows: list[Row]) -> str:
    lines = [f"## {name}", "", "Emoji | Aliases", "----- | -------"]
    lines.extend(" | ".join(cols) for cols in rows)
    return "\n".join(lines) + "\n\n"


def render(emoji: list[EmojiRecord]) -> str:
    """Render every category section in README order"""
    groups = group_rows(emoji)
    sections = []

    for name in CATEGORY_ORDER:
        rows = groups.pop(name, None)
        if rows is None:
            logger.debug(f"No emoji in category {name}, skipping section")
            continue

        # Latest Buildkite emoji go at the top
        if name == BUILDKITE_CATEGORY:
            rows = rows[::-1]

        sections.append(render_section(name, rows))

    if groups:
        raise DataIntegrityError(f"Not all groups were shown: {list(groups)}")

    return "".join(sections)

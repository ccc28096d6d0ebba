"""Pick a random emoji."""

import random
from typing import Optional

from .catalogue import EmojiRecord
from .errors import DataIntegrityError


def pick_random(emoji: list[EmojiRecord], rng: Optional[random.Random] = None) -> str:
    """Return a random emoji from the whole catalogue as :name:

    Skin tone emoji are included, unlike in the README tables.
    """
    if not emoji:
        raise DataIntegrityError("No emoji to pick from")

    rng = rng or random
    chosen = emoji[rng.randrange(len(emoji))]
    return f":{chosen.name}:"

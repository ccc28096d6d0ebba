"""
Catalogue validation.

Checks that:
- every name and alias maps to exactly one emoji
- every Buildkite emoji image exists and is at most 80x80

All problems are collected over the full scan so a single run shows
everything that needs fixing. Errors fail the task, warnings don't.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from colorama import Fore, Style

from .catalogue import EmojiRecord
from .constants import (
    BUILDKITE_CATEGORY,
    ICON_ERROR,
    ICON_FAILED,
    ICON_PASSED,
    ICON_START,
    ICON_WARNING,
    ICON_WARNINGS_FOUND,
    MAX_IMAGE_SIZE,
)
from .errors import ValidationFailed
from .images import ImageInfo

logger = logging.getLogger(__name__)

Probe = Callable[[str], Optional[ImageInfo]]


@dataclass
class ValidationResult:
    """Warnings and errors found during one validation run (no duplicates)"""
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    echo: bool = True

    def add_warning(self, text: str) -> None:
        if text not in self.warnings:
            self.warnings.append(text)
        if self.echo:
            print(f" {ICON_WARNING} {Fore.YELLOW}Warning: {text}{Style.RESET_ALL}")

    def add_error(self, text: str) -> None:
        if text not in self.errors:
            self.errors.append(text)
        if self.echo:
            print(f" {ICON_ERROR} {Fore.RED}Error: {text}{Style.RESET_ALL}")

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


def check_emoji_aliases(e: EmojiRecord, seen: set[str], result: ValidationResult) -> None:
    """Record e's name and aliases, flagging any already seen"""
    for alias in e.identifiers():
        if alias in seen:
            result.add_error(f'Alias ":{alias}:" maps to multiple emoji!')
        seen.add(alias)


def check_aliases(emoji: list[EmojiRecord], result: ValidationResult) -> None:
    """Every name and alias must be unique across the whole catalogue"""
    seen: set[str] = set()
    for e in emoji:
        check_emoji_aliases(e, seen, result)


def check_image(e: EmojiRecord, probe: Probe, result: ValidationResult) -> None:
    info = probe(e.image)

    if info is None:
        result.add_error(f'Emoji image "{e.image}" is missing!')
    elif info.width > MAX_IMAGE_SIZE or info.height > MAX_IMAGE_SIZE:
        result.add_warning(f'Emoji image "{e.image}" is too large at {info.size}!')


def check_images(emoji: list[EmojiRecord], probe: Probe, result: ValidationResult) -> None:
    """Only Buildkite emoji images are checked, the vendor sets are generated"""
    for e in emoji:
        if e.category == BUILDKITE_CATEGORY:
            check_image(e, probe, result)


def validate(emoji: list[EmojiRecord], probe: Probe, echo: bool = True) -> ValidationResult:
    """Run every check and return what was found.

    Both checks run emoji by emoji, so issues are reported in catalogue order.
    """
    if echo:
        print(f"{ICON_START} Validating emoji...")

    result = ValidationResult(echo=echo)
    seen: set[str] = set()

    for e in emoji:
        check_emoji_aliases(e, seen, result)
        if e.category == BUILDKITE_CATEGORY:
            check_image(e, probe, result)

    logger.info(
        f"Validated {len(emoji)} emoji: "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result


def report(result: ValidationResult) -> None:
    """Print the summary, raising ValidationFailed if there were errors"""
    if not result.ok:
        raise ValidationFailed(f"{ICON_FAILED} Emoji errors found! Please fix them!", result.errors)
    elif result.has_warnings:
        print(f"{ICON_WARNINGS_FOUND} {Fore.YELLOW}Emoji warnings found. "
              f"You might want to check those!{Style.RESET_ALL}")
    else:
        print(f"{ICON_PASSED} {Fore.GREEN}The emoji are all good!{Style.RESET_ALL}")

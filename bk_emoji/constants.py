"""
Buildkite Emoji - Shared Constants

Central location for constants used across the tasks.
"""

import re

# =============================================================================
# CATALOGUE
# =============================================================================

CATALOGUE_GLOB = "img-*.json"

# Emoji with these names only appear as modifiers of their parent
SKIN_TONE_PATTERN = re.compile(r"skin-tone")

# Uncategorised emoji-data entries matching this are flags
FLAG_PATTERN = re.compile(r"flag-")

# =============================================================================
# README TABLES
# =============================================================================

IMAGE_BASE_URL = "https://raw.githubusercontent.com/buildkite/emojis/master/"
TABLE_IMAGE_SIZE = 20  # px, both width and height

BUILDKITE_CATEGORY = "Buildkite"

# Sections are rendered in exactly this order
CATEGORY_ORDER = (
    BUILDKITE_CATEGORY,
    "People",
    "Nature",
    "Foods",
    "Activity",
    "Places",
    "Objects",
    "Symbols",
    "Flags",
)

# =============================================================================
# VALIDATION
# =============================================================================

MAX_IMAGE_SIZE = 80  # px, applies to width and height separately

ICON_START = "🔍"
ICON_WARNING = "💁🏻"
ICON_ERROR = "🚨"
ICON_FAILED = "✋🏼"
ICON_WARNINGS_FOUND = "🤔"
ICON_PASSED = "👌🏼"

# =============================================================================
# GENERATE
# =============================================================================

APPLE_IMAGE_DIR = "img-apple-64/"
FIRST_SKIN_TONE = 2  # emoji-data skin tones start at Fitzpatrick type 1-2

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_EMOJI_JSON = "EMOJI_JSON"
ENV_CATALOGUE_DIR = "EMOJI_CATALOGUE_DIR"
ENV_LOG_LEVEL = "EMOJI_LOG_LEVEL"

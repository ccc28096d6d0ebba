"""
Buildkite Emoji - catalogue tooling

Tasks for the emoji image catalogues (img-*.json):
- Tables: Markdown tables for the README, grouped by category
- Validate: alias collisions and missing/oversized images
- Generate: convert an emoji-data export into catalogue records
- Random: pick a random emoji
"""

__version__ = "1.0.0"

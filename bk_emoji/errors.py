"""Exceptions raised by the emoji tasks."""


class EmojiError(Exception):
    """Base class for every error a task can fail with."""


class DataIntegrityError(EmojiError):
    """Catalogue content or configuration that must not be silently used."""


class ParseError(EmojiError):
    """Malformed catalogue or emoji-data JSON."""


class ValidationFailed(EmojiError):
    """Validation finished with at least one error."""

    def __init__(self, message: str, errors: list[str]):
        super().__init__(message)
        self.errors = errors

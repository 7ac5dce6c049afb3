"""Catalog of the Forvo operations exposed by this package."""

from enum import Enum

from forvomcp.models import CallSpec


class Operation(Enum):
    WORD_PRONUNCIATIONS = CallSpec(
        action="word-pronunciations",
        required=("word",),
        optional=("language", "country", "username", "sex", "rate", "order", "limit", "groupInLanguages"),
    )
    STANDARD_PRONUNCIATION = CallSpec(
        action="standard-pronunciation",
        required=("word",),
        optional=("language",),
    )
    LANGUAGE_LIST = CallSpec(
        action="language-list",
        optional=("language", "order", "minPronunciations"),
    )
    POPULAR_LANGUAGES = CallSpec(
        action="language-popular",
        optional=("language", "order", "limit"),
    )
    PRONOUNCED_WORDS_SEARCH = CallSpec(
        action="pronounced-words-search",
        required=("search",),
        optional=("language", "pagesize", "page"),
    )
    WORDS_SEARCH = CallSpec(
        action="words-search",
        required=("search",),
        optional=("language", "pagesize", "page"),
    )
    POPULAR_PRONOUNCED_WORDS = CallSpec(
        action="popular-pronounced-words",
        optional=("language", "limit"),
    )

    @property
    def spec(self) -> CallSpec:
        return self.value

    @property
    def command_name(self) -> str:
        """Dash-cased member name, e.g. ``word-pronunciations``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_command_name(cls, name: str) -> "Operation":
        normalized = name.strip().upper().replace("-", "_")
        try:
            return cls[normalized]
        except KeyError:
            choices = ", ".join(op.command_name for op in cls)
            raise ValueError(f"Unknown operation '{name}'. Choose one of: {choices}") from None

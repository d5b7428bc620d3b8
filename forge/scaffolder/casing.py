"""Name-casing helpers exposed to file templates.

Every function is total over its string input.  ``snake_case`` and
``kebab_case`` start a new segment at each uppercase letter after the first
character, so ``HTTPServer`` becomes ``h_t_t_p_server``.
"""

from __future__ import annotations

import re
from typing import Callable

__all__ = [
    "HELPERS",
    "camel_case",
    "contains",
    "env_prefix",
    "has_prefix",
    "has_suffix",
    "kebab_case",
    "lower",
    "pascal_case",
    "replace",
    "snake_case",
    "split_words",
    "title",
    "trim_prefix",
    "trim_suffix",
    "upper",
]


_WORD_START = re.compile(r"(?:^|(?<=[^0-9A-Za-z_]))([a-z])")


# ---------------------------------------------------------------------------
# Plain string helpers
# ---------------------------------------------------------------------------


def upper(value: str) -> str:
    return value.upper()


def lower(value: str) -> str:
    return value.lower()


def title(value: str) -> str:
    """Uppercase the first letter of every word, leaving the rest untouched.

    Unlike :meth:`str.title`, ``"my-API"`` becomes ``"My-API"``.
    """
    return _WORD_START.sub(lambda match: match.group(1).upper(), value)


def replace(value: str, old: str, new: str) -> str:
    return value.replace(old, new)


def contains(value: str, substring: str) -> bool:
    return substring in value


def has_prefix(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


def has_suffix(value: str, suffix: str) -> bool:
    return value.endswith(suffix)


def trim_prefix(value: str, prefix: str) -> str:
    return value.removeprefix(prefix)


def trim_suffix(value: str, suffix: str) -> str:
    return value.removesuffix(suffix)


# ---------------------------------------------------------------------------
# Identifier casing
# ---------------------------------------------------------------------------


def _separate(value: str, separator: str, opposite: str) -> str:
    chars: list[str] = []
    for index, char in enumerate(value):
        if char.isupper():
            if index > 0:
                chars.append(separator)
            chars.append(char.lower())
        elif char == opposite:
            chars.append(separator)
        else:
            chars.append(char)
    return "".join(chars)


def snake_case(value: str) -> str:
    """Convert ``myService`` or ``my-service`` to ``my_service``."""
    return _separate(value, "_", "-")


def kebab_case(value: str) -> str:
    """Convert ``myService`` or ``my_service`` to ``my-service``."""
    return _separate(value, "-", "_")


def split_words(value: str) -> list[str]:
    """Split on ``-``, ``_`` and uppercase word boundaries.

    A new word starts at an uppercase letter that follows a non-uppercase
    character, or that ends a run of capitals and is followed by a lowercase
    letter.

    ``"my-Thing_API"`` -> ``["my", "Thing", "API"]``
    ``"HTTPServer"`` -> ``["HTTP", "Server"]``
    """
    words: list[str] = []
    current: list[str] = []
    chars = value.replace("-", " ").replace("_", " ")
    for index, char in enumerate(chars):
        following = chars[index + 1] if index + 1 < len(chars) else ""
        if char == " ":
            if current:
                words.append("".join(current))
                current = []
        elif char.isupper() and current and (
            not current[-1].isupper() or following.islower()
        ):
            words.append("".join(current))
            current = [char]
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def pascal_case(value: str) -> str:
    """Convert ``my-service`` to ``MyService``."""
    return "".join(_capitalize(word) for word in split_words(value))


def camel_case(value: str) -> str:
    """Convert ``my-service`` to ``myService``."""
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def env_prefix(value: str) -> str:
    """Convert ``my-api`` or ``my.api`` to ``MY_API``."""
    return value.replace("-", "_").replace(".", "_").upper()


HELPERS: dict[str, Callable[..., object]] = {
    "upper": upper,
    "lower": lower,
    "title": title,
    "replace": replace,
    "contains": contains,
    "has_prefix": has_prefix,
    "has_suffix": has_suffix,
    "trim_prefix": trim_prefix,
    "trim_suffix": trim_suffix,
    "snake_case": snake_case,
    "kebab_case": kebab_case,
    "camel_case": camel_case,
    "pascal_case": pascal_case,
    "env_prefix": env_prefix,
}

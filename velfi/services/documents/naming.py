"""Turn free-text entity names into folder names."""

from __future__ import annotations


def _lower_one(ch: str) -> str:
    # str.lower may expand one character ("\u0130" -> "i" + U+0307); keep one code point
    return ch.lower()[0]


def sanitize_name(name: str) -> str:
    """Return a filesystem-safe folder name for ``name``.

    Letters and digits (any script) are kept lowercased, everything else
    becomes a single hyphen, and hyphens are stripped from both ends. An empty
    result means the name is not usable.

    >>> sanitize_name("My Fund II")
    'my-fund-ii'
    """

    text = "".join(_lower_one(ch) for ch in name.strip())
    result = "".join(ch if ch.isalpha() or ch.isdecimal() else "-" for ch in text)
    while "--" in result:
        result = result.replace("--", "-")
    return result.strip("-")


__all__ = ["sanitize_name"]

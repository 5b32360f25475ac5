"""Naming conventions for generated GraphQL types, fields, and node identities.

Kontent codenames are snake_case, but anything a user types into the CMS
can end up here, so words are split the way the ``change-case`` package
does it: on runs of non-alphanumerics and on lower/digit to upper case
boundaries. Digits stay attached to the word they follow.
"""

import re

TYPE_NAME_PREFIX = "KontentItem"
ELEMENT_TYPE_PREFIX = "Kontent"
ELEMENT_TYPE_SUFFIX = "Element"

_LOWER_UPPER_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z])([A-Z][a-z])")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")
_SEPARATOR = "\0"


def _mark_boundary(match: re.Match) -> str:
    return f"{match.group(1)}{_SEPARATOR}{match.group(2)}"


def split_words(value: str) -> list[str]:
    """Split an arbitrary string into its words."""
    result = _LOWER_UPPER_BOUNDARY.sub(_mark_boundary, value)
    result = _ACRONYM_BOUNDARY.sub(_mark_boundary, result)
    result = _NON_ALPHANUMERIC.sub(_SEPARATOR, result)
    return [word for word in result.split(_SEPARATOR) if word]


def _pascal_word(word: str, index: int) -> str:
    first, rest = word[0], word[1:].lower()
    # A leading digit would glue onto the previous word's last digit.
    if index > 0 and first.isdigit():
        return f"_{first}{rest}"
    return first.upper() + rest


def pascal_case(value: str) -> str:
    """``blog_post`` -> ``BlogPost``."""
    return "".join(_pascal_word(word, i) for i, word in enumerate(split_words(value)))


def camel_case(value: str) -> str:
    """``hero_image`` -> ``heroImage``."""
    words = split_words(value)
    return "".join(
        word.lower() if i == 0 else _pascal_word(word, i) for i, word in enumerate(words)
    )


def kebab_case(value: str) -> str:
    """``blog_post`` -> ``blog-post``."""
    return "-".join(word.lower() for word in split_words(value))


def to_type_name(codename: str) -> str:
    """GraphQL object type name for a content type codename."""
    return f"{TYPE_NAME_PREFIX}{pascal_case(codename)}"


def to_elements_type_name(codename: str) -> str:
    """GraphQL object type holding the elements of a content type."""
    return f"{to_type_name(codename)}Elements"


def to_field_name(codename: str) -> str:
    """GraphQL field name for an element codename."""
    return camel_case(codename)


def to_identity_key(type_codename: str, item_id: str) -> str:
    """Stable key the host turns into a node id; same item, same key, every run."""
    return f"{kebab_case(type_codename)}-{item_id}"


def to_element_value_type_name(kind: str) -> str:
    """GraphQL value type for an element kind, e.g. ``rich_text`` -> ``KontentRichTextElement``."""
    return f"{ELEMENT_TYPE_PREFIX}{pascal_case(kind)}{ELEMENT_TYPE_SUFFIX}"

"""
String case conversion utilities for zome scaffolding.

Entry type names arrive in human-readable form ("my thing", "BlogPost",
"comment-reply") and are turned into the two identifier shapes the generated
Rust code needs: snake_case for module and file names, and title case
(PascalCase) for type names.
"""

import re
from typing import Final

_WORD_DELIMITER_PATTERN: Final = re.compile(r"[\-\.\s_]+")
_ACRONYM_PATTERN: Final = re.compile(r"([A-Z])([A-Z][a-z])")
_LOWER_UPPER_PATTERN: Final = re.compile(r"([a-z0-9])([A-Z])")
_SNAKE_IDENTIFIER_PATTERN: Final = re.compile(r"^[a-z_][a-z0-9_]*$")
_TITLE_IDENTIFIER_PATTERN: Final = re.compile(r"^[A-Z][A-Za-z0-9]*$")

# Strict and reserved Rust keywords; a module named after one of these does not compile
RUST_KEYWORDS: Final = frozenset(
    {
        "as",
        "break",
        "const",
        "continue",
        "crate",
        "else",
        "enum",
        "extern",
        "false",
        "fn",
        "for",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "match",
        "mod",
        "move",
        "mut",
        "pub",
        "ref",
        "return",
        "self",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "type",
        "unsafe",
        "use",
        "where",
        "while",
        "async",
        "await",
        "dyn",
        "abstract",
        "become",
        "box",
        "do",
        "final",
        "macro",
        "override",
        "priv",
        "typeof",
        "unsized",
        "virtual",
        "yield",
        "try",
    }
)

# Keywords Rust rejects even as raw identifiers (r#self does not compile)
NON_RAW_KEYWORDS: Final = frozenset({"self", "super", "crate", "Self"})


def split_words(string: str | None) -> list[str]:
    """Split a name into its lowercase words.

    Examples:
        >>> split_words("my thing")
        ['my', 'thing']
        >>> split_words("getHTTPResponse")
        ['get', 'http', 'response']
    """
    if not string:
        return []
    s = _ACRONYM_PATTERN.sub(r"\1_\2", string)
    s = _LOWER_UPPER_PATTERN.sub(r"\1_\2", s)
    return [word.lower() for word in _WORD_DELIMITER_PATTERN.split(s) if word]


def snake_case(string: str | None) -> str:
    """Convert string into snake_case.

    Examples:
        >>> snake_case("my thing")
        'my_thing'
        >>> snake_case("BlogPost")
        'blog_post'
    """
    return "_".join(split_words(string))


def title_case(string: str | None) -> str:
    """Convert string into title case as used for Rust type names (PascalCase).

    Examples:
        >>> title_case("my thing")
        'MyThing'
        >>> title_case("comment-reply")
        'CommentReply'
    """
    return "".join(word.capitalize() for word in split_words(string))


def is_snake_case_identifier(name: str) -> bool:
    return bool(_SNAKE_IDENTIFIER_PATTERN.match(name))


def is_title_case_identifier(name: str) -> bool:
    return bool(_TITLE_IDENTIFIER_PATTERN.match(name))


def is_rust_keyword(name: str) -> bool:
    return name in RUST_KEYWORDS


def can_be_raw_identifier(name: str) -> bool:
    return name not in NON_RAW_KEYWORDS


def escape_rust_keyword(name: str) -> str:
    """Escape Rust keywords with r# prefix if necessary.

    Path keywords (``self``, ``super``, ``crate``, ``Self``) cannot be raw
    identifiers and are returned unchanged.

    Examples:
        >>> escape_rust_keyword("type")
        'r#type'
        >>> escape_rust_keyword("title")
        'title'
    """
    return f"r#{name}" if is_rust_keyword(name) and can_be_raw_identifier(name) else name

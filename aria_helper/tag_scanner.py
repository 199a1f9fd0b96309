"""
Tag and Attribute Scanner

A small tolerant tokenizer for markup snippets. It yields a flat sequence of
tag records and never builds a tree: containment checks elsewhere work on
"is there any tag with this role in the text", not on real ancestry.

Known limitations:
- Only single- or double-quoted attribute values are recognised; an
  unquoted value is treated as if the attribute were absent.
- A quoted value cannot contain the other quote character.
- Nesting depth is only tracked by find_matching_close(); everything else
  treats each tag occurrence independently.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup


# Opening or self-closing tags; closing tags, comments and doctypes never match
TAG_PATTERN = re.compile(r'<([a-z0-9:-]+)\b([^>]*)>', re.IGNORECASE)

# An attribute name must not continue another name (role vs. data-role)
ATTRIBUTE_START = r'(?<![\w:-])'

ARIA_ATTRIBUTE_PATTERN = re.compile(
    ATTRIBUTE_START + r'(aria-[a-z0-9_-]+)\s*=\s*["\']([^"\']*)["\']', re.IGNORECASE
)


@dataclass(frozen=True)
class AttributeOccurrence:
    """A single name/value pair pulled from markup."""
    name: str   # Always lowercase
    value: str  # Verbatim, case preserved


@dataclass(frozen=True)
class TagOccurrence:
    """One opening or self-closing tag found in the text."""
    name: str            # Lowercased tag name
    raw_name: str        # Tag name as written
    attribute_text: str  # Everything between the name and '>'
    text: str            # Full matched tag, e.g. '<div role="tab">'
    start: int
    end: int

    @property
    def is_self_closing(self) -> bool:
        return self.attribute_text.rstrip().endswith('/')

    @property
    def role(self) -> Optional[str]:
        return explicit_role(self.attribute_text)


@lru_cache(maxsize=None)
def _attribute_pattern(name: str, allow_empty: bool = True) -> re.Pattern:
    value = '*' if allow_empty else '+'
    return re.compile(
        rf'{ATTRIBUTE_START}{re.escape(name)}\s*=\s*["\']([^"\']{value})["\']', re.IGNORECASE
    )


# =============================================================================
# Tag scanning
# =============================================================================

def iter_tags(text: Optional[str]) -> Iterator[TagOccurrence]:
    """
    Lazily yield every opening or self-closing tag in the text.

    Args:
        text: Arbitrary snippet; None and non-markup text yield nothing

    Yields:
        TagOccurrence records in left-to-right order
    """
    if not text:
        return
    for match in TAG_PATTERN.finditer(text):
        yield tag_from_match(match)


def tag_from_match(match: re.Match) -> TagOccurrence:
    """Build a TagOccurrence from a TAG_PATTERN match."""
    return TagOccurrence(
        name=match.group(1).lower(),
        raw_name=match.group(1),
        attribute_text=match.group(2),
        text=match.group(0),
        start=match.start(),
        end=match.end(),
    )


def extract_aria_attributes(text: Optional[str]) -> List[AttributeOccurrence]:
    """
    Pull every aria-* pair out of a text span, ignoring tag boundaries.

    Args:
        text: Snippet or single tag text

    Returns:
        AttributeOccurrence list in order of appearance
    """
    if not text:
        return []
    return [
        AttributeOccurrence(name=m.group(1).lower(), value=m.group(2))
        for m in ARIA_ATTRIBUTE_PATTERN.finditer(text)
    ]


def roles_in(text: Optional[str]) -> List[str]:
    """Explicit roles of all tags in the text, in order, duplicates kept."""
    roles = []
    for tag in iter_tags(text):
        role = tag.role
        if role:
            roles.append(role)
    return roles


# =============================================================================
# Attribute helpers
# =============================================================================

def attribute_value(text: str, name: str, allow_empty: bool = True) -> Optional[str]:
    """
    Value of the first quoted `name=...` in the text.

    Args:
        text: Tag or attribute text
        name: Attribute name, matched case-insensitively
        allow_empty: Whether an empty quoted value counts as present

    Returns:
        The verbatim value, or None when absent or unquoted
    """
    match = _attribute_pattern(name.lower(), allow_empty).search(text or '')
    return match.group(1) if match else None


def has_attribute(text: str, name: str, allow_empty: bool = True) -> bool:
    return attribute_value(text, name, allow_empty) is not None


def explicit_role(text: str) -> Optional[str]:
    """Trimmed, lowercased role attribute value; None when missing or blank."""
    value = attribute_value(text, 'role', allow_empty=False)
    if value is None:
        return None
    return value.strip().lower() or None


# =============================================================================
# Paired tag matching
# =============================================================================

def find_first_close(text: str, tag: TagOccurrence) -> Optional[Tuple[int, int]]:
    """
    Span of the first closing tag with the same name after the tag.

    This is the non-greedy match: with nested same-named elements it finds
    the inner element's closing tag, not the tag's own.
    """
    pattern = re.compile(rf'</{re.escape(tag.name)}\s*>', re.IGNORECASE)
    match = pattern.search(text, tag.end)
    return match.span() if match else None


def find_matching_close(text: str, tag: TagOccurrence) -> Optional[Tuple[int, int]]:
    """
    Span of the closing tag that really matches the tag, counting depth.

    Same-named opening tags in between increase the depth; self-closing ones
    do not. Returns None for self-closing tags and for unbalanced text.
    """
    if tag.is_self_closing:
        return None

    pattern = re.compile(rf'<(/?){re.escape(tag.name)}\b([^>]*)>', re.IGNORECASE)
    depth = 1
    for match in pattern.finditer(text, tag.end):
        if match.group(1):
            depth -= 1
            if depth == 0:
                return match.span()
        elif not match.group(2).rstrip().endswith('/'):
            depth += 1
    return None


# =============================================================================
# Visible text
# =============================================================================

def visible_text(fragment: str) -> str:
    """Text content of a markup fragment with tags and all whitespace removed."""
    if '<' in fragment or '&' in fragment:
        fragment = BeautifulSoup(fragment, 'html.parser').get_text()
    return ''.join(fragment.split())


def inner_text_after(text: str, tag: TagOccurrence) -> Optional[str]:
    """
    Best-effort visible text between a tag and its (non-greedy) closing tag.

    Returns:
        Visible text without whitespace, or None when no closing tag follows
    """
    if tag.is_self_closing:
        return None
    close = find_first_close(text, tag)
    if close is None:
        return None
    return visible_text(text[tag.end:close[0]])


def plain_text(fragment: str) -> str:
    """Text content of a markup fragment, whitespace kept."""
    return BeautifulSoup(fragment, 'html.parser').get_text()

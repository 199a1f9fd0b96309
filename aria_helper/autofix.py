"""
ARIA Autofixer

Conservative text rewriting for a narrow subset of ARIA smells. The snippet is
never parsed into a tree; every pass rewrites opening tags in place, so
visible text, unrelated attributes and formatting survive untouched.

Passes, each feeding the next:
1. Remove an explicit role that equals the element's implicit role
2. Add aria-checked="false" to switches and checkboxes without a state
3. Add a default aria-valuemin/aria-valuemax/aria-valuenow range to
   sliders and spin buttons
4. Add role="tablist" to a role-less container that wraps role="tab"

Usage:
    from aria_helper.autofix import generate_fixed_code

    result = generate_fixed_code('<div role="switch">Wi-Fi</div>')
    print(result.fixed_text)
    for change in result.changes:
        print(change.message)
"""

import html
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from .implicit_roles import implicit_role
from .tag_scanner import (
    ATTRIBUTE_START,
    TAG_PATTERN,
    TagOccurrence,
    find_matching_close,
    has_attribute,
    iter_tags,
    plain_text,
    tag_from_match,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class FixOptions:
    """Configuration options for autofixing."""
    remove_redundant_roles: bool = True
    add_default_checked: bool = True
    add_default_value_range: bool = True
    add_tablist_containers: bool = True
    # Match a tablist container's own closing tag instead of the first
    # same-named one; differs only with nested same-named elements
    track_tablist_depth: bool = False
    # Default attribute values
    default_checked: str = "false"
    default_value_min: str = "0"
    default_value_max: str = "100"
    default_value_now: str = "0"


# =============================================================================
# Results
# =============================================================================

class FixKind(Enum):
    REMOVED_REDUNDANT_ROLE = "removed-redundant-role"
    ADDED_ARIA_CHECKED = "added-aria-checked"
    ADDED_VALUE_RANGE = "added-value-range"
    ADDED_TABLIST = "added-tablist"


@dataclass
class FixChange:
    """A single rewrite applied to the snippet"""
    kind: FixKind
    message: str                          # HTML fragment with <code> markers
    tag_name: str
    role: str
    attributes: Tuple[str, ...] = ()      # Attribute names added or removed

    @property
    def text(self) -> str:
        return plain_text(self.message)


@dataclass
class FixResult:
    """Fixed text paired with the ordered log of changes that produced it"""
    fixed_text: str
    changes: List[FixChange] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.changes)

    @property
    def messages(self) -> List[str]:
        return [change.message for change in self.changes]


def _code(text: str) -> str:
    return f"<code>{html.escape(text, quote=False)}</code>"


def _attr(name: str, value: str) -> str:
    return _code(f'{name}="{value}"')


def _append_attributes(tag: TagOccurrence, addition: str) -> str:
    """Rebuild a tag with extra attribute text, keeping a trailing '/' last."""
    attrs = tag.attribute_text
    head, tail = attrs, ''
    if tag.is_self_closing:
        slash = attrs.rstrip()
        head, tail = slash[:-1], attrs[len(slash) - 1:]
    body = head.rstrip()
    spacing = head[len(body):]
    return f"<{tag.raw_name}{body}{addition}{spacing}{tail}>"


# =============================================================================
# Autofixer
# =============================================================================

class AriaAutofixer:
    """
    Applies the conservative fix passes to a snippet.

    Usage:
        fixer = AriaAutofixer(FixOptions(track_tablist_depth=True))
        result = fixer.fix(snippet)
    """

    ROLE_ATTRIBUTE_PATTERN = re.compile(
        r'\s*' + ATTRIBUTE_START + r'role\s*=\s*["\'][^"\']+["\']', re.IGNORECASE
    )

    TAB_ROLE_PATTERN = re.compile(
        ATTRIBUTE_START + r'role\s*=\s*["\']\s*tab\s*["\']', re.IGNORECASE
    )

    # Container, its content up to a tab role, then the first same-named close
    TABLIST_CONTAINER_PATTERN = re.compile(
        r'<([a-z0-9:-]+)\b([^>]*)>([\s\S]*?' + ATTRIBUTE_START
        + r'role\s*=\s*["\']\s*tab\s*["\'][\s\S]*?</\1\s*>)',
        re.IGNORECASE,
    )

    CHECKED_ROLES = ('switch', 'checkbox')
    VALUE_RANGE_ROLES = ('slider', 'spinbutton')

    def __init__(self, options: Optional[FixOptions] = None):
        self.options = options or FixOptions()

    def fix(self, snippet: Optional[str]) -> FixResult:
        """
        Run every enabled pass over a snippet.

        Args:
            snippet: Raw markup text; None or empty yields an empty result

        Returns:
            FixResult with the rewritten text and its change log
        """
        if not snippet:
            return FixResult(fixed_text="", changes=[])

        changes: List[FixChange] = []
        fixed = snippet

        if self.options.remove_redundant_roles:
            fixed = self._remove_redundant_roles(fixed, changes)
        if self.options.add_default_checked:
            fixed = self._add_default_checked(fixed, changes)
        if self.options.add_default_value_range:
            fixed = self._add_default_value_range(fixed, changes)
        if self.options.add_tablist_containers:
            if self.options.track_tablist_depth:
                fixed = self._add_tablists_tracked(fixed, changes)
            else:
                fixed = self._add_tablists(fixed, changes)

        logger.debug(f"Applied {len(changes)} ARIA fixes")
        return FixResult(fixed_text=fixed, changes=changes)

    # =========================================================================
    # Pass 1: Redundant roles
    # =========================================================================

    def _remove_redundant_roles(self, text: str, changes: List[FixChange]) -> str:
        def replace(match):
            tag = tag_from_match(match)
            native = implicit_role(tag.name, tag.attribute_text)
            if not native or tag.role != native:
                return tag.text

            changes.append(FixChange(
                kind=FixKind.REMOVED_REDUNDANT_ROLE,
                message=(
                    f"Removed redundant {_attr('role', native)} "
                    f"from {_code(f'<{tag.name}>')} because the element already has that "
                    "implicit role."
                ),
                tag_name=tag.name,
                role=native,
                attributes=('role',),
            ))
            attrs = self.ROLE_ATTRIBUTE_PATTERN.sub('', tag.attribute_text, count=1)
            return f"<{tag.raw_name}{attrs}>"

        return TAG_PATTERN.sub(replace, text)

    # =========================================================================
    # Pass 2: Default checked state
    # =========================================================================

    def _add_default_checked(self, text: str, changes: List[FixChange]) -> str:
        value = self.options.default_checked

        def replace(match):
            tag = tag_from_match(match)
            role = tag.role
            if role not in self.CHECKED_ROLES or has_attribute(tag.attribute_text, 'aria-checked'):
                return tag.text

            changes.append(FixChange(
                kind=FixKind.ADDED_ARIA_CHECKED,
                message=(
                    f"Added default {_attr('aria-checked', value)} to element with "
                    f"{_attr('role', role)} so its state is exposed to assistive "
                    "technologies."
                ),
                tag_name=tag.name,
                role=role,
                attributes=('aria-checked',),
            ))
            return _append_attributes(tag, f' aria-checked="{value}"')

        return TAG_PATTERN.sub(replace, text)

    # =========================================================================
    # Pass 3: Default value range
    # =========================================================================

    def _add_default_value_range(self, text: str, changes: List[FixChange]) -> str:
        defaults = (
            ('aria-valuemin', self.options.default_value_min),
            ('aria-valuemax', self.options.default_value_max),
            ('aria-valuenow', self.options.default_value_now),
        )

        def replace(match):
            tag = tag_from_match(match)
            role = tag.role
            if role not in self.VALUE_RANGE_ROLES:
                return tag.text

            missing = [(name, value) for name, value in defaults
                       if not has_attribute(tag.attribute_text, name)]
            if not missing:
                return tag.text

            changes.append(FixChange(
                kind=FixKind.ADDED_VALUE_RANGE,
                message=(
                    f"Added default {', '.join(_code(name) for name, _ in missing)} to "
                    f"element with {_attr('role', role)} so its value range is "
                    "communicated."
                ),
                tag_name=tag.name,
                role=role,
                attributes=tuple(name for name, _ in missing),
            ))
            addition = ''.join(f' {name}="{value}"' for name, value in missing)
            return _append_attributes(tag, addition)

        return TAG_PATTERN.sub(replace, text)

    # =========================================================================
    # Pass 4: Tablist containers
    # =========================================================================

    def _add_tablists(self, text: str, changes: List[FixChange]) -> str:
        """Non-greedy variant: the first same-named closing tag ends the container"""
        def replace(match):
            tag = TagOccurrence(
                name=match.group(1).lower(),
                raw_name=match.group(1),
                attribute_text=match.group(2),
                text=match.group(0)[:match.start(3) - match.start()],
                start=match.start(),
                end=match.start(3),
            )
            # A container that already has a role is left alone
            if has_attribute(tag.attribute_text, 'role'):
                return match.group(0)
            return self._tablist_tag(tag, changes) + match.group(3)

        return self.TABLIST_CONTAINER_PATTERN.sub(replace, text)

    def _add_tablists_tracked(self, text: str, changes: List[FixChange]) -> str:
        """Depth-tracked variant: the container's own closing tag ends it"""
        pieces = []
        last = 0
        resume = 0

        for tag in iter_tags(text):
            if tag.start < resume:
                continue
            close = find_matching_close(text, tag)
            if close is None or not self.TAB_ROLE_PATTERN.search(text[tag.end:close[0]]):
                continue

            if not has_attribute(tag.attribute_text, 'role'):
                pieces.append(text[last:tag.start])
                pieces.append(self._tablist_tag(tag, changes))
                last = tag.end
            elif tag.role != 'tablist':
                # Some other composite; its tabs may still sit in a nested container
                continue
            resume = close[1]

        pieces.append(text[last:])
        return ''.join(pieces)

    def _tablist_tag(self, tag: TagOccurrence, changes: List[FixChange]) -> str:
        changes.append(FixChange(
            kind=FixKind.ADDED_TABLIST,
            message=(
                f"Added {_attr('role', 'tablist')} to {_code(f'<{tag.name}>')} that wraps "
                f"elements with {_attr('role', 'tab')}."
            ),
            tag_name=tag.name,
            role='tablist',
            attributes=('role',),
        ))
        return _append_attributes(tag, ' role="tablist"')


# =============================================================================
# Convenience Functions
# =============================================================================

def generate_fixed_code(snippet: Optional[str], options: Optional[FixOptions] = None) -> FixResult:
    """
    Convenience function to apply the conservative ARIA fixes.

    Args:
        snippet: Raw markup text
        options: Optional configuration

    Returns:
        FixResult with the fixed text and the ordered change log
    """
    return AriaAutofixer(options).fix(snippet)


def fix_file(input_path: str, output_path: Optional[str] = None,
             options: Optional[FixOptions] = None) -> str:
    """
    Apply the ARIA fixes to a file.

    Args:
        input_path: Path to the input snippet or HTML file
        output_path: Path for output file (default: input.fixed.html)
        options: Optional configuration

    Returns:
        Path to output file
    """
    input_path = Path(input_path)
    if output_path is None:
        output_path = input_path.with_suffix('.fixed.html')
    else:
        output_path = Path(output_path)

    with open(input_path, 'r', encoding='utf-8') as f:
        snippet = f.read()

    result = generate_fixed_code(snippet, options)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(result.fixed_text)

    logger.info(f"Wrote {len(result.changes)} ARIA fixes to {output_path}")
    return str(output_path)

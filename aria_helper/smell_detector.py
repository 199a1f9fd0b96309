"""
ARIA Smell Detector

Heuristic checks for WAI-ARIA misuse in a markup snippet. Works on the flat
tag sequence from the scanner, so "containment" means "present somewhere in
the snippet", never real ancestry.

Passes, always run in this order:
1. Role semantics      - redundant or overriding roles, hidden focusables
2. Interaction         - mouse-only handlers, disclosure/dialog/switch state
3. Accessible name     - unnamed controls, conflicting or empty name sources
4. Attributes          - required, discouraged and invalid aria-* values
5. Structure           - owned roles without their container role

Usage:
    from aria_helper.smell_detector import SmellDetector

    detector = SmellDetector()
    for diagnostic in detector.detect('<div role="switch">'):
        print(diagnostic.kind.value, diagnostic.text)
"""

import html
import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from .aria_data import (
    discouraged_attributes_for,
    is_valid_aria_value,
    required_attributes_for,
)
from .implicit_roles import implicit_role
from .tag_scanner import (
    ATTRIBUTE_START,
    TagOccurrence,
    attribute_value,
    extract_aria_attributes,
    has_attribute,
    inner_text_after,
    iter_tags,
    plain_text,
)

logger = logging.getLogger(__name__)


class SmellCategory(Enum):
    """The five detector passes, in run order"""
    ROLE_SEMANTICS = "role-semantics"
    INTERACTION = "interaction"
    ACCESSIBLE_NAME = "accessible-name"
    ATTRIBUTES = "attributes"
    STRUCTURE = "structure"


class SmellKind(Enum):
    """Every diagnostic the detector can emit"""
    # Role semantics
    REDUNDANT_ROLE = "redundant-role"
    ROLE_OVERRIDES_NATIVE = "role-overrides-native"
    PRESENTATIONAL_FOCUSABLE = "presentational-focusable"
    # Interaction
    MOUSE_ONLY_HANDLER = "mouse-only-handler"
    EXPANDED_WITHOUT_CONTROLS = "expanded-without-controls"
    TAB_WITH_EXPANDED = "tab-with-expanded"
    DIALOG_WITHOUT_MODAL = "dialog-without-modal"
    SWITCH_WITHOUT_CHECKED = "switch-without-checked"
    # Accessible name
    LABEL_WITHOUT_ROLE = "label-without-role"
    CONFLICTING_NAME_SOURCES = "conflicting-name-sources"
    BUTTON_WITHOUT_NAME = "button-without-name"
    INTERACTIVE_WITHOUT_NAME = "interactive-without-name"
    EMPTY_NAME = "empty-name"
    # Attributes
    MISSING_REQUIRED_ATTRIBUTE = "missing-required-attribute"
    DISCOURAGED_ATTRIBUTE = "discouraged-attribute"
    INVALID_ATTRIBUTE_VALUE = "invalid-attribute-value"
    # Structure
    TAB_WITHOUT_TABLIST = "tab-without-tablist"
    TABPANEL_WITHOUT_TAB = "tabpanel-without-tab"
    OPTION_WITHOUT_LISTBOX = "option-without-listbox"
    MENUITEM_WITHOUT_MENU = "menuitem-without-menu"
    TREEITEM_WITHOUT_TREE = "treeitem-without-tree"
    ROW_WITHOUT_TABLE = "row-without-table"
    CELL_WITHOUT_ROW = "cell-without-row"


KIND_CATEGORIES: Dict[SmellKind, SmellCategory] = {
    SmellKind.REDUNDANT_ROLE: SmellCategory.ROLE_SEMANTICS,
    SmellKind.ROLE_OVERRIDES_NATIVE: SmellCategory.ROLE_SEMANTICS,
    SmellKind.PRESENTATIONAL_FOCUSABLE: SmellCategory.ROLE_SEMANTICS,
    SmellKind.MOUSE_ONLY_HANDLER: SmellCategory.INTERACTION,
    SmellKind.EXPANDED_WITHOUT_CONTROLS: SmellCategory.INTERACTION,
    SmellKind.TAB_WITH_EXPANDED: SmellCategory.INTERACTION,
    SmellKind.DIALOG_WITHOUT_MODAL: SmellCategory.INTERACTION,
    SmellKind.SWITCH_WITHOUT_CHECKED: SmellCategory.INTERACTION,
    SmellKind.LABEL_WITHOUT_ROLE: SmellCategory.ACCESSIBLE_NAME,
    SmellKind.CONFLICTING_NAME_SOURCES: SmellCategory.ACCESSIBLE_NAME,
    SmellKind.BUTTON_WITHOUT_NAME: SmellCategory.ACCESSIBLE_NAME,
    SmellKind.INTERACTIVE_WITHOUT_NAME: SmellCategory.ACCESSIBLE_NAME,
    SmellKind.EMPTY_NAME: SmellCategory.ACCESSIBLE_NAME,
    SmellKind.MISSING_REQUIRED_ATTRIBUTE: SmellCategory.ATTRIBUTES,
    SmellKind.DISCOURAGED_ATTRIBUTE: SmellCategory.ATTRIBUTES,
    SmellKind.INVALID_ATTRIBUTE_VALUE: SmellCategory.ATTRIBUTES,
    SmellKind.TAB_WITHOUT_TABLIST: SmellCategory.STRUCTURE,
    SmellKind.TABPANEL_WITHOUT_TAB: SmellCategory.STRUCTURE,
    SmellKind.OPTION_WITHOUT_LISTBOX: SmellCategory.STRUCTURE,
    SmellKind.MENUITEM_WITHOUT_MENU: SmellCategory.STRUCTURE,
    SmellKind.TREEITEM_WITHOUT_TREE: SmellCategory.STRUCTURE,
    SmellKind.ROW_WITHOUT_TABLE: SmellCategory.STRUCTURE,
    SmellKind.CELL_WITHOUT_ROW: SmellCategory.STRUCTURE,
}

# Maximum findings per snippet for each kind; kinds not listed are unlimited.
# Repetitive patterns get one root-cause finding instead of one per tag.
DEFAULT_RULE_CAPS: Dict[SmellKind, Optional[int]] = {
    SmellKind.PRESENTATIONAL_FOCUSABLE: 1,
    SmellKind.MOUSE_ONLY_HANDLER: 1,
    SmellKind.EXPANDED_WITHOUT_CONTROLS: 1,
    SmellKind.TAB_WITH_EXPANDED: 1,
    SmellKind.DIALOG_WITHOUT_MODAL: 1,
    SmellKind.SWITCH_WITHOUT_CHECKED: 1,
    SmellKind.TAB_WITHOUT_TABLIST: 1,
    SmellKind.TABPANEL_WITHOUT_TAB: 1,
    SmellKind.OPTION_WITHOUT_LISTBOX: 1,
    SmellKind.MENUITEM_WITHOUT_MENU: 1,
    SmellKind.TREEITEM_WITHOUT_TREE: 1,
    SmellKind.ROW_WITHOUT_TABLE: 1,
    SmellKind.CELL_WITHOUT_ROW: 1,
}


@dataclass
class DetectorOptions:
    """Configuration options for smell detection."""
    check_role_semantics: bool = True
    check_interaction: bool = True
    check_accessible_name: bool = True
    check_attributes: bool = True
    check_structure: bool = True
    # Overrides merged over DEFAULT_RULE_CAPS; None lifts the cap
    rule_caps: Dict[SmellKind, Optional[int]] = field(default_factory=dict)


@dataclass
class Diagnostic:
    """A single detected ARIA smell"""
    kind: SmellKind
    message: str                             # HTML fragment with <code> markers
    subject_attribute: Optional[str] = None
    subject_role: Optional[str] = None
    tag_name: Optional[str] = None

    @property
    def category(self) -> SmellCategory:
        return KIND_CATEGORIES[self.kind]

    @property
    def text(self) -> str:
        """Message with markup removed, for plain-text output"""
        return plain_text(self.message)


class _Findings:
    """Ordered diagnostic list that enforces per-kind caps."""

    def __init__(self, caps: Dict[SmellKind, Optional[int]]):
        self.caps = caps
        self.items: List[Diagnostic] = []
        self.counts: Counter = Counter()

    def full(self, kind: SmellKind) -> bool:
        cap = self.caps.get(kind)
        return cap is not None and self.counts[kind] >= cap

    def add(self, diagnostic: Diagnostic) -> None:
        if self.full(diagnostic.kind):
            return
        self.items.append(diagnostic)
        self.counts[diagnostic.kind] += 1


def _code(text: str) -> str:
    return f"<code>{html.escape(text, quote=False)}</code>"


def _tag(name: str) -> str:
    return _code(f"<{name}>")


def _role_attr(role: str) -> str:
    return _code(f'role="{role}"')


_TABINDEX_ZERO = _code('tabindex="0"')
_MODAL_TRUE = _code('aria-modal="true"')


# =============================================================================
# Detector
# =============================================================================

class SmellDetector:
    """
    Rule-based ARIA smell detector.

    Each call to detect() is independent; the detector keeps no state
    between snippets.
    """

    PRESENTATIONAL_ROLES = {'presentation', 'none'}

    FOCUSABLE_TAGS = {'a', 'button', 'input', 'select', 'textarea'}

    NATIVE_INTERACTIVE_TAGS = {'a', 'button', 'input', 'textarea', 'select', 'option'}

    INTERACTIVE_ROLES_NEEDING_NAME = [
        'button', 'link', 'switch', 'checkbox', 'radio',
        'menuitem', 'menuitemcheckbox', 'menuitemradio', 'tab', 'option',
    ]

    TABINDEX_PATTERN = re.compile(ATTRIBUTE_START + r'tabindex\s*=\s*["\']?-?\d+["\']?', re.IGNORECASE)
    CLICK_HANDLER_PATTERN = re.compile(
        ATTRIBUTE_START + r'(onclick|onmousedown|onmouseup)\s*=\s*["\'][^"\']*["\']', re.IGNORECASE
    )
    KEY_HANDLER_PATTERN = re.compile(ATTRIBUTE_START + r'onkey(down|up|press)\s*=', re.IGNORECASE)
    EMPTY_NAME_PATTERN = re.compile(
        ATTRIBUTE_START + r'(aria-label|aria-labelledby)\s*=\s*["\']\s*["\']', re.IGNORECASE
    )

    # (kind, owned roles, container roles, message)
    STRUCTURE_RULES = [
        (SmellKind.TAB_WITHOUT_TABLIST, ['tab'], ['tablist'],
         f"Found elements with {_role_attr('tab')} but no {_role_attr('tablist')}. "
         "Tabs are usually contained in a tablist element."),
        (SmellKind.TABPANEL_WITHOUT_TAB, ['tabpanel'], ['tab'],
         f"Found elements with {_role_attr('tabpanel')} but no {_role_attr('tab')}. "
         "Tab panels are usually controlled by tabs."),
        (SmellKind.OPTION_WITHOUT_LISTBOX, ['option'], ['listbox', 'combobox'],
         f"Found elements with {_role_attr('option')} but no {_role_attr('listbox')} "
         f"or {_role_attr('combobox')}. Options are usually children of these "
         "composite widgets."),
        (SmellKind.MENUITEM_WITHOUT_MENU, ['menuitem', 'menuitemcheckbox', 'menuitemradio'],
         ['menu', 'menubar'],
         f"Found menu item roles (such as {_role_attr('menuitem')}) but no "
         f"{_role_attr('menu')} or {_role_attr('menubar')}. Menu items are usually "
         "contained in menu or menubar elements."),
        (SmellKind.TREEITEM_WITHOUT_TREE, ['treeitem'], ['tree'],
         f"Found elements with {_role_attr('treeitem')} but no {_role_attr('tree')}. "
         "Tree items are usually contained in a tree widget."),
        (SmellKind.ROW_WITHOUT_TABLE, ['row'], ['table', 'grid', 'treegrid'],
         f"Found elements with {_role_attr('row')} but no table, grid, or treegrid "
         "role in the snippet. Rows are usually part of these composite widgets."),
        (SmellKind.CELL_WITHOUT_ROW, ['cell', 'gridcell'], ['row'],
         f"Found elements with {_role_attr('cell')} or {_role_attr('gridcell')} but no "
         f"{_role_attr('row')} in the snippet. Cells are usually children of rows."),
    ]

    def __init__(self, options: Optional[DetectorOptions] = None):
        """
        Initialize the detector.

        Args:
            options: Pass toggles and rule caps (defaults run everything)
        """
        self.options = options or DetectorOptions()
        self.rule_caps = {**DEFAULT_RULE_CAPS, **self.options.rule_caps}

    def detect(self, snippet: Optional[str]) -> List[Diagnostic]:
        """
        Run every enabled pass over a snippet.

        Args:
            snippet: Raw markup text; None or blank yields no findings

        Returns:
            Diagnostics in pass order, left-to-right within a pass
        """
        if not snippet or not snippet.strip():
            return []

        tags = list(iter_tags(snippet))
        findings = _Findings(self.rule_caps)

        if self.options.check_role_semantics:
            self._check_role_semantics(tags, findings)
        if self.options.check_interaction:
            self._check_interaction(tags, findings)
        if self.options.check_accessible_name:
            self._check_accessible_name(snippet, tags, findings)
        if self.options.check_attributes:
            self._check_attributes(tags, findings)
        if self.options.check_structure:
            self._check_structure(tags, findings)

        logger.debug(f"Scanned {len(tags)} tags, found {len(findings.items)} ARIA smells")
        return findings.items

    # =========================================================================
    # Pass 1: Role semantics
    # =========================================================================

    def _check_role_semantics(self, tags: List[TagOccurrence], findings: _Findings) -> None:
        """Explicit roles that repeat, override or hide native semantics"""
        for tag in tags:
            role = tag.role
            if not role:
                continue

            native = implicit_role(tag.name, tag.attribute_text)
            if native and native == role:
                findings.add(Diagnostic(
                    kind=SmellKind.REDUNDANT_ROLE,
                    message=(
                        f"Native {_tag(tag.name)} already has the implicit {_code(native)} "
                        f"role. You usually don't need {_role_attr(role)} on semantic elements."
                    ),
                    subject_role=role,
                    tag_name=tag.name,
                ))
            elif native:
                findings.add(Diagnostic(
                    kind=SmellKind.ROLE_OVERRIDES_NATIVE,
                    message=(
                        f"Native {_tag(tag.name)} has implicit role {_code(native)}, but an "
                        f"explicit {_role_attr(role)} is set. This can confuse assistive "
                        "technologies; double-check that this is the intended pattern."
                    ),
                    subject_role=role,
                    tag_name=tag.name,
                ))

            if role in self.PRESENTATIONAL_ROLES and self._is_focusable(tag):
                findings.add(Diagnostic(
                    kind=SmellKind.PRESENTATIONAL_FOCUSABLE,
                    message=(
                        f"Focusable element is using {_role_attr('presentation')} or "
                        f"{_role_attr('none')}, which can hide it from assistive technologies."
                    ),
                    subject_role=role,
                    tag_name=tag.name,
                ))

    def _is_focusable(self, tag: TagOccurrence) -> bool:
        return (
            tag.name in self.FOCUSABLE_TAGS
            or bool(self.TABINDEX_PATTERN.search(tag.attribute_text))
            or has_attribute(tag.attribute_text, 'href', allow_empty=False)
        )

    # =========================================================================
    # Pass 2: Interaction
    # =========================================================================

    def _check_interaction(self, tags: List[TagOccurrence], findings: _Findings) -> None:
        """Keyboard support and state attributes of interactive patterns"""
        for tag in tags:
            if findings.full(SmellKind.MOUSE_ONLY_HANDLER):
                break
            handler = self.CLICK_HANDLER_PATTERN.search(tag.attribute_text)
            if not handler or self._has_keyboard_support(tag):
                continue
            findings.add(Diagnostic(
                kind=SmellKind.MOUSE_ONLY_HANDLER,
                message=(
                    "Element has a mouse event handler but no keyboard support. Consider "
                    f"using a {_tag('button')} or adding keyboard handlers and "
                    f"{_TABINDEX_ZERO}."
                ),
                subject_attribute=handler.group(1).lower(),
                tag_name=tag.name,
            ))

        for tag in tags:
            if findings.full(SmellKind.EXPANDED_WITHOUT_CONTROLS):
                break
            if not self._has_boolean(tag, 'aria-expanded'):
                continue
            if has_attribute(tag.attribute_text, 'aria-controls', allow_empty=False):
                continue
            findings.add(Diagnostic(
                kind=SmellKind.EXPANDED_WITHOUT_CONTROLS,
                message=(
                    f"Element uses {_code('aria-expanded')} without a matching "
                    f"{_code('aria-controls')}. Consider referencing the ID of the "
                    f"collapsible content with {_code('aria-controls')}."
                ),
                subject_attribute='aria-expanded',
                tag_name=tag.name,
            ))

        if any(tag.role == 'tab' and self._has_boolean(tag, 'aria-expanded') for tag in tags):
            findings.add(Diagnostic(
                kind=SmellKind.TAB_WITH_EXPANDED,
                message=(
                    f"Found {_code('aria-expanded')} on an element with {_role_attr('tab')}. "
                    f"Tabs usually use {_code('aria-selected')} to indicate the active tab."
                ),
                subject_attribute='aria-expanded',
                subject_role='tab',
            ))

        roles = {tag.role for tag in tags}

        if 'dialog' in roles and not any(self._has_boolean(tag, 'aria-modal') for tag in tags):
            findings.add(Diagnostic(
                kind=SmellKind.DIALOG_WITHOUT_MODAL,
                message=(
                    f"Dialog found without {_code('aria-modal')}. If this is a modal dialog, "
                    f"consider {_MODAL_TRUE} and managing focus."
                ),
                subject_attribute='aria-modal',
                subject_role='dialog',
            ))

        if 'switch' in roles and not any(self._has_boolean(tag, 'aria-checked') for tag in tags):
            findings.add(Diagnostic(
                kind=SmellKind.SWITCH_WITHOUT_CHECKED,
                message=(
                    f"Element with {_role_attr('switch')} is missing {_code('aria-checked')}. "
                    "Switches should expose their on/off state."
                ),
                subject_attribute='aria-checked',
                subject_role='switch',
            ))

    def _has_keyboard_support(self, tag: TagOccurrence) -> bool:
        tabindex = attribute_value(tag.attribute_text, 'tabindex')
        return (
            tag.name in self.NATIVE_INTERACTIVE_TAGS
            or tag.role == 'button'
            or (tabindex is not None and tabindex.strip() == '0')
            or bool(self.KEY_HANDLER_PATTERN.search(tag.attribute_text))
        )

    @staticmethod
    def _has_boolean(tag: TagOccurrence, name: str) -> bool:
        value = attribute_value(tag.attribute_text, name)
        return value is not None and value.strip().lower() in ('true', 'false')

    # =========================================================================
    # Pass 3: Accessible name
    # =========================================================================

    def _check_accessible_name(self, snippet: str, tags: List[TagOccurrence],
                               findings: _Findings) -> None:
        """Missing, conflicting and empty accessible names"""
        for tag in tags:
            has_label = has_attribute(tag.attribute_text, 'aria-label')
            has_labelledby = has_attribute(tag.attribute_text, 'aria-labelledby')
            if not has_label and not has_labelledby:
                continue

            if not tag.role and not implicit_role(tag.name, tag.attribute_text):
                findings.add(Diagnostic(
                    kind=SmellKind.LABEL_WITHOUT_ROLE,
                    message=(
                        f"Element {_tag(tag.name)} has {_code('aria-label')} or "
                        f"{_code('aria-labelledby')} but no semantic role. Consider adding a "
                        f"role or using a native element (for example, {_tag('button')}, "
                        f"{_tag('nav')}, or {_tag('main')})."
                    ),
                    subject_attribute='aria-label' if has_label else 'aria-labelledby',
                    tag_name=tag.name,
                ))

            if has_label and has_labelledby:
                findings.add(Diagnostic(
                    kind=SmellKind.CONFLICTING_NAME_SOURCES,
                    message=(
                        f"Element {_tag(tag.name)} uses {_code('aria-label')} and "
                        f"{_code('aria-labelledby')} together. Elements should have a single "
                        "accessible name source; choose one."
                    ),
                    subject_attribute='aria-labelledby',
                    tag_name=tag.name,
                ))

        for tag in tags:
            if tag.name != 'button' or self._has_name_attribute(tag):
                continue
            inner = inner_text_after(snippet, tag)
            if inner is None or inner:
                continue
            findings.add(Diagnostic(
                kind=SmellKind.BUTTON_WITHOUT_NAME,
                message=(
                    f"Native {_tag('button')} does not have an accessible name. Add visible "
                    f"text inside the button, or use {_code('aria-label')}, "
                    f"{_code('aria-labelledby')}, or {_code('title')}."
                ),
                subject_role='button',
                tag_name=tag.name,
            ))

        for tag in tags:
            role = tag.role
            if role not in self.INTERACTIVE_ROLES_NEEDING_NAME:
                continue
            if tag.name in self.NATIVE_INTERACTIVE_TAGS or self._has_name_attribute(tag):
                continue
            # Visible content up to the first same-named closing tag names it
            if inner_text_after(snippet, tag):
                continue
            findings.add(Diagnostic(
                kind=SmellKind.INTERACTIVE_WITHOUT_NAME,
                message=(
                    f"Interactive element {_tag(tag.name)} with {_role_attr(role)} does not "
                    f"have an accessible name. Add visible text, {_code('aria-label')}, or "
                    f"{_code('aria-labelledby')}."
                ),
                subject_role=role,
                tag_name=tag.name,
            ))

        for match in self.EMPTY_NAME_PATTERN.finditer(snippet):
            attribute = match.group(1).lower()
            findings.add(Diagnostic(
                kind=SmellKind.EMPTY_NAME,
                message=(
                    f"Attribute {_code(attribute)} is present but empty. Elements should not "
                    "use an empty accessible name; provide meaningful text or remove the "
                    "attribute."
                ),
                subject_attribute=attribute,
            ))

    @staticmethod
    def _has_name_attribute(tag: TagOccurrence) -> bool:
        return any(
            has_attribute(tag.attribute_text, name)
            for name in ('aria-label', 'aria-labelledby', 'title')
        )

    # =========================================================================
    # Pass 4: Attributes
    # =========================================================================

    def _check_attributes(self, tags: List[TagOccurrence], findings: _Findings) -> None:
        """Required, discouraged and invalid aria-* attributes on role-bearing tags"""
        for tag in tags:
            role = tag.role
            if not role:
                continue

            attributes = extract_aria_attributes(tag.attribute_text)
            names = {attr.name for attr in attributes}

            for name in required_attributes_for(role):
                if name not in names:
                    findings.add(Diagnostic(
                        kind=SmellKind.MISSING_REQUIRED_ATTRIBUTE,
                        message=(
                            f"Element with {_role_attr(role)} is missing required "
                            f"{_code(name)}."
                        ),
                        subject_attribute=name,
                        subject_role=role,
                        tag_name=tag.name,
                    ))

            for name in discouraged_attributes_for(role):
                if name in names:
                    findings.add(Diagnostic(
                        kind=SmellKind.DISCOURAGED_ATTRIBUTE,
                        message=(
                            f"Attribute {_code(name)} is not typically used with "
                            f"{_role_attr(role)}. Double-check if this is the right pattern."
                        ),
                        subject_attribute=name,
                        subject_role=role,
                        tag_name=tag.name,
                    ))

            for attr in attributes:
                if is_valid_aria_value(attr.name, attr.value):
                    continue
                quoted = f'"{attr.value}"'
                findings.add(Diagnostic(
                    kind=SmellKind.INVALID_ATTRIBUTE_VALUE,
                    message=(
                        f"Attribute {_code(attr.name)} has value {_code(quoted)}, "
                        "which is not a valid value for this ARIA attribute."
                    ),
                    subject_attribute=attr.name,
                    subject_role=role,
                    tag_name=tag.name,
                ))

    # =========================================================================
    # Pass 5: Structure
    # =========================================================================

    def _check_structure(self, tags: List[TagOccurrence], findings: _Findings) -> None:
        """Owned roles with no container role anywhere in the snippet"""
        present: Set[str] = {tag.role for tag in tags if tag.role}

        for kind, owned, containers, message in self.STRUCTURE_RULES:
            found = [role for role in owned if role in present]
            if not found or any(role in present for role in containers):
                continue
            findings.add(Diagnostic(
                kind=kind,
                message=message,
                subject_role=found[0],
            ))


# =============================================================================
# Convenience Functions
# =============================================================================

def detect_diagnostics(snippet: Optional[str],
                       options: Optional[DetectorOptions] = None) -> List[Diagnostic]:
    """
    Convenience function returning structured diagnostics for a snippet.

    Args:
        snippet: Raw markup text
        options: Optional detector configuration

    Returns:
        List of Diagnostic records (empty when nothing was found)
    """
    return SmellDetector(options).detect(snippet)


def detect_smells(snippet: Optional[str]) -> List[str]:
    """
    Detect ARIA smells and return their HTML-fragment messages.

    Args:
        snippet: Raw markup text

    Returns:
        Messages in detection order
    """
    return [diagnostic.message for diagnostic in SmellDetector().detect(snippet)]

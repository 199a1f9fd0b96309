"""
ARIA Reference Data

Static lookup tables used by the scanner, detector and autofixer:

- ARIA_ROLES: metadata for every non-abstract WAI-ARIA role
- ARIA_STATE_HINTS: short explanations for common aria-* attributes
- ROLE_REQUIRED_ARIA: attributes a role needs to expose its state
- ROLE_DISCOURAGED_ARIA: attribute/role combinations that are usually a smell

Usage:
    from aria_helper.aria_data import find_role

    role = find_role("Tab")
    print(role.category, role.doc_url)
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple


MDN_ROLES_URL = "https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/Roles"


@dataclass(frozen=True)
class RoleDescriptor:
    """Reference entry for a single ARIA role."""
    name: str
    category: str
    description: str
    doc_url: Optional[str] = None
    preferred_native_element: Optional[str] = None
    good_for: Tuple[str, ...] = ()
    deprecated: bool = False


def _role(name: str, category: str, description: str, **extra) -> RoleDescriptor:
    doc_url = extra.pop('doc_url', f"{MDN_ROLES_URL}/{name}_role")
    return RoleDescriptor(name=name, category=category, description=description,
                          doc_url=doc_url, **extra)


# =============================================================================
# Roles
# =============================================================================

ROLE_CATEGORIES = (
    "live region",
    "landmark",
    "window",
    "widget",
    "document structure",
    "other",
)

ARIA_ROLES: Tuple[RoleDescriptor, ...] = (
    # Live regions
    _role("alert", "live region", "Important, usually time-sensitive information."),
    _role("log", "live region",
          "Live region where new information is added and old information may disappear."),
    _role("marquee", "live region", "Non-essential information that changes frequently."),
    _role("status", "live region", "Advisory information; usually not as urgent as an alert."),
    _role("timer", "live region", "Numeric counter which indicates elapsed or remaining time."),

    # Landmarks
    _role("banner", "landmark",
          "Site-oriented content, typically including a logo or site-level heading."),
    _role("complementary", "landmark",
          "Supporting section of the page, complementary but not central."),
    _role("contentinfo", "landmark", "Metadata about the page such as copyright or related links."),
    _role("form", "landmark",
          "Region of the page that represents a form, when it has an accessible name."),
    _role("main", "landmark", "Main content of a document; unique and central to the page.",
          preferred_native_element="<main>"),
    _role("navigation", "landmark", "Collection of navigational links.",
          preferred_native_element="<nav>"),
    _role("region", "landmark", "Noteworthy section of the page with an accessible name."),
    _role("search", "landmark", "Region of the page devoted to search functionality."),

    # Windows
    _role("alertdialog", "window", "Dialog containing an alert or time-sensitive information."),
    _role("dialog", "window", "Modal or non-modal dialog window."),

    # Widgets
    _role("button", "widget", "Clickable element that performs an action.",
          preferred_native_element="<button>",
          good_for=("custom button", "icon button", "JS-only click handler")),
    _role("checkbox", "widget", "Checkable input that has two or three states."),
    _role("combobox", "widget",
          "Composite widget combining a text field with a list of possible values."),
    _role("grid", "widget", "Widget with rows and cells, similar to a spreadsheet."),
    _role("gridcell", "widget", "Cell in a grid or treegrid, similar to HTML <td>."),
    _role("link", "widget", "Interactive reference to a resource.",
          preferred_native_element="<a href>"),
    _role("listbox", "widget", "List of options from which a user can select one or more."),
    _role("menu", "widget", "A type of list that offers a set of choices."),
    _role("menubar", "widget", "Presentation of a menu that is usually persistent and horizontal."),
    _role("menuitem", "widget", "Option in a set of choices contained in a menu or menubar."),
    _role("menuitemcheckbox", "widget", "Checkable menu item with true/false/mixed states."),
    _role("menuitemradio", "widget",
          "Menu item that is part of a group where only one can be checked."),
    _role("meter", "widget", "Represents a scalar measurement within a known range."),
    _role("option", "widget", "Selectable item in a listbox, combo box, or tree."),
    _role("progressbar", "widget", "Displays the progress status for a task."),
    _role("radio", "widget",
          "Checkable input in a group of radio roles, where only one can be checked."),
    _role("radiogroup", "widget", "Group of related radio buttons."),
    _role("scrollbar", "widget", "Controls the scrolling of content within a region."),
    _role("searchbox", "widget", "Text box that is intended for search."),
    _role("separator", "widget",
          "Divides and distinguishes sections of content. Focusable when used as a widget."),
    _role("slider", "widget", "Allows the user to select a value from a given range."),
    _role("spinbutton", "widget", "Allows the user to step through a range of values."),
    _role("switch", "widget", "Represents a checkbox that represents on/off values."),
    _role("tab", "widget", "A header in a tabbed interface.",
          good_for=("tabbed navigation",)),
    _role("tablist", "widget", "Container for a set of tabs."),
    _role("tabpanel", "widget", "The panel associated with a tab.",
          good_for=("tab content",)),
    _role("textbox", "widget", "Input that allows free-form text."),
    _role("tree", "widget", "Widget that presents a hierarchical list of items."),
    _role("treegrid", "widget",
          "Grid whose rows can be expanded and collapsed in a hierarchical structure."),
    _role("treeitem", "widget", "Item in a tree structure."),
    _role("toolbar", "widget", "Group of controls, such as buttons or checkboxes."),
    _role("tooltip", "widget", "Popup that provides a description for another element."),

    # Document structure
    _role("article", "document structure", "Self-contained composition in a document or site."),
    _role("cell", "document structure", "Generic cell in a tabular container."),
    _role("columnheader", "document structure", "Header for a column of cells."),
    _role("definition", "document structure", "Definition of a term or concept."),
    _role("document", "document structure",
          "Section of content to be read in document/browse mode inside an application."),
    _role("feed", "document structure",
          "Dynamic list of articles or concepts that may be loaded progressively."),
    _role("figure", "document structure",
          "Illustration, diagram, code snippet, etc., that is referenced from the main content."),
    _role("group", "document structure",
          "Set of user interface objects that are not included in a page summary "
          "or table of contents."),
    _role("heading", "document structure", "Heading for a section of the page."),
    _role("img", "document structure",
          "Element that represents a single graphical image composed of multiple elements."),
    _role("list", "document structure", "Container for a list of items."),
    _role("listitem", "document structure", "Item within a list."),
    _role("math", "document structure", "Mathematical expression."),
    _role("note", "document structure",
          "Content that is parenthetical or ancillary to the main content."),
    _role("presentation", "document structure",
          "Removes the element's implicit semantics, synonym of none."),
    _role("none", "document structure", "Synonym of presentation; removes semantics."),
    _role("row", "document structure", "Row of cells in a table, grid, or treegrid."),
    _role("rowgroup", "document structure", "Group of rows within a tabular container."),
    _role("rowheader", "document structure", "Header for a row of cells."),
    _role("table", "document structure", "A table of data arranged in rows and columns."),
    _role("term", "document structure",
          "Term or concept that is defined by the associated definition."),
    _role("generic", "document structure", "Nameless container element with no semantic meaning."),
    # Deprecated but still seen in the wild
    _role("directory", "document structure",
          "Deprecated: static table of contents. Use list instead.",
          deprecated=True,
          doc_url="https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/"
                  "Reference/Roles/directory_role"),

    # Other
    _role("application", "other", "Indicates the element is a web application, not a document."),
)

_ROLES_BY_NAME: Dict[str, RoleDescriptor] = {role.name: role for role in ARIA_ROLES}

if len(_ROLES_BY_NAME) != len(ARIA_ROLES):
    raise ValueError("Duplicate role name in ARIA_ROLES")


# =============================================================================
# Attribute tables
# =============================================================================

ARIA_STATE_HINTS: Dict[str, str] = {
    "aria-expanded": "Indicates whether the element controls content that can be expanded or collapsed.",
    "aria-pressed": "Represents the pressed state of a toggle button.",
    "aria-checked": "Represents the checked state of checkboxes, radio buttons, and switches.",
    "aria-selected": "Represents the selected state of items in tabs, listboxes, and other composite widgets.",
    "aria-disabled": "Marks the element as disabled and not operable.",
    "aria-hidden": "Indicates whether the element is exposed to assistive technologies.",
    "aria-modal": "Indicates whether a dialog is modal.",
    "aria-controls": "Identifies the element(s) whose content or presence is controlled by this element.",
    "aria-labelledby": "Identifies the element(s) that label this element.",
    "aria-describedby": "Identifies the element(s) that describe this element.",
}

_VALUE_RANGE = ("aria-valuemin", "aria-valuemax", "aria-valuenow")

ROLE_REQUIRED_ARIA: Dict[str, Tuple[str, ...]] = {
    "checkbox": ("aria-checked",),
    "switch": ("aria-checked",),
    "menuitemcheckbox": ("aria-checked",),
    "menuitemradio": ("aria-checked",),
    "tab": ("aria-selected",),
    "option": ("aria-selected",),
    "slider": _VALUE_RANGE,
    "spinbutton": _VALUE_RANGE,
    "scrollbar": _VALUE_RANGE,
    "progressbar": _VALUE_RANGE,
    "combobox": ("aria-expanded", "aria-controls"),
}

ROLE_DISCOURAGED_ARIA: Dict[str, Tuple[str, ...]] = {
    "button": ("aria-selected",),
    "tabpanel": ("aria-selected",),
    "listitem": ("aria-expanded",),
    "checkbox": ("aria-selected",),
    "radio": ("aria-selected",),
    "link": ("aria-pressed",),
    "tab": ("aria-pressed",),
}

# Enumerated attribute values; anything not listed here is unconstrained
ARIA_ALLOWED_VALUES: Dict[str, FrozenSet[str]] = {
    "aria-expanded": frozenset({"true", "false", "undefined"}),
    "aria-selected": frozenset({"true", "false", "undefined"}),
    "aria-hidden": frozenset({"true", "false", "undefined"}),
    "aria-checked": frozenset({"true", "false", "mixed", "undefined"}),
    "aria-pressed": frozenset({"true", "false", "mixed", "undefined"}),
    "aria-modal": frozenset({"true", "false"}),
}


# =============================================================================
# Lookups
# =============================================================================

def _normalize(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def find_role(name: Optional[str]) -> Optional[RoleDescriptor]:
    """
    Look up a role by exact name.

    Matching is case-insensitive and ignores surrounding whitespace; there is
    no fuzzy or partial matching.

    Args:
        name: Role name as written in markup

    Returns:
        RoleDescriptor, or None for unknown or blank names
    """
    return _ROLES_BY_NAME.get(_normalize(name))


lookup_role = find_role


def required_attributes_for(role: Optional[str]) -> Tuple[str, ...]:
    """Attributes a role must carry; empty for unknown roles."""
    return ROLE_REQUIRED_ARIA.get(_normalize(role), ())


def discouraged_attributes_for(role: Optional[str]) -> Tuple[str, ...]:
    """Attributes that are usually wrong on a role; empty for unknown roles."""
    return ROLE_DISCOURAGED_ARIA.get(_normalize(role), ())


def state_hint_for(attribute: Optional[str]) -> Optional[str]:
    return ARIA_STATE_HINTS.get(_normalize(attribute))


def is_valid_aria_value(name: Optional[str], value: Optional[str]) -> bool:
    """
    Check an aria-* value against the enumerated values it accepts.

    Unknown attribute names always validate.
    """
    allowed = ARIA_ALLOWED_VALUES.get(_normalize(name))
    if allowed is None:
        return True
    return _normalize(value) in allowed


def roles_by_category(category: str) -> List[RoleDescriptor]:
    """All roles in a category, in table order."""
    wanted = _normalize(category)
    return [role for role in ARIA_ROLES if role.category == wanted]

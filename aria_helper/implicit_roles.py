"""
Implicit Role Resolver

Maps native elements to the role they carry without any explicit `role`
attribute. The table is deliberately small and mirrors common HTML element
semantics; anything outside it has no implicit role.
"""

from typing import Dict, Optional

from .tag_scanner import attribute_value, has_attribute


# Elements whose implicit role does not depend on attributes
ELEMENT_ROLES: Dict[str, str] = {
    'button': 'button',
    'nav': 'navigation',
    'main': 'main',
    'header': 'banner',
    'footer': 'contentinfo',
    'ul': 'list',
    'ol': 'list',
    'li': 'listitem',
    'table': 'table',
    'tr': 'row',
    'td': 'cell',
    'textarea': 'textbox',
}

INPUT_TYPE_ROLES: Dict[str, str] = {
    'button': 'button',
    'submit': 'button',
    'reset': 'button',
    'image': 'button',
    'checkbox': 'checkbox',
    'radio': 'radio',
    'email': 'textbox',
    'tel': 'textbox',
    'url': 'textbox',
    'text': 'textbox',
    'password': 'textbox',
    'search': 'textbox',
    'number': 'textbox',
}


def implicit_role(tag_name: Optional[str], attribute_text: Optional[str] = "") -> Optional[str]:
    """
    Infer the role a native element carries by default.

    Args:
        tag_name: Element name, any case
        attribute_text: The tag's attribute text (the full tag text also works)

    Returns:
        Role name, or None when the element has no implicit role here
    """
    name = (tag_name or "").strip().lower()
    attrs = attribute_text or ""

    if name in ELEMENT_ROLES:
        return ELEMENT_ROLES[name]

    # Links only count when they actually point somewhere
    if name == 'a':
        return 'link' if has_attribute(attrs, 'href', allow_empty=False) else None

    if name == 'input':
        input_type = attribute_value(attrs, 'type', allow_empty=False) or 'text'
        return INPUT_TYPE_ROLES.get(input_type.strip().lower())

    return None


def get_implicit_role_for_tag(tag_text: str, tag_name: str) -> Optional[str]:
    """Compatibility wrapper taking the full tag text first."""
    return implicit_role(tag_name, tag_text)

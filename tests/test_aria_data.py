"""
Tests for ARIA reference data.
"""

import pytest
from aria_helper.aria_data import (
    ARIA_ROLES,
    ARIA_STATE_HINTS,
    ROLE_CATEGORIES,
    ROLE_REQUIRED_ARIA,
    discouraged_attributes_for,
    find_role,
    is_valid_aria_value,
    lookup_role,
    required_attributes_for,
    roles_by_category,
    state_hint_for,
)


class TestRoleTable:
    """Tests for the ARIA_ROLES table."""

    def test_role_names_unique(self):
        """Test no two roles share a name."""
        names = [role.name for role in ARIA_ROLES]
        assert len(names) == len(set(names))

    def test_role_names_lowercase(self):
        """Test role names are stored lowercase."""
        for role in ARIA_ROLES:
            assert role.name == role.name.lower()

    def test_categories_known(self):
        """Test every role uses one of the known categories."""
        for role in ARIA_ROLES:
            assert role.category in ROLE_CATEGORIES

    def test_doc_urls(self):
        """Test roles link to MDN."""
        button = find_role("button")
        assert button.doc_url.endswith("/button_role")
        assert all(role.doc_url for role in ARIA_ROLES)

    def test_preferred_native_elements(self):
        """Test preferred native element hints."""
        assert find_role("main").preferred_native_element == "<main>"
        assert find_role("navigation").preferred_native_element == "<nav>"
        assert find_role("button").preferred_native_element == "<button>"
        assert find_role("link").preferred_native_element == "<a href>"
        assert find_role("tablist").preferred_native_element is None

    def test_directory_deprecated(self):
        """Test the directory role is flagged as deprecated."""
        assert find_role("directory").deprecated is True
        assert find_role("list").deprecated is False


class TestFindRole:
    """Tests for role lookup."""

    def test_exact_match(self):
        """Test lookup by exact name."""
        role = find_role("tab")
        assert role is not None
        assert role.name == "tab"
        assert role.category == "widget"

    def test_case_and_whitespace_ignored(self):
        """Test lookup is case-insensitive and trimmed."""
        assert find_role("  TabList ") is find_role("tablist")

    def test_no_partial_match(self):
        """Test there is no fuzzy matching."""
        assert find_role("tabl") is None
        assert find_role("buttons") is None

    def test_blank_and_none(self):
        """Test blank and None names."""
        assert find_role(None) is None
        assert find_role("") is None
        assert find_role("   ") is None

    def test_lookup_role_alias(self):
        """Test lookup_role behaves like find_role."""
        assert lookup_role("switch") is find_role("switch")


class TestAttributeTables:
    """Tests for required, discouraged and hint tables."""

    def test_required_checked_roles(self):
        """Test roles that need aria-checked."""
        for role in ("checkbox", "switch", "menuitemcheckbox", "menuitemradio"):
            assert required_attributes_for(role) == ("aria-checked",)

    def test_required_value_range(self):
        """Test range widgets need the full value triple in order."""
        for role in ("slider", "spinbutton", "scrollbar", "progressbar"):
            assert required_attributes_for(role) == (
                "aria-valuemin", "aria-valuemax", "aria-valuenow"
            )

    def test_required_combobox(self):
        """Test combobox requirements."""
        assert required_attributes_for("ComboBox") == ("aria-expanded", "aria-controls")

    def test_required_unknown_role(self):
        """Test unknown roles have no requirements."""
        assert required_attributes_for("widgetish") == ()
        assert required_attributes_for(None) == ()
        assert required_attributes_for("button") == ()

    def test_discouraged(self):
        """Test discouraged attribute lookups."""
        assert discouraged_attributes_for("button") == ("aria-selected",)
        assert discouraged_attributes_for("listitem") == ("aria-expanded",)
        assert discouraged_attributes_for("link") == ("aria-pressed",)
        assert discouraged_attributes_for("tab") == ("aria-pressed",)
        assert discouraged_attributes_for("nope") == ()

    def test_required_map_roles_exist(self):
        """Test every role in the required map is a known role."""
        for role in ROLE_REQUIRED_ARIA:
            assert find_role(role) is not None

    def test_state_hints(self):
        """Test state hint lookups."""
        assert state_hint_for("aria-modal") == ARIA_STATE_HINTS["aria-modal"]
        assert state_hint_for("ARIA-EXPANDED") is not None
        assert state_hint_for("aria-valuenow") is None


class TestValueValidation:
    """Tests for enumerated aria-* value checks."""

    def test_boolean_like_values(self):
        """Test true/false/undefined attributes."""
        for name in ("aria-expanded", "aria-selected", "aria-hidden"):
            assert is_valid_aria_value(name, "true")
            assert is_valid_aria_value(name, " FALSE ")
            assert is_valid_aria_value(name, "undefined")
            assert not is_valid_aria_value(name, "mixed")
            assert not is_valid_aria_value(name, "maybe")

    def test_tristate_values(self):
        """Test attributes that also accept mixed."""
        for name in ("aria-checked", "aria-pressed"):
            assert is_valid_aria_value(name, "mixed")
            assert not is_valid_aria_value(name, "yes")

    def test_modal_values(self):
        """Test aria-modal only accepts true or false."""
        assert is_valid_aria_value("aria-modal", "true")
        assert not is_valid_aria_value("aria-modal", "undefined")

    def test_unknown_attributes_valid(self):
        """Test unconstrained attributes always validate."""
        assert is_valid_aria_value("aria-label", "")
        assert is_valid_aria_value("aria-made-up", "anything")


class TestRolesByCategory:
    """Tests for category grouping."""

    def test_landmarks(self):
        """Test landmark roles are grouped together."""
        names = [role.name for role in roles_by_category("landmark")]
        assert "main" in names
        assert "navigation" in names
        assert "button" not in names

    def test_category_normalized(self):
        """Test category lookup is case-insensitive."""
        assert roles_by_category(" Window ") == roles_by_category("window")
        assert [role.name for role in roles_by_category("window")] == ["alertdialog", "dialog"]

    def test_unknown_category(self):
        """Test unknown categories give an empty list."""
        assert roles_by_category("abstract") == []

    def test_every_role_grouped(self):
        """Test grouping covers every role exactly once."""
        total = sum(len(roles_by_category(category)) for category in ROLE_CATEGORIES)
        assert total == len(ARIA_ROLES)

"""
ARIA Helper

Heuristic checks and conservative fixes for WAI-ARIA usage in markup
snippets. Works on the literal text of a snippet; there is no DOM, no CSS
and no computed accessibility tree.

Features:
- Reference data for every non-abstract ARIA role with MDN links
- Tolerant tag and attribute scanner
- Implicit role resolution for common native elements
- Five-pass smell detector:
  - Redundant and overriding roles
  - Mouse-only handlers and missing widget state
  - Missing, empty and conflicting accessible names
  - Required, discouraged and invalid aria-* attributes
  - Owned roles without their container role
- Conservative autofixer returning the fixed text with a change log
- Text and JSON analysis reports

Workflow:
1. Run: python check_aria.py widget.html
2. Review the report; exit code 2 means smells were found
3. Run again with --fix to write widget.fixed.html
"""

from .aria_data import (
    ARIA_ROLES,
    ARIA_STATE_HINTS,
    ROLE_CATEGORIES,
    ROLE_DISCOURAGED_ARIA,
    ROLE_REQUIRED_ARIA,
    RoleDescriptor,
    discouraged_attributes_for,
    find_role,
    lookup_role,
    required_attributes_for,
    roles_by_category,
    state_hint_for,
)

from .tag_scanner import (
    AttributeOccurrence,
    TagOccurrence,
    extract_aria_attributes,
    iter_tags,
)

from .implicit_roles import (
    get_implicit_role_for_tag,
    implicit_role,
)

from .smell_detector import (
    DEFAULT_RULE_CAPS,
    DetectorOptions,
    Diagnostic,
    SmellCategory,
    SmellDetector,
    SmellKind,
    detect_diagnostics,
    detect_smells,
)

from .autofix import (
    AriaAutofixer,
    FixChange,
    FixKind,
    FixOptions,
    FixResult,
    fix_file,
    generate_fixed_code,
)

from .analysis import (
    AnalysisReport,
    AttributeSummary,
    RoleSummary,
    analyze_snippet,
    summarize_aria_states,
    summarize_roles,
)

__version__ = '1.0.0'
__all__ = [
    # Reference data
    'ARIA_ROLES',
    'ARIA_STATE_HINTS',
    'ROLE_CATEGORIES',
    'ROLE_REQUIRED_ARIA',
    'ROLE_DISCOURAGED_ARIA',
    'RoleDescriptor',
    'find_role',
    'lookup_role',
    'required_attributes_for',
    'discouraged_attributes_for',
    'state_hint_for',
    'roles_by_category',
    # Scanning
    'AttributeOccurrence',
    'TagOccurrence',
    'iter_tags',
    'extract_aria_attributes',
    'implicit_role',
    'get_implicit_role_for_tag',
    # Detection
    'SmellDetector',
    'DetectorOptions',
    'Diagnostic',
    'SmellCategory',
    'SmellKind',
    'DEFAULT_RULE_CAPS',
    'detect_smells',
    'detect_diagnostics',
    # Autofix
    'AriaAutofixer',
    'FixOptions',
    'FixKind',
    'FixChange',
    'FixResult',
    'generate_fixed_code',
    'fix_file',
    # Analysis
    'AnalysisReport',
    'RoleSummary',
    'AttributeSummary',
    'analyze_snippet',
    'summarize_roles',
    'summarize_aria_states',
]

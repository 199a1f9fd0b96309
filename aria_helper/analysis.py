"""
Snippet Analysis

Combines the detector, the autofixer and the reference data into one report
for display: which roles a snippet uses, which aria-* attributes it carries
and whether any of them was named by a diagnostic.

Usage:
    from aria_helper.analysis import analyze_snippet

    report = analyze_snippet('<div role="switch">Wi-Fi</div>')
    print(report.to_text())
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Set

from .aria_data import RoleDescriptor, find_role, state_hint_for
from .autofix import FixChange, FixOptions, generate_fixed_code
from .implicit_roles import implicit_role
from .smell_detector import Diagnostic, DetectorOptions, SmellDetector
from .tag_scanner import extract_aria_attributes, iter_tags, roles_in

logger = logging.getLogger(__name__)

DEFAULT_STATE_HINT = "ARIA attribute detected."


@dataclass
class RoleSummary:
    """Roles found in a snippet and the one worth describing"""
    explicit_roles: List[str] = field(default_factory=list)   # Unique, first-seen order
    primary_role: Optional[RoleDescriptor] = None
    unknown_roles: List[str] = field(default_factory=list)
    implicit_roles: List[str] = field(default_factory=list)   # Only when no explicit role
    is_implicit: bool = False


@dataclass
class AttributeSummary:
    """One aria-* attribute occurrence with its explanation"""
    name: str
    value: str
    hint: str
    has_issue: bool = False


@dataclass
class AnalysisReport:
    """Complete ARIA analysis of one snippet"""
    source: str
    timestamp: str
    total_smells: int = 0
    fixes_available: int = 0
    category_counts: Dict[str, int] = field(default_factory=dict)
    kind_counts: Dict[str, int] = field(default_factory=dict)
    roles: RoleSummary = field(default_factory=RoleSummary)
    attributes: List[AttributeSummary] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    changes: List[FixChange] = field(default_factory=list)
    fixed_text: str = ""

    @property
    def has_smells(self) -> bool:
        return self.total_smells > 0

    def to_json(self) -> str:
        """Export report as JSON"""
        def serialize(obj):
            if isinstance(obj, Enum):
                return obj.value
            return obj

        data = asdict(self)
        # Derived fields are properties, so asdict skips them
        for entry, diagnostic in zip(data['diagnostics'], self.diagnostics):
            entry['category'] = diagnostic.category.value
            entry['text'] = diagnostic.text

        return json.dumps(data, indent=2, default=serialize)

    def to_text(self) -> str:
        """Generate human-readable report"""
        lines = [
            "=" * 70,
            "ARIA SNIPPET ANALYSIS REPORT",
            "=" * 70,
            f"Source: {self.source}",
            f"Timestamp: {self.timestamp}",
            "-" * 70,
            f"Total Smells: {self.total_smells}",
        ]
        for category, count in self.category_counts.items():
            lines.append(f"  {category}: {count}")
        lines.extend([
            f"Fixes Available: {self.fixes_available}",
            "-" * 70,
        ])

        lines.append(self._role_line())

        if self.attributes:
            lines.append("\nARIA STATES & PROPERTIES:\n")
            for attr in self.attributes:
                issue = "  [potential issue]" if attr.has_issue else ""
                lines.append(f'  {attr.name}="{attr.value}" - {attr.hint}{issue}')

        if self.diagnostics:
            lines.append("\nSMELLS FOUND:\n")
            for i, diagnostic in enumerate(self.diagnostics, 1):
                lines.extend([
                    f"{i}. [{diagnostic.category.value.upper()}] {diagnostic.kind.value}",
                    f"   {diagnostic.text}",
                    "",
                ])
        else:
            lines.append("\nNo obvious ARIA issues detected.")

        if self.changes:
            lines.append("\nSUGGESTED FIXES:\n")
            for change in self.changes:
                lines.append(f"  - {change.text}")
            lines.extend(["", "Fixed snippet:", self.fixed_text])

        lines.append("=" * 70)
        return "\n".join(lines)

    def _role_line(self) -> str:
        roles = self.roles
        if roles.primary_role:
            label = "Implicit role" if roles.is_implicit else "Role"
            role = roles.primary_role
            line = f"{label}: {role.name} ({role.category}) - {role.description}"
            if role.preferred_native_element:
                line += f" Prefer {role.preferred_native_element}."
            if role.deprecated:
                line += " Deprecated."
            return line
        if roles.explicit_roles:
            return f"Roles not in the ARIA reference: {', '.join(roles.unknown_roles)}"
        return "No role attributes or implicit roles detected."


# =============================================================================
# Summaries
# =============================================================================

def summarize_roles(snippet: Optional[str]) -> RoleSummary:
    """
    Collect explicit roles, falling back to implicit ones when there are none.

    Args:
        snippet: Raw markup text

    Returns:
        RoleSummary; primary_role is the first role known to the reference data
    """
    summary = RoleSummary()
    summary.explicit_roles = list(dict.fromkeys(roles_in(snippet)))

    if summary.explicit_roles:
        for name in summary.explicit_roles:
            role = find_role(name)
            if role is None:
                summary.unknown_roles.append(name)
            elif summary.primary_role is None:
                summary.primary_role = role
        return summary

    implicit = [implicit_role(tag.name, tag.attribute_text) for tag in iter_tags(snippet)]
    summary.implicit_roles = list(dict.fromkeys(role for role in implicit if role))
    for name in summary.implicit_roles:
        role = find_role(name)
        if role is not None:
            summary.primary_role = role
            summary.is_implicit = True
            break
    return summary


def problematic_attributes(diagnostics: List[Diagnostic]) -> Set[str]:
    """Attribute names any diagnostic is about."""
    return {d.subject_attribute for d in diagnostics if d.subject_attribute}


def summarize_aria_states(snippet: Optional[str],
                          diagnostics: Optional[List[Diagnostic]] = None) -> List[AttributeSummary]:
    """
    Describe every aria-* attribute in a snippet.

    Args:
        snippet: Raw markup text
        diagnostics: Findings for the same snippet; detected when omitted

    Returns:
        AttributeSummary list in order of appearance
    """
    text = (snippet or "").strip()
    if not text:
        return []
    if diagnostics is None:
        diagnostics = SmellDetector().detect(text)

    flagged = problematic_attributes(diagnostics)
    return [
        AttributeSummary(
            name=attr.name,
            value=attr.value,
            hint=state_hint_for(attr.name) or DEFAULT_STATE_HINT,
            has_issue=attr.name in flagged,
        )
        for attr in extract_aria_attributes(text)
    ]


# =============================================================================
# Convenience Functions
# =============================================================================

def analyze_snippet(snippet: Optional[str], source: str = "inline",
                    detector_options: Optional[DetectorOptions] = None,
                    fix_options: Optional[FixOptions] = None) -> AnalysisReport:
    """
    Run detection and autofixing over a snippet and summarize the results.

    Args:
        snippet: Raw markup text
        source: Label for the report, such as a file path
        detector_options: Optional detector configuration
        fix_options: Optional autofix configuration

    Returns:
        AnalysisReport bundling diagnostics, fixes and summaries
    """
    diagnostics = SmellDetector(detector_options).detect(snippet)
    result = generate_fixed_code(snippet, fix_options)

    report = AnalysisReport(
        source=source,
        timestamp=datetime.now().isoformat(),
        total_smells=len(diagnostics),
        fixes_available=len(result.changes),
        roles=summarize_roles(snippet),
        attributes=summarize_aria_states(snippet, diagnostics),
        diagnostics=diagnostics,
        changes=result.changes,
        fixed_text=result.fixed_text,
    )

    # Count by category and kind
    for diagnostic in diagnostics:
        category = diagnostic.category.value
        report.category_counts[category] = report.category_counts.get(category, 0) + 1
        kind = diagnostic.kind.value
        report.kind_counts[kind] = report.kind_counts.get(kind, 0) + 1

    logger.debug(f"Analyzed {source}: {report.total_smells} smells, "
                 f"{report.fixes_available} fixes")
    return report

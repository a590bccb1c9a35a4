"""
Grammar coverage verifier.

Detects drift between the diagram factories and the EBNF definitions by
comparing their key sets. No diagram is built and the drawing library is
never imported, so the check runs anywhere the package imports.

Usage:
    python -m jls_railroad.core.coverage     # exit 0 = in sync, 1 = drift
    jls-railroad coverage
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

MISSING_EBNF_HEADER = "Rules with DIAGRAM but NO EBNF definition:"
MISSING_DIAGRAM_HEADER = "Rules with EBNF but NO DIAGRAM factory:"


class CoverageReport(BaseModel):
    """Result of comparing the diagram and EBNF rule name sets."""

    diagram_count: int
    ebnf_count: int
    missing_ebnf: list[str] = Field(
        default_factory=list, description="Has a diagram, no EBNF text (sorted)"
    )
    missing_diagram: list[str] = Field(
        default_factory=list, description="Has EBNF text, no diagram (sorted)"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return not self.missing_ebnf and not self.missing_diagram

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def format_lines(self) -> list[str]:
        """Line-oriented, human-readable report."""
        lines = [
            f"Found {self.diagram_count} diagram rules",
            f"Found {self.ebnf_count} EBNF definitions",
            "",
        ]
        if self.missing_ebnf:
            lines.append(MISSING_EBNF_HEADER)
            lines.extend(f"   - {name}" for name in self.missing_ebnf)
            lines.append("")
        if self.missing_diagram:
            lines.append(MISSING_DIAGRAM_HEADER)
            lines.extend(f"   - {name}" for name in self.missing_diagram)
            lines.append("")

        if self.ok:
            lines.append("Grammar coverage check PASSED")
            lines.append("   All rules have matching diagram factories and EBNF definitions.")
        else:
            lines.append("Grammar coverage check FAILED")
            lines.append(
                "   Please ensure every rule has both a diagram factory and EBNF definition."
            )
        return lines


def check_coverage(diagram_names: Iterable[str], ebnf_names: Iterable[str]) -> CoverageReport:
    """
    Compare the two rule name sets.

    Args:
        diagram_names: Names with a diagram factory
        ebnf_names: Names with an EBNF definition

    Returns:
        CoverageReport with both set differences sorted lexicographically
    """
    diagrams = set(diagram_names)
    ebnf = set(ebnf_names)
    return CoverageReport(
        diagram_count=len(diagrams),
        ebnf_count=len(ebnf),
        missing_ebnf=sorted(diagrams - ebnf),
        missing_diagram=sorted(ebnf - diagrams),
    )


def verify_grammar() -> CoverageReport:
    """Check the bundled Java grammar."""
    from jls_railroad.grammar import build_ebnf_store, build_registry

    return check_coverage(build_registry().names(), build_ebnf_store().names())


def main() -> int:
    report = verify_grammar()
    for line in report.format_lines():
        print(line)
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())

"""Terminal report for validation findings."""

from .findings import Finding, Severity

MARKERS = {
    Severity.ERROR: "✗",
    Severity.WARNING: "!",
}


def group_by_file(findings: list[Finding]) -> dict[str, list[Finding]]:
    """Group findings by file, keeping the order files were first seen."""
    groups: dict[str, list[Finding]] = {}
    for finding in findings:
        groups.setdefault(finding.file, []).append(finding)
    return groups


def _render_section(findings: list[Finding]) -> list[str]:
    lines = []
    for file, file_findings in group_by_file(findings).items():
        lines.append("")
        lines.append(file)
        for finding in file_findings:
            lines.append(f"  {MARKERS[finding.severity]} {finding.message}")
    return lines


def render_report(findings: list[Finding]) -> list[str]:
    """Render findings as report lines, errors first then warnings."""
    if not findings:
        return ["PASSED: all blog posts are valid"]

    errors = [f for f in findings if f.severity is Severity.ERROR]
    warnings = [f for f in findings if f.severity is Severity.WARNING]

    lines = []
    if errors:
        lines.append(f"Found {len(errors)} error(s):")
        lines.extend(_render_section(errors))
    if warnings:
        if lines:
            lines.append("")
        lines.append(f"Found {len(warnings)} warning(s):")
        lines.extend(_render_section(warnings))
    return lines


def exit_status(findings: list[Finding]) -> int:
    """Return 1 if any finding is an error, 0 otherwise."""
    return 1 if any(f.severity is Severity.ERROR for f in findings) else 0


def print_report(findings: list[Finding]) -> int:
    for line in render_report(findings):
        print(line)
    return exit_status(findings)

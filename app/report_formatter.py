"""Format analysis results as human-readable Markdown or console text."""

from deps import Any, Dict, List, Optional


def _issue_block_md(issue: Dict[str, Any]) -> List[str]:
    """One issue as Markdown: file:line:column · Severity, then message."""
    sev = (issue.get("severity") or "").title()
    return [
        f"**{issue['file']}:{issue['line']}:{issue['column']} · {sev}**",
        "",
        issue["message"],
        "",
    ]


def _recommendation_lines_md(lines: List[str]) -> List[str]:
    out = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("•"):
            out.append(f"- {stripped[1:].strip()}")
        elif stripped:
            out.append(f"**{stripped}**")
            out.append("")
        else:
            out.append("")
    return out


def format_text_report(url: Optional[str], report: Dict[str, Any]) -> str:
    """Format a serialized report as Markdown."""
    summary = report["summary"]
    ios = report["iosSpecificAnalysis"]
    lines = []
    lines.append(f"# Compatibility Report: {url or 'supplied sources'}")
    lines.append("")
    lines.append(f"Generated: {report['timestamp']}")
    lines.append("")
    lines.append(
        f"**{summary['totalScripts']}** script(s) ({summary['inlineScripts']} inline, "
        f"{summary['externalScripts']} external) · **{summary['compatibilityIssues']}** "
        f"compatibility issue(s) ({summary['errors']} error(s), {summary['warnings']} warning(s)) · "
        f"**{summary['iosSpecificIssues']}** {ios['targetVersion']} issue(s)"
    )
    lines.append("")

    lines.append("## JavaScript Sources")
    lines.append("")
    for source in report["javascriptSources"]:
        lines.append(f"- `{source['url']}` ({source['type']}, {source['size']} bytes)")
    lines.append("")

    lines.append("## Compatibility Issues")
    lines.append("")
    if not report["compatibilityIssues"]:
        lines.append("No compatibility issues found.")
        lines.append("")
    for issue in report["compatibilityIssues"]:
        lines.extend(_issue_block_md(issue))

    if report["browserRequirements"]:
        lines.append("## Browser Requirements")
        lines.append("")
        lines.append("| Feature | Unsupported in |")
        lines.append("|---|---|")
        for req in report["browserRequirements"]:
            feature = req["feature"].replace("|", "\\|")
            browsers = req["unsupportedIn"].replace("|", "\\|")
            lines.append(f"| {feature} | {browsers} |")
        lines.append("")

    lines.append(f"## {ios['targetVersion']} Analysis")
    lines.append("")
    if ios["knownLimitations"]:
        lines.append("### Known Limitations")
        lines.append("")
        for lim in ios["knownLimitations"]:
            lines.append(f"- **{lim['api']}** in `{lim['foundIn']}`: {lim['issue']}")
        lines.append("")
    lines.extend(_recommendation_lines_md(ios["recommendations"]))
    lines.append("")

    lines.append("## Recommendations")
    lines.append("")
    lines.extend(_recommendation_lines_md(report["recommendations"]))
    return "\n".join(lines).rstrip() + "\n"


def format_console_report(url: Optional[str], report: Dict[str, Any]) -> List[str]:
    """Lines for terminal output: summary, issues, recommendations."""
    summary = report["summary"]
    lines = ["", "📊 Analysis Results", "=================="]
    if url:
        lines.append(f"URL: {url}")
    lines.append(f"Timestamp: {report['timestamp']}")
    lines.append(f"Total Scripts: {summary['totalScripts']}")
    lines.append(f"Compatibility Issues: {summary['compatibilityIssues']}")

    if report["compatibilityIssues"]:
        lines.extend(["", "⚠️  Compatibility Issues:", "========================="])
        for issue in report["compatibilityIssues"]:
            lines.append(f"{issue['severity'].upper()}: {issue['file']}:{issue['line']}:{issue['column']}")
            lines.append(f"  {issue['message']}")
            lines.append("")

    lines.extend(["", "💭 Recommendations:", "==================="])
    lines.extend(report["recommendations"])
    return lines

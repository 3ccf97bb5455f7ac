from __future__ import annotations

import unittest

from js_compat_checker.issue import Diagnostic, Severity
from js_compat_checker.requirements import extract_browser_requirements, parse_unsupported_clause


def _diag(message: str, origin: str = "inline-1") -> Diagnostic:
    return Diagnostic(origin, 1, 1, message, Severity.ERROR)


class ParseUnsupportedClauseTests(unittest.TestCase):
    def test_known_message_shapes(self) -> None:
        self.assertEqual(parse_unsupported_clause("Promise is not supported in IE 11"), "IE 11")
        self.assertEqual(
            parse_unsupported_clause("fetch is not supported in Safari 9, iOS Safari 9.0-9.2"),
            "Safari 9, iOS Safari 9.0-9.2",
        )
        self.assertEqual(
            parse_unsupported_clause("Array.prototype.at() is not supported in Safari 15.2, IE 11"),
            "Safari 15.2, IE 11",
        )

    def test_unexpected_shape_is_none(self) -> None:
        self.assertIsNone(parse_unsupported_clause("Unexpected token '?'"))
        self.assertIsNone(parse_unsupported_clause("fetch is unsupported in IE 11"))
        self.assertIsNone(parse_unsupported_clause(""))


class ExtractBrowserRequirementsTests(unittest.TestCase):
    def test_ie_clause_is_a_requirement_but_not_platform_specific(self) -> None:
        result = extract_browser_requirements([_diag("Promise is not supported in IE 11")])

        self.assertEqual(len(result.requirements), 1)
        self.assertEqual(result.requirements[0].feature_message, "Promise is not supported in IE 11")
        self.assertEqual(result.requirements[0].unsupported_in, "IE 11")
        self.assertEqual(result.platform_issues, ())

    def test_safari_clause_is_platform_specific_with_feature_label(self) -> None:
        result = extract_browser_requirements([_diag("fetch is not supported in Safari 9")])

        self.assertEqual(len(result.platform_issues), 1)
        issue = result.platform_issues[0]
        self.assertEqual(issue.feature, "fetch")
        self.assertEqual(issue.issue, "fetch is not supported in Safari 9")
        self.assertEqual(issue.browsers, "Safari 9")

    def test_ios_marker_is_case_insensitive(self) -> None:
        result = extract_browser_requirements([_diag("BroadcastChannel is not supported in IOS_SAF 15.4")])
        self.assertEqual([i.feature for i in result.platform_issues], ["BroadcastChannel"])

    def test_unmatched_messages_are_listed_as_unparsed(self) -> None:
        odd = _diag("structuredClone is unavailable")
        result = extract_browser_requirements([odd, _diag("Promise is not supported in IE 11")])

        self.assertEqual(result.unparsed, (odd,))
        self.assertEqual(len(result.requirements), 1)

    def test_identical_messages_collapse_to_one_requirement(self) -> None:
        message = "fetch is not supported in Safari 9"
        result = extract_browser_requirements([
            _diag(message, "inline-1"),
            _diag("Promise is not supported in IE 11", "inline-1"),
            _diag(message, "https://cdn.example.com/app.js"),
        ])

        self.assertEqual(
            [r.feature_message for r in result.requirements],
            [message, "Promise is not supported in IE 11"],
        )
        # Platform issues are per diagnostic, not deduplicated.
        self.assertEqual(len(result.platform_issues), 2)

    def test_extraction_is_deterministic(self) -> None:
        diagnostics = [
            _diag("fetch is not supported in Safari 9"),
            _diag("Promise is not supported in IE 11"),
            _diag("no clause here"),
        ]
        self.assertEqual(extract_browser_requirements(diagnostics), extract_browser_requirements(diagnostics))


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import functools
import http.client
import io
import unittest
import urllib.error
from email.message import Message
from unittest import mock

from app.services.page_fetcher import FetchError, fetch_text, request_url, validate_url
from app.services.script_extractor import extract_scripts, find_script_tags
from js_compat_checker.issue import SourceKind

from tests.fakes import FakeFetcher

_PAGE = """<!DOCTYPE html>
<html>
<head>
  <script src="/static/app.js"></script>
  <script>window.dataLayer = [];</script>
  <script type="application/ld+json">{"@type": "Organization"}</script>
  <script src="https://cdn.other.test/lib.js" defer></script>
</head>
<body>
  <script>   </script>
  <script type="module">import('./x.js');</script>
  <script src="/static/app.js"></script>
  <script src="/static/missing.js"></script>
</body>
</html>
"""


class FindScriptTagsTests(unittest.TestCase):
    def test_skips_non_javascript_types(self) -> None:
        tags = find_script_tags(_PAGE)
        self.assertNotIn('{"@type": "Organization"}', [t.text for t in tags])
        self.assertEqual(len(tags), 7)

    def test_self_closing_script_with_src(self) -> None:
        tags = find_script_tags('<script src="a.js"/><script>b()</script>')
        self.assertEqual([(t.src, t.text) for t in tags], [("a.js", ""), (None, "b()")])


class ExtractScriptsTests(unittest.TestCase):
    def test_registry_in_document_order(self) -> None:
        fetch = FakeFetcher({
            "https://site.test/static/app.js": "fetch('/x')",
            "https://cdn.other.test/lib.js": "new ResizeObserver(cb)",
        })
        with self.assertLogs("app.services.script_extractor", level="WARNING"):
            registry, warnings = extract_scripts(_PAGE, "https://site.test/page.html", fetch)

        self.assertEqual(
            [(u.origin_id, u.kind) for u in registry],
            [
                ("https://site.test/static/app.js", SourceKind.EXTERNAL),
                ("inline-1", SourceKind.INLINE),
                ("https://cdn.other.test/lib.js", SourceKind.EXTERNAL),
                ("inline-2", SourceKind.INLINE),
            ],
        )
        self.assertEqual(registry.get("inline-2").content, "import('./x.js');")
        # The repeated app.js reference is downloaded once.
        self.assertEqual(fetch.requested.count("https://site.test/static/app.js"), 1)
        self.assertEqual(len(warnings), 1)
        self.assertIn("https://site.test/static/missing.js", warnings[0])

    def test_page_without_scripts(self) -> None:
        registry, warnings = extract_scripts("<html><body>hi</body></html>", "https://site.test/", FakeFetcher({}))
        self.assertEqual((len(registry), warnings), (0, []))


class _FakeResponse(io.BytesIO):
    def __init__(self, body: bytes, content_type: str):
        super().__init__(body)
        self.headers = Message()
        self.headers["Content-Type"] = content_type


class PageFetcherTests(unittest.TestCase):
    def test_validate_url(self) -> None:
        self.assertEqual(validate_url("  https://example.com/  "), "https://example.com/")
        for bad in ("", "example.com", "ftp://example.com/", "file:///etc/passwd", "http://"):
            with self.assertRaises(ValueError):
                validate_url(bad)

    def test_decodes_with_declared_charset(self) -> None:
        body = "var s = 'café';".encode("latin-1")
        response = _FakeResponse(body, "application/javascript; charset=latin-1")
        with mock.patch("app.services.page_fetcher.urllib.request.urlopen", return_value=response):
            self.assertEqual(fetch_text("https://x.test/a.js"), "var s = 'café';")

    def test_http_error_becomes_fetch_error(self) -> None:
        error = urllib.error.HTTPError("https://x.test/a.js", 404, "Not Found", Message(), None)
        with mock.patch("app.services.page_fetcher.urllib.request.urlopen", side_effect=error):
            with self.assertRaises(FetchError) as ctx:
                fetch_text("https://x.test/a.js")
        self.assertIn("404", str(ctx.exception))

    def test_network_error_becomes_fetch_error(self) -> None:
        error = urllib.error.URLError("Name or service not known")
        with mock.patch("app.services.page_fetcher.urllib.request.urlopen", side_effect=error):
            with self.assertRaises(FetchError):
                fetch_text("https://nowhere.invalid/")

    def test_request_url_escapes_spaces_and_non_ascii(self) -> None:
        self.assertEqual(request_url("https://x.test/my script.js"), "https://x.test/my%20script.js")
        self.assertEqual(request_url("https://x.test/js/café.js"), "https://x.test/js/caf%C3%A9.js")
        self.assertEqual(request_url("https://x.test/a%20b.js?v=1&t=2#x"), "https://x.test/a%20b.js?v=1&t=2#x")

    def test_urlopen_receives_escaped_url(self) -> None:
        response = _FakeResponse(b"ok()", "application/javascript")
        with mock.patch("app.services.page_fetcher.urllib.request.urlopen", return_value=response) as urlopen:
            fetch_text("https://x.test/js/café.js")
        self.assertEqual(urlopen.call_args[0][0].full_url, "https://x.test/js/caf%C3%A9.js")

    def test_invalid_url_becomes_fetch_error(self) -> None:
        error = http.client.InvalidURL("URL can't contain control characters.")
        with mock.patch("app.services.page_fetcher.urllib.request.urlopen", side_effect=error):
            with self.assertRaises(FetchError):
                fetch_text("https://x.test/bad.js")

    def test_truncated_body_becomes_fetch_error(self) -> None:
        response = _FakeResponse(b"", "application/javascript")
        response.read = mock.Mock(side_effect=http.client.IncompleteRead(b"partial"))
        with mock.patch("app.services.page_fetcher.urllib.request.urlopen", return_value=response):
            with self.assertRaises(FetchError):
                fetch_text("https://x.test/a.js")

    def test_unusable_script_url_is_skipped_with_warning(self) -> None:
        page = '<script>var a = 1;</script><script src="/my script.js"></script><script src="/js/café.js"></script>'

        def urlopen(req, timeout=None):
            if "caf%C3%A9" in req.full_url:
                return _FakeResponse(b"new ResizeObserver(cb)", "application/javascript")
            raise http.client.InvalidURL(f"URL can't contain control characters. {req.full_url!r}")

        fetch = functools.partial(fetch_text, timeout=1)
        with mock.patch("app.services.page_fetcher.urllib.request.urlopen", side_effect=urlopen):
            with self.assertLogs("app.services.script_extractor", level="WARNING"):
                registry, warnings = extract_scripts(page, "http://site.test/index.html", fetch)

        self.assertEqual(
            [u.origin_id for u in registry],
            ["inline-1", "http://site.test/js/café.js"],
        )
        self.assertEqual(len(warnings), 1)
        self.assertIn("http://site.test/my script.js", warnings[0])


if __name__ == "__main__":
    unittest.main()

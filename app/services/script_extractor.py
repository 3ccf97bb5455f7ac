"""Script extraction service: finds inline and referenced JavaScript in an HTML page."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import urljoin

from js_compat_checker.source_registry import SourceRegistry

from .page_fetcher import FetchError

logger = logging.getLogger(__name__)

# <script type> values that hold JavaScript; anything else (JSON-LD, templates) is data.
JAVASCRIPT_TYPES = {
    "",
    "module",
    "text/javascript",
    "application/javascript",
    "application/x-javascript",
    "text/ecmascript",
    "application/ecmascript",
}


@dataclass
class ScriptTag:
    src: Optional[str]
    text: str = ""


class _ScriptTagParser(HTMLParser):
    """Collects <script> elements in document order."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.scripts: List[ScriptTag] = []
        self._current: Optional[ScriptTag] = None
        self._chunks: List[str] = []

    def handle_starttag(self, tag, attrs):
        if tag != "script":
            return
        attr_map = {k.lower(): (v or "") for k, v in attrs}
        script_type = attr_map.get("type", "").split(";")[0].strip().lower()
        if script_type not in JAVASCRIPT_TYPES:
            self._current = None
            return
        src = attr_map.get("src", "").strip() or None
        self._current = ScriptTag(src=src)
        self._chunks = []

    def handle_data(self, data):
        if self._current is not None:
            self._chunks.append(data)

    def handle_endtag(self, tag):
        if tag != "script" or self._current is None:
            return
        self._current.text = "".join(self._chunks)
        self.scripts.append(self._current)
        self._current = None
        self._chunks = []


def find_script_tags(html: str) -> List[ScriptTag]:
    parser = _ScriptTagParser()
    parser.feed(html)
    parser.close()
    return parser.scripts


def extract_scripts(
    html: str,
    base_url: str,
    fetch: Callable[[str], str],
    max_workers: int = 4,
) -> Tuple[SourceRegistry, List[str]]:
    """Build a source registry from a page's scripts.

    External scripts are downloaded concurrently but registered in document
    order. A script that fails to download is skipped with a warning; a
    script URL seen twice is registered once.

    Returns:
        (registry, warnings)
    """
    tags = find_script_tags(html)
    external_urls: List[str] = []
    for tag in tags:
        if tag.src:
            url = urljoin(base_url, tag.src)
            if url not in external_urls:
                external_urls.append(url)

    downloaded: Dict[str, Optional[str]] = {}
    warnings: List[str] = []

    def _download(url: str) -> Tuple[str, Optional[str], Optional[str]]:
        logger.info("Downloading external script: %s", url)
        try:
            return url, fetch(url), None
        except FetchError as e:
            return url, None, f"Failed to download script {url}: {e}"

    if external_urls:
        with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(external_urls)))) as pool:
            for url, content, warning in pool.map(_download, external_urls):
                downloaded[url] = content
                if warning:
                    logger.warning(warning)
                    warnings.append(warning)

    registry = SourceRegistry()
    for tag in tags:
        if tag.src:
            url = urljoin(base_url, tag.src)
            content = downloaded.get(url)
            if content is None or url in registry:
                continue
            registry.add_external(url, content)
        elif tag.text.strip():
            registry.add_inline(tag.text)
    return registry, warnings

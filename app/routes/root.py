"""Root route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

_ROOT_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>JavaScript Compatibility Analyzer API</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 42rem; margin: 2rem auto; padding: 0 1rem; }
    h1 { font-size: 1.25rem; font-weight: 600; }
    ul { list-style: none; padding: 0; }
    li { margin: 0.5rem 0; }
    a { color: #2563eb; text-decoration: none; }
    a:hover { text-decoration: underline; }
    code { font-size: 0.8125rem; }
  </style>
</head>
<body>
  <h1>JavaScript Compatibility Analyzer API</h1>
  <p>Endpoints:</p>
  <ul>
    <li><a href="/docs">/docs</a> · Swagger UI</li>
    <li><a href="/redoc">/redoc</a> · ReDoc</li>
    <li><a href="/health">/health</a> · Liveness</li>
    <li><code>POST /analyze</code> · <code>{"url": "https://example.com"}</code></li>
    <li><code>POST /analyze/markdown</code> · same body, Markdown download</li>
    <li><code>POST /check</code> · <code>{"sources": [{"origin_id": "inline-1", "content": "..."}]}</code></li>
  </ul>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: welcome page with clickable links."""
    return _ROOT_HTML

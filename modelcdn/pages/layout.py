"""Shared HTML shell for the server-rendered pages (inline CSS only, no external assets)."""

from html import escape

_STYLE = """
* { box-sizing: border-box; }
body {
    font-family: system-ui, -apple-system, 'Segoe UI', sans-serif;
    margin: 0;
    min-height: 100vh;
    background: #000;
    color: #e0e0e0;
    padding: 2rem 1rem;
}
.wrap { max-width: 880px; margin: 0 auto; }
h1 { font-size: clamp(1.75rem, 5vw, 2.5rem); font-weight: 600; color: #fff; margin: 0 0 0.5rem 0; }
.tagline { color: #888; margin: 0 0 2rem 0; }
.card { background: #0c0c0c; border: 1px solid #1a1a1a; padding: 1.25rem 1.5rem; margin-bottom: 1rem; }
.card h2 { font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.08em; color: #666; margin: 0 0 0.75rem 0; }
a { color: #9cf; text-decoration: none; }
a:hover { text-decoration: underline; }
code { font-family: ui-monospace, monospace; font-size: 0.85rem; color: #ccc; }
table { width: 100%; border-collapse: collapse; font-size: 0.9rem; }
th, td { text-align: left; padding: 0.5rem; border-bottom: 1px solid #1a1a1a; }
th { color: #666; font-weight: 500; }
.empty { color: #666; font-style: italic; }
input { background: #111; border: 1px solid #333; color: #fff; padding: 0.6rem; width: 100%; }
button { margin-top: 0.75rem; background: #fff; color: #000; border: 0; padding: 0.6rem 1.2rem; cursor: pointer; }
.error { color: #f77; min-height: 1.2rem; margin-top: 0.5rem; }
"""


def render_page(title: str, body: str) -> str:
    """Wrap body (already-escaped HTML) in the common document shell."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <style>{_STYLE}</style>
</head>
<body>
    <div class="wrap">
{body}
    </div>
</body>
</html>
"""


def format_size(size_bytes: int) -> str:
    """Human-readable size (B, KB, MB, GB)."""
    size = float(size_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"

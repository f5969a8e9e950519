"""Landing page with links to the explore pages and the upload API."""

from html import escape

from modelcdn.pages.layout import render_page


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    body = f"""
        <h1>{escape(app_name)}</h1>
        <p class="tagline">3D model and media CDN</p>
        <div class="card">
            <h2>Browse</h2>
            <p><a href="/models/explore">Explore models</a> &middot; <a href="/media/explore">Explore media</a></p>
            <p class="empty">Explore pages require an admin session.</p>
        </div>
        <div class="card">
            <h2>Upload</h2>
            <p><code>POST /api/models/upload</code> .glb / .gltf, multipart <code>file</code> or JSON <code>{{"url": ...}}</code></p>
            <p><code>POST /api/media/upload</code> images and videos, optional <code>type</code></p>
            <p>Send <code>X-API-Key</code> or <code>Authorization: Bearer</code> when an upload key is configured.</p>
        </div>
        <div class="card">
            <h2>API</h2>
            <p><a href="/docs">OpenAPI docs</a> &middot; <a href="/api/health">Health</a></p>
        </div>"""
    return render_page(app_name, body)

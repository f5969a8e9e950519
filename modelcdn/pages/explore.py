"""Explore pages listing stored models and media (behind the admin gate)."""

from html import escape

from modelcdn.domain.entities import StoredFile
from modelcdn.pages.layout import format_size, render_page

_LOGOUT_SCRIPT = """
        <script>
        document.getElementById('logout').addEventListener('click', async () => {
            await fetch('/api/admin/logout', { method: 'POST' });
            window.location.href = '/';
        });
        </script>"""


def _rows(files: list[StoredFile], with_type: bool) -> str:
    rows = []
    for stored in files:
        type_cell = f"<td>{escape(stored.media_type.value)}</td>" if with_type else ""
        rows.append(
            "<tr>"
            f'<td><a href="{escape(stored.direct_url)}">{escape(stored.name)}</a></td>'
            f"{type_cell}"
            f"<td>{format_size(stored.size_bytes)}</td>"
            f"<td>{stored.modified_at.strftime('%Y-%m-%d %H:%M')} UTC</td>"
            "</tr>"
        )
    return "\n".join(rows)


def _explore_page(title: str, files: list[StoredFile], with_type: bool, note: str = "") -> str:
    if files:
        header = "<th>Name</th>" + ("<th>Type</th>" if with_type else "") + "<th>Size</th><th>Modified</th>"
        listing = f"<table><tr>{header}</tr>\n{_rows(files, with_type)}</table>"
    else:
        listing = '<p class="empty">Nothing uploaded yet.</p>'
    body = f"""
        <h1>{escape(title)}</h1>
        <p class="tagline">{len(files)} file(s) &middot; <a href="/">Home</a> &middot; <a href="#" id="logout">Log out</a></p>
        <div class="card">
            {f'<p class="empty">{escape(note)}</p>' if note else ''}
            {listing}
        </div>{_LOGOUT_SCRIPT}"""
    return render_page(title, body)


def render_models_explore(files: list[StoredFile], note: str | None = None) -> str:
    """Return HTML listing models, newest first."""
    return _explore_page("Models", files, with_type=False, note=note or "")


def render_media_explore(files: list[StoredFile]) -> str:
    """Return HTML listing images and videos, newest first."""
    return _explore_page("Media", files, with_type=True)

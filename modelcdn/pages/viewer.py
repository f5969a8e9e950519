"""Pages wrapping a stored file's direct URL: model view, chrome-less model viewer, media view.

The model pages hand the model URL to the client-side 3D viewer through
``data-model-url`` on ``#scene``; loading and rendering the scene is the
viewer's job, not the server's.
"""

from html import escape

from modelcdn.domain.enums import MediaType
from modelcdn.pages.layout import format_size, render_page

_DOWNLOAD_HINT = "Your browser did not load the 3D viewer; the model can still be downloaded."


def _scene(model_url: str) -> str:
    return (
        f'<div id="scene" class="scene" data-model-url="{escape(model_url)}">'
        f'<p class="empty">{_DOWNLOAD_HINT}</p>'
        "</div>"
    )


def render_model_view(name: str, model_url: str, viewer_url: str, size_bytes: int) -> str:
    """Return the model page: scene, file details, and links to the raw file and the embeddable viewer."""
    body = f"""
        <p class="tagline"><a href="/models/explore">&larr; Back to models</a></p>
        <h1>{escape(name)}</h1>
        <div class="card">
            {_scene(model_url)}
        </div>
        <div class="card">
            <h2>File</h2>
            <p>{format_size(size_bytes)} &middot; <a href="{escape(model_url)}" download>Download</a>
            &middot; <a href="{escape(viewer_url)}">Viewer only</a></p>
            <p><code>{escape(model_url)}</code></p>
        </div>"""
    return render_page(name, body)


def render_model_viewer(name: str, model_url: str) -> str:
    """Return the viewer-only page (no navigation), sized to the window."""
    body = f"""
        <style>.wrap {{ max-width: none; }} .scene {{ min-height: 90vh; }}</style>
        {_scene(model_url)}
        <p class="empty"><a href="{escape(model_url)}" download>{escape(name)}</a></p>"""
    return render_page(name, body)


def render_media_view(name: str, media_type: MediaType, media_url: str, size_bytes: int) -> str:
    """Return the media page showing an image or a playable video."""
    url = escape(media_url)
    if media_type == MediaType.VIDEO:
        player = f'<video src="{url}" controls style="max-width: 100%"></video>'
    else:
        player = f'<img src="{url}" alt="{escape(name)}" style="max-width: 100%; height: auto">'
    body = f"""
        <p class="tagline"><a href="/media/explore">&larr; Back to media</a></p>
        <h1>{escape(name)}</h1>
        <div class="card">
            {player}
        </div>
        <div class="card">
            <p>{escape(media_type.value)} &middot; {format_size(size_bytes)} &middot; <a href="{url}" download>Download</a></p>
        </div>"""
    return render_page(name, body)

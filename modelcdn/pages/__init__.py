"""Server-rendered HTML pages."""

from modelcdn.pages.explore import render_media_explore, render_models_explore
from modelcdn.pages.login import render_login_page
from modelcdn.pages.root import render_root_page
from modelcdn.pages.viewer import render_media_view, render_model_view, render_model_viewer

__all__ = [
    "render_login_page",
    "render_media_explore",
    "render_media_view",
    "render_model_view",
    "render_model_viewer",
    "render_models_explore",
    "render_root_page",
]

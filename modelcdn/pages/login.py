"""Admin login form. Posts JSON to /api/admin/login and follows ``redirect`` on success."""

import json
from html import escape

from modelcdn.pages.layout import render_page

DEFAULT_REDIRECT = "/models/explore"


def safe_redirect_target(target: str | None) -> str:
    """Return target if it is a local absolute path; otherwise the default page."""
    if not target or not target.startswith("/") or target.startswith("//") or "\\" in target:
        return DEFAULT_REDIRECT
    return target


def render_login_page(redirect: str | None = None) -> str:
    """Return HTML for the admin login page."""
    target = safe_redirect_target(redirect)
    # json.dumps yields a valid JS string literal; '</' is escaped for the script context
    target_js = json.dumps(target).replace("</", "<\\/")
    body = f"""
        <h1>Admin login</h1>
        <p class="tagline">Sign in to continue to <code>{escape(target)}</code></p>
        <div class="card">
            <form id="login-form">
                <input type="password" id="password" name="password" placeholder="Password" autofocus>
                <button type="submit">Sign in</button>
                <div class="error" id="error"></div>
            </form>
        </div>
        <script>
        document.getElementById('login-form').addEventListener('submit', async (event) => {{
            event.preventDefault();
            const password = document.getElementById('password').value;
            const response = await fetch('/api/admin/login', {{
                method: 'POST',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify({{ password }}),
            }});
            if (response.ok) {{
                window.location.href = {target_js};
                return;
            }}
            const data = await response.json().catch(() => ({{}}));
            document.getElementById('error').textContent = data.error || 'Login failed';
        }});
        </script>"""
    return render_page("Admin login", body)

"""Filename policy: sanitizing, URL-derived names, extension forcing, dedupe candidates."""

import os
import re
from collections.abc import Iterator
from urllib.parse import urlsplit

from modelcdn.domain.exceptions import InvalidInputException
from modelcdn.domain.value_objects import FileKind

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_DOT_RUNS = re.compile(r"\.{2,}")

DEFAULT_URL_NAME = "upload"


def sanitize_filename(raw: str) -> str:
    """Replace every character outside [A-Za-z0-9._-] with '_'.

    Runs of dots collapse to one and leading dots are dropped, so the result
    can never contain '..' or name a hidden file.
    """
    name = _UNSAFE_CHARS.sub("_", raw)
    name = _DOT_RUNS.sub(".", name)
    return name.lstrip(".")


def candidate_names(name: str) -> Iterator[str]:
    """Yield name, then stem_1.ext, stem_2.ext, ... (unbounded)."""
    yield name
    stem, ext = os.path.splitext(name)
    counter = 1
    while True:
        yield f"{stem}_{counter}{ext}"
        counter += 1


def validate_source_url(url: str) -> str:
    """Return url if it is an absolute http(s) URL; raise InvalidInputException otherwise."""
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidInputException("Invalid URL provided", field="url") from e
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
        raise InvalidInputException("Invalid URL provided", field="url")
    return url


def name_from_url(url: str) -> str:
    """Return the basename of the URL path ('' when the path ends in '/')."""
    return os.path.basename(urlsplit(url).path)


def ensure_extension(name: str, kind: FileKind) -> str:
    """Append the kind's canonical extension unless name already has a whitelisted one."""
    if kind.accepts(name):
        return name
    return f"{name}{kind.canonical_extension}"


def url_upload_name(url: str, suggested_name: str | None) -> str:
    """Sanitized, non-empty base name for a URL upload (extension not yet forced)."""
    name = sanitize_filename(suggested_name or name_from_url(url))
    return name or DEFAULT_URL_NAME

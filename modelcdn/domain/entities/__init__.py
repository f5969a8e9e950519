"""Domain entities.

Pure domain models; no filesystem or HTTP concerns.
"""

from modelcdn.domain.entities.stored_file import (
    StoredFile,
    direct_url_for,
    ensure_safe_name,
    is_safe_name,
)

__all__ = ["StoredFile", "direct_url_for", "ensure_safe_name", "is_safe_name"]

"""Security infrastructure: admin session tokens."""

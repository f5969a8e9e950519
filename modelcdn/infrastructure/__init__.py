"""Infrastructure layer: filesystem storage, outbound HTTP, session tokens."""

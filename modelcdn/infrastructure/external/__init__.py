"""External adapters (filesystem storage, outbound HTTP)."""

"""Cross-cutting helpers: datetime utilities and telemetry."""

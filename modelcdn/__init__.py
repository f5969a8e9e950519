"""modelcdn: upload, list, delete and serve 3D models and media files."""

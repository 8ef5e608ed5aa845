"""Infrastructure adapters: logging and the VLC HTTP client."""

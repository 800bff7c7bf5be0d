"""Command layer: click entrypoint, handlers, terminal rendering."""

"""Single-user command-line task tracker with JSON file storage."""

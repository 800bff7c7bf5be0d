# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is loaded from environment variables (optionally via a local .env file).
This file lists them so the repo is self-documenting without opening the code.
"""

ENV_VARS = {
    # Storage
    "TODO_DATA_DIR": "Directory for local data (default: ~/.local/share/todo-cli).",
    "TODO_FILE": "Task file path (default: <TODO_DATA_DIR>/todos.json). --file overrides it.",
    # Logging
    "TODO_LOG_DIR": "Directory for todo.log (default: <TODO_DATA_DIR>).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Task policy
    "TODO_ALLOW_EMPTY_TITLES": "Accept blank task titles (true/false, default: false).",
}

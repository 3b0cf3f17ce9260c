# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in logs (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "TODO_LOG_DIR": "Directory for todo.log (default: <data_dir>).",
    # Storage (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_STORE_PATH": "Key/value store JSON file (default: <data_dir>/storage.json).",
    "TODO_STORAGE_KEY": "Key holding the serialized task list (default: todos-list).",
    # Console
    "TODO_CLEAR_SCREEN": "Clear the terminal before each screen render (true/false, default: false).",
}

import json
import os

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "machine": "scan_to_one",
    "initial_tape": None,
    "head_position": 0,
    "max_steps": None,
    "validate_machine": False,
    "log_runs": True,
    "output_directory": "logs/",
    "log_file_prefix": "tape_machine_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "machine": str,
    "initial_tape": (str, type(None)),
    "head_position": int,
    "max_steps": (int, type(None)),
    "validate_machine": bool,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is a subclass of int; reject it for integer keys
        if isinstance(value, bool) and expected_type is not bool:
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")
        if not isinstance(value, expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    if config["max_steps"] is not None and config["max_steps"] <= 0:
        raise ValueError("Config key 'max_steps' must be a positive integer or null.")
    if not config["machine"]:
        raise ValueError("Config key 'machine' must not be empty.")

def load_config(path=DEFAULT_CONFIG_PATH):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    return config

def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)

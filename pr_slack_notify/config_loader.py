# pr_slack_notify/config_loader.py
import os
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATHS = [".slack-pr-notify.yml", ".slack-pr-notify.yaml"]


def load_repo_config(base_dir: str = ".") -> Dict[str, Any]:
    """
    Load repo-level YAML config if present.
    Returns a dict (empty if not found or invalid).
    """
    for path in DEFAULT_CONFIG_PATHS:
        full = os.path.join(base_dir, path)
        if not os.path.exists(full):
            continue
        try:
            with open(full, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            # Non-fatal: the environment alone is still a valid configuration
            print(f"::notice::Ignoring unreadable config file {full}: {e}")
            return {}
        if isinstance(data, dict):
            return data
        print(f"::notice::Ignoring {full}: expected a mapping at the top level")
        return {}
    return {}

import copy
import os
from typing import Any

import yaml
from rich.console import Console

console = Console()

DEFAULT_CONFIG: dict[str, Any] = {
    "llm": {
        "provider": "openai",
        "temperature": 0.2,
        "openai": {"model": "gpt-4o"},
        "gemini": {"model": "gemini-2.0-flash"},
        "retry": {"max_retries": 3, "delay": 1.0, "backoff": 2.0},
    },
    "bill_source": {
        # Empty base_url: generate simulated bill text locally
        "base_url": "",
        "timeout": 30.0,
    },
    "analysis": {"assess_comparison_impact": False},
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str = "config.yaml") -> dict[str, Any]:
    """
    From config.yaml, layered over DEFAULT_CONFIG.

    Args:
        config_path: Path to config file (default: config.yaml)

    Returns:
        Configuration dictionary
    """
    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        console.print(f"[yellow]Warning: {config_path} not found. Using default config.[/yellow]")
        return copy.deepcopy(DEFAULT_CONFIG)
    return _merge(DEFAULT_CONFIG, loaded)


def get_api_keys() -> dict[str, str]:
    return {
        "openai": os.getenv("OPENAI_API_KEY", ""),
        "google": os.getenv("GOOGLE_API_KEY", "") or os.getenv("GEMINI_API_KEY", ""),
    }


def get_api_key(provider: str) -> str:
    """API key for an LLM provider name ("openai" or "gemini")."""
    keys = get_api_keys()
    return keys["google"] if provider == "gemini" else keys["openai"]

"""Defaults and environment lookups.

Environment variables are read at call time so a `.env` loaded by the CLI
(python-dotenv) is honored.
"""

import os
from pathlib import Path
from typing import Optional

QUESTION_TIME_LIMIT = 15  # seconds
MAX_RECORDS = 50
MAX_TURNS = 1000

DEFAULT_HISTORY_FILE = Path.home() / ".unoquiz" / "history.json"

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"

# provider -> (base url, api key variable)
PROVIDERS = {
    "openrouter": (OPENROUTER_BASE, "OPENROUTER_API_KEY"),
    "groq": (GROQ_BASE, "GROQ_API_KEY"),
    "ollama": (OLLAMA_BASE, None),
    "huggingface": (HUGGINGFACE_BASE, "HUGGINGFACE_API_KEY"),
}


def history_file() -> Path:
    """Where the JSON match recorder keeps its data."""
    override = os.environ.get("UNOQUIZ_HISTORY_FILE")
    return Path(override).expanduser() if override else DEFAULT_HISTORY_FILE


def provider_settings(provider: str, api_key: Optional[str] = None) -> tuple[str, str]:
    """Return (base_url, api_key) for an OpenAI-compatible provider."""
    if provider not in PROVIDERS:
        raise ValueError(f"Unknown provider: {provider}")
    base_url, key_var = PROVIDERS[provider]
    if provider == "ollama":
        # Ollama ignores the key but the client requires one
        return os.environ.get("OLLAMA_BASE_URL", base_url), "ollama"
    key = api_key or os.environ.get(key_var)
    if not key:
        raise ValueError(f"API key required for {provider}. Set {key_var} or pass api_key.")
    return base_url, key

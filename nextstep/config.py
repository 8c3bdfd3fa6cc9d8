"""
Configuration settings for the NextStep application.

This file contains configuration for the chat providers, the local profile
store and the generation gate. Values come from the environment (or a .env
file) so the app can be pointed at another provider without code changes.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os
from pathlib import Path

# LLM Provider Configuration
# Set to "groq", "openai" or "ollama"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "groq").lower()

# Model Configuration
DEFAULT_MODEL = {
    "groq": "llama-3.3-70b-versatile",  # Free tier, fast
    "openai": "gpt-4o-mini",
    "ollama": "llama3.1:8b",
}

# Groq exposes an OpenAI-compatible endpoint
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_BASE_URL = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

LLM_MODEL_PARAMS = {
    "temperature": 0.7,
    "max_tokens": 1024,
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

# Portfolio / resume generation gate (percent, inclusive)
COMPLETION_THRESHOLD = 50

# Local storage
_DATA_DIR = Path(os.getenv("NEXTSTEP_DATA_DIR", Path.home() / ".nextstep"))
PROFILE_STORE_PATH = _DATA_DIR / "profiles.json"
AVATAR_DIR = _DATA_DIR / "avatars"
CACHE_DIR = _DATA_DIR / "cache"
AVATAR_MAX_BYTES = 2 * 1024 * 1024

# Authentication is external; the desktop app runs as a single local user
LOCAL_USER_ID = os.getenv("NEXTSTEP_USER_ID", "local-user")


def get_model_for_provider(provider: str = None) -> str:
    """Get the default model for the specified provider."""
    provider = (provider or LLM_PROVIDER).lower()
    return DEFAULT_MODEL.get(provider, DEFAULT_MODEL["groq"])

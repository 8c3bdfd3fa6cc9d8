"""
LLM client abstraction layer for the chat features.

This module provides a unified interface for the supported providers (Groq's
OpenAI-compatible API, OpenAI itself, a local Ollama) so the career chat and
the skill hub never talk to a vendor SDK directly. Every failure surfaces as a
ChatError whose message can be shown to the user as-is.
"""

from __future__ import annotations
import logging
from typing import List, Dict
from abc import ABC, abstractmethod

from openai import OpenAI, OpenAIError

from nextstep import config

try:
    from ollama import Client as OllamaSDKClient
except ImportError:
    OllamaSDKClient = None

logger = logging.getLogger(__name__)

ROLES = ("system", "user", "assistant")


class ChatError(RuntimeError):
    """Human-readable failure from the chat service."""


def validate_messages(messages: List[Dict[str, str]]) -> List[Dict[str, str]]:
    cleaned = []
    for i, msg in enumerate(messages):
        role = msg.get("role")
        if role not in ROLES:
            raise ValueError(f"message {i} has invalid role {role!r}")
        cleaned.append({"role": role, "content": str(msg.get("content") or "")})
    return cleaned


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(self, model: str, messages: List[Dict[str, str]]) -> str:
        """Send a chat request and return the reply text."""


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self):
        if OllamaSDKClient is None:
            raise ImportError("ollama package is required for OllamaClient (pip install nextstep[ollama])")
        self.client = OllamaSDKClient(host=config.OLLAMA_BASE_URL)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> str:
        try:
            response = self.client.chat(model=model, messages=messages)
        except Exception as exc:  # ollama raises plain httpx / ResponseError types
            raise ChatError(f"Failed to get response from AI: {exc}") from exc
        return response.message.content or ""


class OpenAIClient(LLMClient):
    """OpenAI-compatible client; Groq is reached through ``base_url``."""

    def __init__(self, api_key: str | None = None, base_url: str | None = None):
        if not api_key:
            raise ValueError(
                "API key is not configured. Set GROQ_API_KEY (free key at "
                "https://console.groq.com/keys) or OPENAI_API_KEY."
            )
        self.client = OpenAI(api_key=api_key, base_url=base_url)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> str:
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=config.LLM_MODEL_PARAMS["temperature"],
                max_tokens=config.LLM_MODEL_PARAMS["max_tokens"],
            )
        except OpenAIError as exc:
            raise ChatError(str(exc) or "Failed to get response from AI") from exc

        if not response.choices:
            raise ChatError("No response generated")
        return response.choices[0].message.content or ""


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the client for the configured provider."""
    provider = (provider or config.LLM_PROVIDER).lower()
    if provider == "groq":
        return OpenAIClient(api_key=config.GROQ_API_KEY, base_url=config.GROQ_BASE_URL)
    if provider == "openai":
        return OpenAIClient(api_key=config.OPENAI_API_KEY)
    if provider == "ollama":
        return OllamaClient()
    raise ValueError(f"Unsupported LLM provider: {provider}")


# Create a global client instance lazily
_llm_client = None


def chat(messages: List[Dict[str, str]], model: str | None = None,
         client: LLMClient | None = None) -> str:
    """Send ``messages`` and return the reply; raises ChatError on failure."""
    global _llm_client
    if client is None:
        if _llm_client is None:
            try:
                _llm_client = get_llm_client()
            except (ValueError, ImportError) as exc:
                raise ChatError(str(exc)) from exc
        client = _llm_client

    model = model or config.get_model_for_provider()
    logger.debug("Chat request: %d messages to %s", len(messages), model)
    text = client.chat(model, validate_messages(messages))
    if not text or not text.strip():
        raise ChatError("Empty response from AI")
    return text

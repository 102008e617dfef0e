"""Structured-generation providers.

Each provider exposes ``generate(messages, schema)`` and returns a
``GenerationResult`` holding either an already parsed object or the raw text
the model produced. Transport, auth and quota failures raise
``GenerationError``; timeouts and dropped connections raise the
``TransientGenerationError`` subclass so callers can retry them.
"""
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

import openai
import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from nutriplan.core.config import Settings
from .schema import SCHEMA_NAME, gemini_schema

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The generation service could not be reached or refused the call."""


class TransientGenerationError(GenerationError):
    """A timeout or connection failure worth one more attempt."""


@dataclass
class GenerationResult:
    parsed: Optional[Any] = None
    raw: str = ""


class PlanProvider(Protocol):
    def generate(self, messages: List[Dict[str, str]], schema: Dict[str, Any]) -> GenerationResult:
        ...


# ---------- OpenAI ----------

DEFAULT_OPENAI_MODEL = "gpt-5"

# Families that reject a custom temperature
NO_TEMP_MODELS = re.compile(r"^(gpt-5|gpt-4o(\b|-)|o4(\b|-)|gpt-4\.1)", re.IGNORECASE)


def normalize_model(name: Optional[str]) -> Optional[str]:
    """Fix common typos like "gpt=5", "GPT 5" or "gpt5"."""
    if not name:
        return None
    n = str(name).strip().lower()
    if n in ("gpt=5", "gpt5", "gpt 5"):
        return "gpt-5"
    return n or None


def _content_text(content: Any) -> str:
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict):
                parts.append(str(part.get("text") or ""))
            else:
                parts.append(str(getattr(part, "text", "") or ""))
        return "".join(parts).strip()
    return str(content or "").strip()


class OpenAIProvider:
    def __init__(self, api_key: str, model: Optional[str] = None,
                 temperature: Optional[float] = None, timeout: float = 30.0, client=None):
        self.model = normalize_model(model) or DEFAULT_OPENAI_MODEL
        self.temperature = temperature
        if client is None:
            # retries are handled by the caller
            client = openai.OpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self.client = client

    def generate(self, messages: List[Dict[str, str]], schema: Dict[str, Any]) -> GenerationResult:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": SCHEMA_NAME, "schema": schema, "strict": True},
            },
        }
        if self.temperature is not None and not NO_TEMP_MODELS.match(self.model):
            payload["temperature"] = self.temperature

        try:
            response = self.client.chat.completions.create(**payload)
        except openai.APIConnectionError as e:  # includes APITimeoutError
            raise TransientGenerationError(str(e)) from e
        except openai.OpenAIError as e:
            raise GenerationError(str(e)) from e

        choices = getattr(response, "choices", None) or []
        message = choices[0].message if choices else None
        raw = _content_text(getattr(message, "content", None))
        # chat.completions.create never fills message.parsed; under a strict
        # json_schema the content itself is the structured object
        try:
            parsed = json.loads(raw)
        except ValueError:
            return GenerationResult(raw=raw)
        if isinstance(parsed, (dict, list)):
            return GenerationResult(parsed=parsed, raw=raw)
        return GenerationResult(raw=raw)


# ---------- Gemini ----------

class GeminiProvider:
    def __init__(self, api_key: str, model: str = "gemini-2.0-flash", timeout: float = 30.0):
        genai.configure(api_key=api_key)
        self.model = model
        self.timeout = timeout

    def generate(self, messages: List[Dict[str, str]], schema: Dict[str, Any]) -> GenerationResult:
        system = "\n\n".join(m["content"] for m in messages if m.get("role") == "system")
        prompt = "\n\n".join(m["content"] for m in messages if m.get("role") != "system")
        model = genai.GenerativeModel(self.model, system_instruction=system or None)
        config = genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=gemini_schema(schema),
        )
        try:
            response = model.generate_content(
                prompt,
                generation_config=config,
                request_options={"timeout": self.timeout},
            )
        except (google_exceptions.DeadlineExceeded, google_exceptions.ServiceUnavailable) as e:
            raise TransientGenerationError(str(e)) from e
        except google_exceptions.GoogleAPIError as e:
            raise GenerationError(str(e)) from e

        try:
            raw = (response.text or "").strip()
        except ValueError as e:
            # blocked or empty candidate
            logger.warning("Gemini returned no text: %s", e)
            raw = ""
        return GenerationResult(raw=raw)


def get_provider(settings: Settings) -> PlanProvider:
    """Build the provider named by ``MEALPLAN_PROVIDER``."""
    name = settings.MEALPLAN_PROVIDER
    if name == "openai":
        if not settings.OPENAI_API_KEY:
            raise GenerationError("OPENAI_API_KEY is not configured")
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            temperature=settings.OPENAI_TEMPERATURE,
            timeout=settings.GENERATION_TIMEOUT,
        )
    if name == "gemini":
        if not settings.GEMINI_API_KEY:
            raise GenerationError("GEMINI_API_KEY is not configured")
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            timeout=settings.GENERATION_TIMEOUT,
        )
    raise GenerationError(f"Unknown meal plan provider: {name!r}")

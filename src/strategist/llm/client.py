"""Generation client for phase content.

Uses Claude Agent SDK without tools; the async query runs inside a private
event loop so callers stay synchronous.
"""
from __future__ import annotations

import asyncio
import json
import logging
import re
from enum import Enum
from typing import Any

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeAgentOptions,
    ResultMessage,
    TextBlock,
    query,
)

from strategist.errors import GenerationError
from strategist.llm.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


# --- API Error Classification ---


class APIErrorType(Enum):
    """Types of API errors for classification."""

    RATE_LIMITED = "rate_limited"
    API_UNAVAILABLE = "api_unavailable"
    BUDGET_EXCEEDED = "budget_exceeded"
    UNKNOWN = "unknown"


# Patterns to match in error messages (case-insensitive)
RATE_LIMIT_PATTERNS = [
    "rate limit",
    "rate_limit",
    "ratelimit",
    "429",
    "too many requests",
    "throttl",
]

UNAVAILABLE_PATTERNS = [
    "overloaded",
    "503",
    "502",
    "504",
    "unavailable",
    "service error",
    "temporarily",
    "try again later",
    "capacity",
]

BUDGET_PATTERNS = [
    "budget",
    "spending limit",
    "billing",
    "credit",
    "quota exceeded",
    "usage limit",
    "daily limit",
]


def classify_api_error(error: Exception) -> APIErrorType:
    """Classify an API error by parsing the error message."""
    error_str = str(error).lower()

    # Budget first (most specific)
    if any(pattern in error_str for pattern in BUDGET_PATTERNS):
        return APIErrorType.BUDGET_EXCEEDED
    if any(pattern in error_str for pattern in RATE_LIMIT_PATTERNS):
        return APIErrorType.RATE_LIMITED
    if any(pattern in error_str for pattern in UNAVAILABLE_PATTERNS):
        return APIErrorType.API_UNAVAILABLE
    return APIErrorType.UNKNOWN


# --- Reply parsing ---


def extract_json_object(text: str) -> dict[str, Any]:
    """Extract the first JSON object from text, handling markdown fences.

    Raises:
        ValueError: If the text holds no JSON object.
    """
    cleaned = re.sub(r"```json\s*", "", text, flags=re.IGNORECASE)
    cleaned = re.sub(r"```\s*", "", cleaned)
    decoder = json.JSONDecoder()
    for match in re.finditer(r"\{", cleaned):
        try:
            parsed, _ = decoder.raw_decode(cleaned[match.start() :])
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed
    raise ValueError("No JSON object found in reply")


def build_request(prompt: str, schema: dict[str, Any] | None) -> str:
    """Append the advisory response schema to ``prompt``."""
    if not schema:
        return prompt
    return (
        f"{prompt}\n\nRespond with a JSON object matching this schema:\n"
        f"{json.dumps(schema, indent=2)}"
    )


# --- Client ---


class GenerationClient:
    """Produces raw phase replies via Claude Agent SDK."""

    def __init__(
        self,
        model: str | None = None,
        max_turns: int | None = None,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        if model is None or max_turns is None:
            from strategist.config.settings import settings

            model = model or settings.llm_model
            max_turns = max_turns or settings.generation_max_turns
        self.model = model
        self.max_turns = max_turns
        self.system_prompt = system_prompt
        logger.info("GenerationClient initialized (model=%s)", model)

    def generate(self, prompt: str, schema: dict[str, Any] | None = None) -> Any:
        """Run one generation and return the parsed JSON reply.

        Raises:
            GenerationError: If the service fails or the reply holds no JSON
                object.
        """
        request = build_request(prompt, schema)
        logger.info("generate called: prompt=%d chars", len(request))
        try:
            text = self._run_query(request)
        except Exception as e:
            error_type = classify_api_error(e)
            logger.exception("Generation failed (%s)", error_type.value)
            raise GenerationError(f"Generation failed: {e}", error_type) from e

        try:
            return extract_json_object(text)
        except ValueError as e:
            logger.warning("Reply without JSON object (%d chars)", len(text))
            raise GenerationError(str(e), APIErrorType.UNKNOWN) from e

    def _run_query(self, prompt: str) -> str:
        """Run the agent query to completion and return the reply text."""
        loop = asyncio.new_event_loop()
        try:

            async def collect_text() -> str:
                chunks: list[str] = []
                options = ClaudeAgentOptions(
                    allowed_tools=[],  # Plain generation, no tools
                    system_prompt=self.system_prompt or None,
                    model=self.model,
                    max_turns=self.max_turns,
                )
                async for message in query(prompt=prompt, options=options):
                    if isinstance(message, AssistantMessage):
                        for block in message.content:
                            if isinstance(block, TextBlock):
                                chunks.append(block.text)
                                logger.debug("Got chunk: %d chars", len(block.text))
                    elif isinstance(message, ResultMessage):
                        logger.info(
                            "Query complete, cost: $%.4f", message.total_cost_usd or 0
                        )
                return "".join(chunks)

            return loop.run_until_complete(collect_text())
        finally:
            loop.close()

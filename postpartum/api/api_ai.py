import re
import json
import logging
from json import JSONDecodeError
from dataclasses import dataclass
from typing import Any, Optional

import openai
from openai import AsyncOpenAI

from postpartum.api.errors import MissingCredential, TransportFailure, MalformedResponse
from postpartum.utilities.config import (
    GENERATOR_API_KEY, GENERATOR_BASE_URL, GENERATOR_MODEL,
    GENERATOR_TEMPERATURE, GENERATOR_TIMEOUT
)

logger = logging.getLogger(__name__)

DAILY_PLAN = "daily_plan"
RECIPE_DETAIL = "recipe_detail"
SHOPPING_LIST = "shopping_list"


@dataclass(frozen=True)
class GenerationRequest:
    kind: str
    system_instruction: str
    user_instruction: str
    seed: int
    expect_structured: bool = True


# === Content Generator ===
class ContentGenerator:
    """Async client for an OpenAI-compatible chat completions endpoint.

    The API key is checked on every call rather than at construction so the
    application can start (and serve cached data) without credentials.
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 model: Optional[str] = None, temperature: Optional[float] = None,
                 timeout: Optional[float] = None):
        self.api_key = GENERATOR_API_KEY if api_key is None else api_key
        self.base_url = base_url or GENERATOR_BASE_URL
        self.model = model or GENERATOR_MODEL
        self.temperature = GENERATOR_TEMPERATURE if temperature is None else temperature
        self.timeout = GENERATOR_TIMEOUT if timeout is None else timeout
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if not self.api_key:
            raise MissingCredential("No API key configured for the content generator (set DS_API_KEY).")
        if self._client is None:
            kwargs = {"api_key": self.api_key, "base_url": self.base_url}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def generate(self, request: GenerationRequest) -> Any:
        """Send one request; return parsed JSON when structured output is expected, text otherwise."""
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": request.system_instruction},
                    {"role": "user", "content": request.user_instruction},
                ],
                temperature=self.temperature,
                seed=request.seed,
                response_format={"type": "json_object" if request.expect_structured else "text"},
                stream=False,
            )
        except openai.APIError as e:
            logger.error("Generator request %s (seed=%s) failed: %s", request.kind, request.seed, e)
            raise TransportFailure(f"{request.kind} request failed: {e}") from e

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""
        if not request.expect_structured:
            return content.strip()
        return parse_structured(content or "{}")


# === Parse boundary ===
def parse_structured(text: str) -> Any:
    """Parse generator output into JSON, tolerating prose and markdown fences around it."""
    try:
        return json.loads(text)
    except JSONDecodeError:
        pass

    cleaned = _remove_trailing_commas(_strip_code_fences(text))
    try:
        return json.loads(cleaned)
    except JSONDecodeError:
        pass

    candidate = _extract_json_by_balancing(cleaned)
    if candidate:
        try:
            return json.loads(_remove_trailing_commas(candidate))
        except JSONDecodeError:
            logger.debug("Extracted JSON candidate still invalid")

    logger.warning("Generator output is not valid JSON: %.200s", text)
    raise MalformedResponse("Generator output is not valid JSON")


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\s*\n?(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```(?:json)?|```$", "", text.strip())
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object/array by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if escape:
            escape = False
            continue
        if in_string:
            if ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            if start is not None:
                in_string = True
            continue
        if ch in "{[":
            if start is None:
                start = i
            stack.append(ch)
        elif ch in "}]":
            if not stack:
                continue
            opening = stack.pop()
            if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                return None
            if not stack:
                return text[start:i + 1]
    return None

import json
import logging
import re
from typing import Any, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from khayrah.ai.prompts.feel import SYSTEM_PROMPT, create_user_prompt, few_shot_pairs
from khayrah.config import Settings
from khayrah.errors import LLMError, ModelOutputError

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*(?P<body>.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


def build_model(settings: Settings) -> ChatGoogleGenerativeAI:
    return ChatGoogleGenerativeAI(
        model=settings.model,
        google_api_key=settings.api_key,
        temperature=settings.temperature,
        response_mime_type="application/json",
        max_retries=1,
    )


def build_messages(text: str, profile: Optional[Any] = None) -> list[BaseMessage]:
    messages: list[BaseMessage] = [SystemMessage(content=SYSTEM_PROMPT)]
    for user_text, assistant_json in few_shot_pairs():
        messages.append(HumanMessage(content=user_text))
        messages.append(AIMessage(content=assistant_json))
    messages.append(HumanMessage(content=create_user_prompt(text, profile)))
    return messages


def _preview(value: Any, limit: int = 200) -> str:
    """Return a safe, short preview string for logs."""
    s = str(value)
    if len(s) > limit:
        return s[:limit] + "...(truncated)"
    return s


def _content_to_text(content) -> str:
    """
    Chat model content is either a plain string or a list of parts
    (e.g. [{'type': 'text', 'text': '...'}]). Join the text parts.
    """
    if content is None:
        return ""

    if isinstance(content, str):
        return content

    if isinstance(content, list):
        chunks: list[str] = []
        for part in content:
            if isinstance(part, str):
                chunks.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                chunks.append(part["text"])
        return "".join(chunks)

    return str(content)


def _upstream_status(error: Exception) -> Optional[int]:
    for candidate in (error, error.__cause__):
        if candidate is None:
            continue
        for attr in ("code", "status_code"):
            status = getattr(candidate, attr, None)
            if isinstance(status, int) and 400 <= status <= 599:
                return status
    return None


def parse_model_json(text: str) -> dict:
    """
    Best-effort JSON parsing of a model reply. Tries the text as-is,
    then without a Markdown code fence, then the outermost {...} span.
    """
    candidates = [text]

    fenced = _CODE_FENCE.match(text)
    if fenced:
        candidates.append(fenced.group("body"))

    start, end = text.find("{"), text.rfind("}")
    if 0 <= start < end:
        candidates.append(text[start:end + 1])

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    raise ModelOutputError("Model reply is not a JSON object", raw=text)


async def send_feeling(model, text: str, profile: Optional[Any] = None) -> dict:
    logger.info("llm_called input=%s", _preview(text))
    try:
        response = await model.ainvoke(build_messages(text, profile))
    except Exception as e:
        logger.exception("llm_error input=%s", _preview(text))
        raise LLMError(str(e), status_code=_upstream_status(e)) from e

    content = _content_to_text(getattr(response, "content", response))
    logger.info("llm_return result=%s", _preview(content))
    return parse_model_json(content)

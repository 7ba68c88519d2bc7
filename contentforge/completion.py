# contentforge/completion.py
import logging
from typing import Optional

import openai
from flask import current_app

logger = logging.getLogger('contentforge.external.completion')


class CompletionError(Exception):
    """Raised when the completion API cannot produce text for a prompt."""


def _get_client() -> openai.OpenAI:
    api_key = current_app.config.get('OPENAI_API_KEY')
    if not api_key:
        raise CompletionError("OpenAI API key not configured")
    return openai.OpenAI(api_key=api_key, timeout=current_app.config.get('OPENAI_TIMEOUT', 120))


def complete(
    prompt: str,
    temperature: float = 0.7,
    max_tokens: Optional[int] = None,
    system_prompt: Optional[str] = None,
    json_mode: bool = False,
) -> str:
    """
    Sends a single chat completion request and returns the first choice's text

    Args:
        prompt: The user message
        temperature: Sampling temperature
        max_tokens: Optional cap on generated tokens
        system_prompt: Optional system message sent before the prompt
        json_mode: Ask the model for a JSON object response

    Returns:
        The generated text

    Raises:
        CompletionError: if the key is missing, the call fails or the reply is empty
    """
    client = _get_client()
    model = current_app.config.get('OPENAI_MODEL', 'gpt-4o-mini')

    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    params = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
    }
    if max_tokens:
        params["max_tokens"] = max_tokens
    if json_mode:
        params["response_format"] = {"type": "json_object"}

    logger.info(f"Requesting completion from {model} (prompt length {len(prompt)})")
    try:
        response = client.chat.completions.create(**params)
    except openai.OpenAIError as e:
        logger.error(f"Completion request failed: {e}")
        raise CompletionError(f"Completion request failed: {e}") from e

    content = response.choices[0].message.content if response.choices else None
    if not content:
        logger.error("No content in completion response")
        raise CompletionError("No content generated from OpenAI")

    logger.info(f"Received completion of length {len(content)}")
    return content

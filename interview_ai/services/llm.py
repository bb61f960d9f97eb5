import logging
from ..config import client, model

logger = logging.getLogger(__name__)

def message_text(content) -> str:
    """Flatten message content, which is either a string or a list of chunks."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content

    parts = []
    for chunk in content:
        if isinstance(chunk, str):
            parts.append(chunk)
        elif isinstance(chunk, dict):
            parts.append(chunk.get("text") or "")
        else:
            # Non-text chunks (images, references) have no text attribute
            parts.append(getattr(chunk, "text", None) or "")
    return "".join(parts)

def complete(prompt: str, system_prompt: str, temperature: float) -> str:
    """Single blocking chat completion; returns the raw message text."""
    completion = client.chat.complete(
        model=model,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt}
        ],
        temperature=temperature
    )
    response_text = message_text(completion.choices[0].message.content)
    logger.debug(f"Raw LLM response: {response_text}")
    return response_text

import base64

import httpx
import openai

from app.scoring.client_base import BaseScoringClient
from app.scoring.exceptions import ScoringNetworkError
from app.scoring.models import Attachment, ContentPart, ScoringResponse


class OpenAIClientAdapter(BaseScoringClient):
    """Scoring AI client adapter built on OpenAI-compatible chat API.

    Retries are disabled on the underlying client: a failed call skips the
    file instead of being repeated.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        attachment: Attachment,
    ) -> ScoringResponse | None:
        messages: list[dict[str, object]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append(
            {
                "role": "user",
                "content": [
                    self._attachment_part(attachment),
                    {"type": "text", "text": user_prompt},
                ],
            }
        )
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={"type": "json_object"},
                messages=messages,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ScoringNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ScoringNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            return None
        content = response.choices[0].message.content
        if not content:
            return None
        if isinstance(content, str):
            return ScoringResponse(content=content)
        # Some OpenAI-compatible providers answer with a list of content blocks.
        return ScoringResponse(
            content=[ContentPart(text=getattr(part, "text", "")) for part in content]
        )

    @staticmethod
    def _attachment_part(attachment: Attachment) -> dict[str, object]:
        encoded = base64.b64encode(attachment.content).decode("ascii")
        data_url = f"data:{attachment.mime_type};base64,{encoded}"
        if attachment.mime_type.startswith("image/"):
            return {"type": "image_url", "image_url": {"url": data_url}}
        return {
            "type": "file",
            "file": {"filename": attachment.name, "file_data": data_url},
        }

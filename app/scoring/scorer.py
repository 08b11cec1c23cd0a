"""AI-powered resume scorer."""

import mimetypes
from pathlib import PurePath

from app.logging.logger import Log
from app.scoring.base import BaseScorer
from app.scoring.client_base import BaseScoringClient
from app.scoring.exceptions import ScoringError
from app.scoring.models import Attachment, ScoringResponse
from app.storage.base import BaseStorage
from app.storage.exceptions import StorageError


class Scorer(BaseScorer):
    """Scores an uploaded document by sending it with instructions to an AI provider."""

    def __init__(
        self,
        *,
        storage: BaseStorage,
        client: BaseScoringClient,
        model: str,
        temperature: float = 0.0,
        system_prompt: str = "",
    ) -> None:
        self._storage = storage
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt

    def score(self, reference: str, instructions: str) -> ScoringResponse | None:
        attachment = self._load_attachment(reference)
        Log.debug(f"Scoring prompt:\n{instructions}")

        response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=instructions,
            attachment=attachment,
        )
        if response is None:
            Log.warning("AI returned no result", reference=reference)
            return None
        Log.debug(f"AI raw response:\n{response.content}")
        return response

    def _load_attachment(self, reference: str) -> Attachment:
        try:
            content = self._storage.read(reference)
        except StorageError as exc:
            raise ScoringError(f"Cannot load {reference} for scoring: {exc}") from exc
        name = PurePath(reference).name
        mime_type = mimetypes.guess_type(name)[0] or "application/pdf"
        return Attachment(name=name, content=content, mime_type=mime_type)

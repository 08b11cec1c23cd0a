from typing import ClassVar

from app.config.settings import Settings
from app.scoring.base import BaseScorer
from app.scoring.example_client_adapter import ExampleClientAdapter
from app.scoring.openai_client_adapter import OpenAIClientAdapter
from app.scoring.scorer import Scorer
from app.storage.base import BaseStorage


class ScorerFactory:
    """Creates the configured scorer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings, storage: BaseStorage) -> BaseScorer:
        """Create a configured scorer reading uploads from storage."""
        provider = settings.scoring_provider.lower()
        if provider == "example":
            return Scorer(
                storage=storage,
                client=ExampleClientAdapter(),
                model="example",
            )
        client = OpenAIClientAdapter(
            api_key=settings.scoring_api_key,
            timeout_seconds=settings.scoring_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Scorer(
            storage=storage,
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.scoring_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.scoring_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "scoring_base_url is required for scoring_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown scoring provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        model = settings.scoring_model_name.strip()
        if not model:
            raise ValueError(f"scoring_model_name is required for scoring_provider={provider}")
        return model

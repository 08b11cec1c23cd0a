from app.config.settings import Settings
from app.database.repositories.record_store import (
    BaseRecordStore,
    InMemoryRecordStore,
    PostgresRecordStore,
)


class RecordStoreFactory:
    """Creates the configured record store."""

    ADAPTERS: dict[str, type[BaseRecordStore]] = {
        "memory": InMemoryRecordStore,
        "postgres": PostgresRecordStore,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRecordStore:
        backend = settings.record_store.lower()
        store_cls = cls.ADAPTERS.get(backend)
        if store_cls is None:
            raise ValueError(
                f"Unknown record store '{backend}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return store_cls()

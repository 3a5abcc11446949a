"""In-memory unit of work."""

from conduit.application.transaction import Transaction

from .store import InMemoryStore


class InMemoryTransaction(Transaction):
    """Restores the store to its state when the request began on rollback."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__()
        self.store = store
        self._snapshot = store.snapshot()

    async def _commit(self) -> None:
        pass

    async def _rollback(self) -> None:
        self.store.restore(self._snapshot)

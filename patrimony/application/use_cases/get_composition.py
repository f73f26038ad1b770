"""Use case to compute the composition of current balances."""

from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.domain.constants import GROUP_BY_ACCOUNT
from patrimony.domain.models import Composition
from patrimony.domain.services.composition import build_composition


class GetCompositionUseCase:
    """Break current balances down by account or by account type."""

    def __init__(self, store: SnapshotStorePort) -> None:
        self._store = store

    def execute(self, group_by: str = GROUP_BY_ACCOUNT) -> Composition:
        """Return the composition view for the stored accounts."""
        document = self._store.load()
        return build_composition(document.accounts, group_by)


__all__ = ["GetCompositionUseCase"]

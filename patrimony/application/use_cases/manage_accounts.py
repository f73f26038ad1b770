"""Use case to add, edit and delete tracked accounts."""

from dataclasses import replace

from patrimony.application.ports.asset_uploader import (
    AssetUploaderPort,
    UploadedAsset,
    UploadedFilePort,
)
from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.domain.errors import NotFoundError
from patrimony.domain.models import Account, Document
from patrimony.domain.services.mutations import (
    add_account,
    delete_account,
    edit_account,
)
from patrimony.infrastructure.logging.logger import get_app_logger


class ManageAccountsUseCase:
    """Apply account mutations and persist the resulting document.

    Each call loads the current document, computes the next one and saves
    it. A failing mutation raises before ``save`` so stored state is kept.
    """

    def __init__(
        self,
        store: SnapshotStorePort,
        uploader: AssetUploaderPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting the document.
            uploader: Optional port storing logo images.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._uploader = uploader
        self._logger = logger or get_app_logger()

    def add(
        self,
        account: Account,
        logo_file: UploadedFilePort | None = None,
    ) -> Document:
        """Add a new account and save the document.

        When ``logo_file`` is given it is uploaded after the account passes
        validation and before the single save, so a failed upload leaves
        the stored document untouched.

        Raises:
            ValidationError: If the account is malformed or its id exists.
            UploadError: If the logo upload fails.
        """
        current = self._store.load()
        document = add_account(current, account)
        if logo_file is not None:
            account = replace(account, logo=self._upload(logo_file).path)
            document = add_account(current, account)
        self._store.save(document)
        self._logger.info(f"Account added: id={account.id}, name={account.name}")
        return document

    def edit(
        self,
        account: Account,
        logo_file: UploadedFilePort | None = None,
    ) -> Document:
        """Replace an existing account and save the document.

        ``logo_file`` is handled as in ``add``.
        """
        current = self._store.load()
        document = edit_account(current, account)
        if logo_file is not None:
            account = replace(account, logo=self._upload(logo_file).path)
            document = edit_account(current, account)
        self._store.save(document)
        self._logger.info(f"Account edited: id={account.id}")
        return document

    def delete(self, account_id: str) -> Document:
        """Delete an account and save the document."""
        document = delete_account(self._store.load(), account_id)
        self._store.save(document)
        self._logger.info(f"Account deleted: id={account_id}")
        return document

    def attach_logo(self, account_id: str, file: UploadedFilePort) -> Document:
        """Upload a logo and reference it from an existing account.

        The upload happens first; when it fails the document is neither
        modified nor saved.

        Args:
            account_id: Account receiving the logo.
            file: Uploaded file object.

        Returns:
            Document: Saved document with the new logo reference.

        Raises:
            RuntimeError: If no uploader is configured.
            NotFoundError: If the account does not exist.
            UploadError: If the upload fails.
        """
        if self._uploader is None:
            raise RuntimeError("No asset uploader configured.")
        current = self._store.load()
        account = current.find_account(account_id)
        if account is None:
            raise NotFoundError(f"Unknown account id: {account_id}")
        asset = self._upload(file)
        document = edit_account(current, replace(account, logo=asset.path))
        self._store.save(document)
        self._logger.info(f"Logo attached: id={account_id}, path={asset.path}")
        return document

    def _upload(self, file: UploadedFilePort) -> UploadedAsset:
        if self._uploader is None:
            raise RuntimeError("No asset uploader configured.")
        return self._uploader.upload(file)


__all__ = ["ManageAccountsUseCase"]

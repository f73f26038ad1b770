"""Application ports package."""

from .asset_uploader import AssetUploaderPort, UploadedAsset, UploadedFilePort
from .database import DatabaseEnginePort
from .snapshot_store import SnapshotStorePort

__all__ = [
    "AssetUploaderPort",
    "UploadedAsset",
    "UploadedFilePort",
    "DatabaseEnginePort",
    "SnapshotStorePort",
]

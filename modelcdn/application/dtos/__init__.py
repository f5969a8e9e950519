"""Application DTOs."""

from modelcdn.application.dtos.storage import (
    CollectionScan,
    DeleteResult,
    DirectUpload,
    ListingResult,
    MediaListing,
    ServedFile,
    UploadResult,
    UrlUpload,
)

__all__ = [
    "CollectionScan",
    "DeleteResult",
    "DirectUpload",
    "ListingResult",
    "MediaListing",
    "ServedFile",
    "UploadResult",
    "UrlUpload",
]

"""Application protocols."""

from modelcdn.application.interfaces.storage import ICollectionStorage, IRemoteFetcher

__all__ = ["ICollectionStorage", "IRemoteFetcher"]

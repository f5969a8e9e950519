"""Outbound HTTP."""

from modelcdn.infrastructure.external.http.remote_fetcher import HttpRemoteFetcher

__all__ = ["HttpRemoteFetcher"]

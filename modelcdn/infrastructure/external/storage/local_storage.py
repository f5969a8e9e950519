"""Local filesystem storage: one directory per collection, atomic writes."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from modelcdn.application.dtos.storage import CollectionScan
from modelcdn.application.services.filename_policy import candidate_names
from modelcdn.domain.entities import StoredFile, ensure_safe_name
from modelcdn.domain.enums import CollectionKind, ConflictPolicy
from modelcdn.domain.value_objects import kind_for_collection
from modelcdn.infrastructure.exceptions import (
    StorageDeleteError,
    StorageReadError,
    StorageWriteError,
)
from modelcdn.infrastructure.external.storage.path_resolver import PathResolver
from modelcdn.shared.utils.datetime import from_timestamp_utc

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".tmp_"


class LocalCollectionStorage:
    """Collection-per-directory storage over the resolver's candidate roots.

    Writes go through a temp file in the target directory. OVERWRITE replaces
    the target with os.replace; DEDUPE hard-links the temp file to the first
    free candidate name, so an existing file is never replaced and the
    collision check and the create are one step. Where the filesystem refuses
    hard links, DEDUPE creates the candidate directly with O_CREAT|O_EXCL
    (readers may then see a partially written file). Entries starting with '.'
    (temp files, .gitkeep) are never listed.
    """

    def __init__(self, resolver: PathResolver) -> None:
        self.resolver = resolver

    async def _stat_file(
        self, collection: CollectionKind, path: Path
    ) -> StoredFile | None:
        try:
            st = await aiofiles.os.stat(path)
        except FileNotFoundError:
            # Removed between listing and stat
            return None
        if not stat.S_ISREG(st.st_mode):
            return None
        return StoredFile(
            name=path.name,
            collection=collection,
            size_bytes=st.st_size,
            modified_at=from_timestamp_utc(st.st_mtime),
        )

    async def scan(self, collection: CollectionKind) -> CollectionScan:
        """Enumerate whitelisted regular files in the resolved read directory."""
        searched = [str(p) for p in self.resolver.read_candidates(collection)]
        directory = await self.resolver.resolve_read_dir(collection)
        if directory is None:
            return CollectionScan(directory=None, files=[], searched_paths=searched)

        kind = kind_for_collection(collection)
        try:
            names = await aiofiles.os.listdir(directory)
        except OSError as e:
            raise StorageReadError(str(directory), str(e)) from e

        files: list[StoredFile] = []
        for name in names:
            if name.startswith(".") or not kind.accepts(name):
                continue
            stored = await self._stat_file(collection, directory / name)
            if stored is not None:
                files.append(stored)
        return CollectionScan(directory=directory, files=files, searched_paths=searched)

    async def _write_temp(self, directory: Path, data: bytes, suffix: str) -> Path:
        fd, temp_name = tempfile.mkstemp(dir=directory, prefix=TEMP_PREFIX, suffix=suffix)
        os.close(fd)
        temp_path = Path(temp_name)
        async with aiofiles.open(temp_path, "wb") as f:
            await f.write(data)
        os.chmod(temp_path, 0o644)
        return temp_path

    async def _link_first_free(self, temp_path: Path, directory: Path, name: str) -> Path:
        for candidate in candidate_names(name):
            target = directory / candidate
            try:
                await aiofiles.os.link(temp_path, target)
            except FileExistsError:
                continue
            return target
        raise AssertionError("candidate_names is unbounded")

    async def _create_first_free(self, directory: Path, name: str, data: bytes) -> Path:
        # O_EXCL create for filesystems without hard links
        for candidate in candidate_names(name):
            target = directory / candidate
            try:
                fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o644)
            except FileExistsError:
                continue
            try:
                async with aiofiles.open(fd, "wb") as f:
                    await f.write(data)
            except OSError:
                target.unlink(missing_ok=True)
                raise
            return target
        raise AssertionError("candidate_names is unbounded")

    async def save(
        self,
        collection: CollectionKind,
        name: str,
        data: bytes,
        policy: ConflictPolicy,
    ) -> StoredFile:
        """Persist data under name and return the stored file.

        Raises:
            InvalidPathException: If name fails the traversal check.
            StorageWriteError: If any filesystem step fails or the file is absent afterwards.
        """
        ensure_safe_name(name)
        directory = await self.resolver.resolve_write_dir(collection)
        temp_path: Path | None = None
        target = directory / name
        try:
            await aiofiles.os.makedirs(directory, exist_ok=True)
            temp_path = await self._write_temp(directory, data, Path(name).suffix)
            if policy is ConflictPolicy.OVERWRITE:
                await aiofiles.os.replace(temp_path, target)
                temp_path = None
            else:
                try:
                    target = await self._link_first_free(temp_path, directory, name)
                except OSError as e:
                    logger.warning(
                        "Hard links unavailable in %s (%s), using exclusive create", directory, e
                    )
                    target = await self._create_first_free(directory, name, data)
        except OSError as e:
            raise StorageWriteError(str(target), str(e)) from e
        finally:
            if temp_path is not None and await aiofiles.os.path.exists(temp_path):
                await aiofiles.os.remove(temp_path)

        stored = await self._stat_file(collection, target)
        if stored is None:
            raise StorageWriteError(str(target), "file missing after write")
        logger.info(
            "Stored %s/%s (%d bytes, %s)",
            collection.value,
            stored.name,
            stored.size_bytes,
            policy.value,
        )
        return stored

    async def find(self, collection: CollectionKind, name: str) -> Path | None:
        """Return the first candidate path holding name (None if absent)."""
        return await self.resolver.locate(collection, name)

    async def delete(self, collection: CollectionKind, name: str) -> bool:
        """Delete name from the first candidate root holding it. Returns True if deleted."""
        path = await self.resolver.locate(collection, name)
        if path is None:
            return False
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageDeleteError(str(path), str(e)) from e
        logger.info("Deleted %s/%s", collection.value, name)
        return True

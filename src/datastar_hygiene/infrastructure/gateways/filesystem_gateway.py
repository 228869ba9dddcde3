"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import logging
from pathlib import Path

from datastar_hygiene.domain.protocols import FileSystemProtocol

logger = logging.getLogger(__name__)


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def collect_markup_files(self, path: str, extensions: tuple[str, ...]) -> list[str]:
        """Get all markup files in path (recursive if directory). A file path is returned as-is."""
        path_obj = Path(path)
        suffixes = {f".{ext.lower()}" for ext in extensions}
        if path_obj.is_dir():
            return sorted(
                str(p) for p in path_obj.rglob("*") if p.is_file() and p.suffix.lower() in suffixes
            )
        return [str(path_obj)]

    def read_text(self, path: str) -> str:
        """
        Read a file as UTF-8.

        Undecodable bytes are kept as surrogate escapes and logged, so the text
        encodes back to the file's exact bytes and spans stay file offsets.
        """
        raw = Path(path).read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("%s is not valid UTF-8; undecodable bytes kept as escapes", path)
            return raw.decode("utf-8", "surrogateescape")

"""
File Search Handler - Top-level entries of the user's common folders.

Lists Desktop, Documents and Downloads (non-recursive) and returns entries
whose name contains the query, case-insensitively.
"""

from pathlib import Path

from loguru import logger

from seekr.search.handlers.base import SearchSource
from seekr.search.results import FileResult, ResultItem


class FileSearchHandler(SearchSource):
    """Filename substring search in a fixed set of directories."""

    name = "files"

    def __init__(self, file_dirs=(), enabled: bool = True, min_query_length: int = 3):
        super().__init__(enabled=enabled, min_query_length=min_query_length)
        self.file_dirs = [Path(d) for d in file_dirs]

    def search(self, query: str) -> list[ResultItem]:
        needle = query.lower()
        results = []

        for directory in self.file_dirs:
            try:
                names = sorted(entry.name for entry in directory.iterdir())
            except OSError as e:
                logger.debug(f"Skipping search directory {directory}: {e}")
                continue

            for name in names:
                if needle in name.lower():
                    results.append(FileResult(
                        title=name,
                        description=f"File • in {directory.name}",
                        path=str(directory / name),
                    ))

        return results

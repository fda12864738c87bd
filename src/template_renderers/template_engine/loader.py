"""Template file loading.

Template sources are read as UTF-8 and kept in memory by resolved path, so
a file rendered many times in one process is read once.
"""

import logging
from pathlib import Path

from template_renderers.utils.exceptions import TemplateLoadError

logger = logging.getLogger(__name__)


class TemplateLoader:
    """Reads template files and caches their text by resolved path."""

    def __init__(self) -> None:
        self._sources: dict[Path, str] = {}

    def load_from_file(self, file_path: Path) -> str:
        """Return the text of a template file.

        Args:
            file_path: Template location

        Returns:
            Template source

        Raises:
            TemplateLoadError: If the file is missing, unreadable, a directory
                or not valid UTF-8
        """
        resolved = file_path.resolve()
        cached = self._sources.get(resolved)
        if cached is not None:
            logger.debug(f"Using cached template {file_path}")
            return cached

        logger.info(f"Loading template {file_path}")
        try:
            source = resolved.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise self._load_error(
                f"Template file not found: {file_path}. Check the path.", e
            )
        except IsADirectoryError as e:
            raise self._load_error(
                f"Template path is a directory: {file_path}. Pass a file.", e
            )
        except PermissionError as e:
            raise self._load_error(
                f"Permission denied reading template {file_path}.", e
            )
        except UnicodeDecodeError as e:
            raise self._load_error(
                f"Template encoding error in {file_path} at byte {e.start}. "
                f"Save the file as UTF-8.",
                e,
            )

        self._sources[resolved] = source
        return source

    def clear_cache(self) -> None:
        """Forget every cached template."""
        logger.debug(f"Dropping {len(self._sources)} cached templates")
        self._sources.clear()

    @property
    def cache_size(self) -> int:
        return len(self._sources)

    @staticmethod
    def _load_error(message: str, cause: Exception) -> TemplateLoadError:
        logger.error(message)
        error = TemplateLoadError(message)
        error.__cause__ = cause
        return error

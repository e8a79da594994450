"""Translation catalogs for message interfaces.

Example:
    from logfacade_tools.catalog import CatalogWriter

    writer = CatalogWriter("build/i18n", level="INFO")
    writer.write_default(interface)
    writer.write_skeletal(interface)

    # Directory and threshold from LOGFACADE_TRANSLATION_DIR / LOGFACADE_CATALOG_LEVEL
    writer = CatalogWriter.from_settings(get_settings())
"""

from logfacade_tools.catalog.levels import LEVEL_VALUES, LevelThreshold, level_value
from logfacade_tools.catalog.writer import (
    DEFAULT_FILE_COMMENT,
    DEFAULT_FILE_EXTENSION,
    SKELETAL_FILE_EXTENSION,
    CatalogWriter,
)

__all__ = [
    # Writer
    "CatalogWriter",
    "DEFAULT_FILE_COMMENT",
    "DEFAULT_FILE_EXTENSION",
    "SKELETAL_FILE_EXTENSION",
    # Levels
    "LEVEL_VALUES",
    "LevelThreshold",
    "level_value",
]

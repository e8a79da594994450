"""Translation catalog files.

Two line-oriented ``key=value`` files can be written per interface:

- the default catalog, ``<Simple>.i18n.properties``, holding every message
  in its original text under a reference-only banner
- a skeletal catalog, ``<Simple>.i18n_locale_COUNTRY_VARIANT.properties``,
  with empty values for translators to fill in

Each translation key appears once (first occurrence wins). When a level
threshold is configured, logger methods below it are left out; bundle
methods are always written.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional, Union

from logfacade_tools.catalog.levels import LevelThreshold
from logfacade_tools.exceptions import CatalogWriteError, ConfigurationError
from logfacade_tools.logger import Logger, create_logger_from_settings, get_logger
from logfacade_tools.model import MessageInterface, MessageMethod

if TYPE_CHECKING:
    from logfacade_tools.config import GeneratorSettings

DEFAULT_FILE_EXTENSION = ".i18n.properties"
SKELETAL_FILE_EXTENSION = ".i18n_locale_COUNTRY_VARIANT.properties"
DEFAULT_FILE_COMMENT = (
    "# This file is for reference only, changes have no effect on the generated "
    "interface implementations."
)


class CatalogWriter:
    """Renders and writes translation catalogs for message interfaces.

    Example:
        writer = CatalogWriter(Path("build/i18n"), level="INFO")
        path = writer.write_default(interface)
        # build/i18n/org/acme/AppLogger.i18n.properties
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        level: Optional[str] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the writer.

        Args:
            output_dir: Root directory; package directories are created below it
            level: Optional threshold level name (e.g. "INFO", "FINE")
            logger: Logger for diagnostics (defaults to get_logger())

        Raises:
            ConfigurationError: If ``level`` is not a known level name
        """
        self.output_dir = Path(output_dir)
        self.threshold = LevelThreshold(level) if level is not None else None
        self.logger = logger or get_logger()

    @classmethod
    def from_settings(
        cls, settings: "GeneratorSettings", logger: Optional[Logger] = None
    ) -> "CatalogWriter":
        """Create a writer from translation_output_dir and catalog_level.

        Raises:
            ConfigurationError: If no translation output directory is configured
        """
        if settings.translation_output_dir is None:
            raise ConfigurationError(
                "Translation output directory is not configured",
                details={"variable": f"{settings.prefix}_TRANSLATION_DIR"},
            )
        return cls(
            settings.translation_output_dir,
            level=settings.catalog_level,
            logger=logger or create_logger_from_settings(settings.log),
        )

    def _catalog_methods(self, interface: MessageInterface) -> Iterator[MessageMethod]:
        processed: set[str] = set()
        for method in interface.all_methods():
            if self.threshold is not None and not self.threshold.allows(method):
                continue
            if method.translation_key in processed:
                continue
            processed.add(method.translation_key)
            yield method

    def render_default(self, interface: MessageInterface) -> str:
        fill = "#" * len(DEFAULT_FILE_COMMENT)
        lines = [fill, "#", DEFAULT_FILE_COMMENT, "#", fill, ""]
        for method in self._catalog_methods(interface):
            message = method.message
            lines.append(f"# Id: {message.id if message.id is not None else 'none'}")
            if method.is_logger_method:
                lines.append(f"# Level: {method.log_level.value}")
            lines.append(f"# Message: {message.value}")
            lines.append(f"{method.translation_key}={message.value}")
        return "\n".join(lines) + "\n"

    def render_skeletal(self, interface: MessageInterface) -> str:
        lines = []
        for method in self._catalog_methods(interface):
            if method.is_logger_method:
                lines.append(f"# Level: {method.log_level.value}")
            lines.append(f"# Message: {method.message.value}")
            lines.append(f"{method.translation_key}=")
        return "".join(f"{line}\n" for line in lines)

    def catalog_path(self, interface: MessageInterface, extension: str) -> Path:
        directory = self.output_dir
        if interface.package_name:
            directory = directory.joinpath(*interface.package_name.split("."))
        return directory / f"{interface.simple_name}{extension}"

    def write_default(self, interface: MessageInterface) -> Path:
        """Write the default catalog and return its path.

        Raises:
            CatalogWriteError: If the file cannot be written
        """
        return self._write(
            interface,
            self.catalog_path(interface, DEFAULT_FILE_EXTENSION),
            self.render_default(interface),
        )

    def write_skeletal(self, interface: MessageInterface) -> Path:
        """Write the skeletal catalog and return its path.

        Raises:
            CatalogWriteError: If the file cannot be written
        """
        return self._write(
            interface,
            self.catalog_path(interface, SKELETAL_FILE_EXTENSION),
            self.render_skeletal(interface),
        )

    def _write(self, interface: MessageInterface, path: Path, content: str) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            self.logger.error(
                "Cannot write translation catalog",
                interface=interface.qualified_name,
                path=str(path),
                error=str(e),
            )
            raise CatalogWriteError(
                f"Cannot write translation catalog {path.name}",
                details={"interface": interface.qualified_name, "path": str(path)},
            ) from e

        self.logger.debug(
            "Translation catalog written",
            interface=interface.qualified_name,
            path=str(path),
        )
        return path

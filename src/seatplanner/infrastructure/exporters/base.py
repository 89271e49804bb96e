"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from seatplanner.application.dtos import ProjectOutput


logger = logging.getLogger(__name__)


class UnsupportedFormatError(KeyError):
    """Raised when no exporter is registered for a format name.

    Attributes:
        format_name: The requested format.
        available: Formats that are registered.
    """

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        self.message = (
            f"No exporter registered for format '{format_name}'. "
            f"Available formats: {', '.join(available) or 'none'}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a ProjectOutput to a specific format. Each exporter
    must define its format name and file extension, and implement at least
    the export method.

    Attributes:
        format_name: Name of the export format (e.g., "svg", "json").
        file_extension: File extension without leading dot (e.g., "svg").
        media_type: MIME type used when serving the export over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, output: ProjectOutput, path: Path) -> None:
        """Export a project to a file.

        Args:
            output: The project output to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: ProjectOutput) -> str:
        """Export a project as a string.

        Args:
            output: The project output to export.

        Returns:
            String representation of the exported data.
        """
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("csv")
        class CsvExporter:
            format_name = "csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class.

        Args:
            format_name: The format name to register (e.g., "svg", "dxf").

        Returns:
            Decorator function that registers the class.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            UnsupportedFormatError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            raise UnsupportedFormatError(format_name, cls.available_formats())
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of all registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Manages export operations to multiple formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                        Will be created if it doesn't exist.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: ProjectOutput,
        project_name: str = "seating",
    ) -> dict[str, Path]:
        """Export a project to multiple formats.

        Args:
            formats: List of format names to export (e.g., ["svg", "csv"]).
            output: The project output to export.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            UnsupportedFormatError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Resolve every exporter first so an unknown format writes nothing
        exporter_classes = [ExporterRegistry.get(name) for name in formats]

        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in zip(formats, exporter_classes):
            exporter = exporter_class()

            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: ProjectOutput,
        project_name: str = "seating",
    ) -> Path:
        """Export a project to a single format."""
        results = self.export_all([format_name], output, project_name)
        return results[format_name]

"""
Output strategies for generated code.

Decides between one concatenated file and one file per entity, drives the
generator over every entity and writes the results to disk.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ...logging_config import get_logger
from .config import ConfigError, GeneratorConfig, OutputConfig, OutputMode
from .generator import CodeGenerator, GeneratorError
from .schema import EnumEntity, InterfaceEntity

logger = get_logger(__name__)


@dataclass
class EmitResult:
    """Summary of one emission run."""

    mode: OutputMode
    destination: str
    interface_count: int
    enum_count: int
    files: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    success: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form printed by the command line."""
        result = {
            "success": self.success,
            "mode": self.mode.value,
            "destination": self.destination,
            "interfaceCount": self.interface_count,
            "enumCount": self.enum_count,
        }
        if self.mode == OutputMode.FOLDER:
            result["files"] = list(self.files)
        if self.warnings:
            result["warnings"] = list(self.warnings)
        return result


def resolve_mode(
    destination: Union[str, Path],
    output_config: Optional[OutputConfig] = None,
    override: Optional[Union[str, OutputMode]] = None,
) -> OutputMode:
    """
    Decide the concrete output mode.

    An explicit override wins over the configured mode. ``auto`` looks at the
    destination: an existing directory means folder, an existing file means
    single, and a missing path means single only when it carries the
    configured file extension.

    Args:
        destination: Output file or directory
        output_config: Output settings (defaults if omitted)
        override: Mode requested by the caller

    Returns:
        OutputMode.SINGLE or OutputMode.FOLDER
    """
    output_config = output_config or OutputConfig()

    if override is None:
        mode = output_config.mode
    elif isinstance(override, OutputMode):
        mode = override
    else:
        try:
            mode = OutputMode(override)
        except ValueError:
            raise ConfigError(f"Invalid output mode: {override!r}")

    if mode != OutputMode.AUTO:
        return mode

    path = Path(destination)
    if path.exists():
        return OutputMode.FOLDER if path.is_dir() else OutputMode.SINGLE

    extension = output_config.file_extension
    if extension and str(path).endswith(extension):
        return OutputMode.SINGLE
    return OutputMode.FOLDER


def emit_single(
    generator: CodeGenerator,
    interfaces: Sequence[InterfaceEntity],
    enums: Sequence[EnumEntity],
    destination: Path,
) -> List[str]:
    """Write every entity into one file."""
    content = generator.render_single_file(interfaces, enums)

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", destination)
    return [destination.name]


def emit_folder(
    generator: CodeGenerator,
    interfaces: Sequence[InterfaceEntity],
    enums: Sequence[EnumEntity],
    destination: Path,
) -> List[str]:
    """
    Write one file per entity plus an optional index file.

    Files written before a failing write stay on disk.

    Returns:
        Generated file names, the index file last

    Raises:
        GeneratorError: If a model file would be overwritten by the index file
    """
    output_config = generator.config.output
    entities = [*interfaces, *enums]

    if output_config.generate_index:
        index_name = output_config.index_file_name
        for entity in entities:
            if generator.file_name(entity.name) == index_name:
                raise GeneratorError(
                    f"Model '{entity.name}' would be overwritten by the index file "
                    f"{index_name}; rename the schema or set output.indexFileName"
                )

    destination.mkdir(parents=True, exist_ok=True)
    known_names = [entity.name for entity in entities]
    files = []

    for entity in entities:
        file_name = generator.file_name(entity.name)
        content = generator.render_entity(entity, known_names)
        (destination / file_name).write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", destination / file_name)
        files.append(file_name)

    if output_config.generate_index and files:
        modules = [
            _strip_extension(name, generator.file_extension) for name in sorted(files)
        ]
        (destination / index_name).write_text(
            generator.render_index(modules), encoding="utf-8"
        )
        files.append(index_name)

    logger.info("Wrote %d files to %s", len(files), destination)
    return files


def emit(
    interfaces: Sequence[InterfaceEntity],
    enums: Sequence[EnumEntity],
    destination: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
    mode: Optional[Union[str, OutputMode]] = None,
    generator: Optional[CodeGenerator] = None,
) -> EmitResult:
    """
    Emit entities in single-file or folder layout.

    Args:
        interfaces: Interface entities in emission order
        enums: Enum entities in emission order
        destination: Output file (single) or directory (folder)
        config: Generator configuration
        mode: Explicit mode overriding the configured one
        generator: Generator to render with, looked up by language if omitted

    Returns:
        EmitResult describing what was written
    """
    config = config or GeneratorConfig()
    if generator is None:
        from ..registry import get_generator

        generator = get_generator(config.language, config)

    resolved = resolve_mode(destination, config.output, mode)
    path = Path(destination)
    logger.info("Emitting %s output to %s", resolved.value, path)

    warnings = generator.validate_entities([*interfaces, *enums])

    if resolved == OutputMode.FOLDER:
        files = emit_folder(generator, interfaces, enums, path)
    else:
        files = emit_single(generator, interfaces, enums, path)

    return EmitResult(
        mode=resolved,
        destination=str(destination),
        interface_count=len(interfaces),
        enum_count=len(enums),
        files=files,
        warnings=warnings,
    )


def _strip_extension(file_name: str, extension: str) -> str:
    if extension and file_name.endswith(extension):
        return file_name[: -len(extension)]
    return file_name

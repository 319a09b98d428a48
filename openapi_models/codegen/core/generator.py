"""
Rendering contract shared by every target language.

A generator turns normalized entities into declaration text: one entity per
file with its imports, or all entities in one file. Writing files is left
to the output module.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .config import GeneratorConfig
from .references import resolve_imports
from .schema import EnumEntity, InterfaceEntity, ModelEntity
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Raised when entities cannot be rendered for the target language."""

    pass


class CodeGenerator(ABC):
    """Renders interfaces, enums, imports and index files for one language."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Registry name of the target language."""
        pass

    @property
    def file_extension(self) -> str:
        """Extension of generated files, from the output configuration."""
        return self.config.output.file_extension

    def get_template_directory(self) -> Optional[Path]:
        """Bundled templates of the language; None means in-memory only."""
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        return self._engine

    @abstractmethod
    def render_interface(self, entity: InterfaceEntity) -> str:
        """Render the declaration of one interface."""
        pass

    @abstractmethod
    def render_enum(self, entity: EnumEntity) -> str:
        """Render the declaration of one enum."""
        pass

    @abstractmethod
    def render_imports(self, names: Sequence[str]) -> str:
        """Render import statements for the given entity names."""
        pass

    @abstractmethod
    def render_header(self) -> str:
        """Render the generated-file warning header."""
        pass

    @abstractmethod
    def render_index(self, modules: Sequence[str]) -> str:
        """Render a barrel file re-exporting the given modules."""
        pass

    def module_path(self, name: str) -> str:
        """Import path of the file generated for an entity."""
        return f"./{name}"

    def file_name(self, name: str) -> str:
        """File name generated for an entity."""
        return f"{name}{self.file_extension}"

    def render_declaration(self, entity: ModelEntity) -> str:
        """Render an entity's declaration without imports."""
        if isinstance(entity, EnumEntity):
            return self.render_enum(entity)
        return self.render_interface(entity)

    def render_entity(
        self, entity: ModelEntity, known_names: Optional[Iterable[str]] = None
    ) -> str:
        """
        Render one entity as a standalone file.

        Args:
            entity: Entity to render
            known_names: All generated entity names; enables imports when given

        Returns:
            File content, ending with a single newline
        """
        parts = []

        if known_names is not None:
            imports = resolve_imports(entity, known_names)
            if imports:
                parts.append(self.render_imports(imports))

        if self.config.output.add_warning_header:
            parts.append(self.render_header())

        parts.append(self.render_declaration(entity))
        return self.format_code(_join_blocks(parts)) + "\n"

    def render_single_file(
        self, interfaces: Sequence[InterfaceEntity], enums: Sequence[EnumEntity]
    ) -> str:
        """
        Render every entity into one file without imports.

        Returns:
            File content with trailing whitespace trimmed
        """
        parts = []
        if self.config.output.add_warning_header:
            parts.append(self.render_header())

        parts.extend(self.render_interface(entity) for entity in interfaces)
        parts.extend(self.render_enum(entity) for entity in enums)
        return self.format_code(_join_blocks(parts))

    def validate_entities(self, entities: Sequence[ModelEntity]) -> List[str]:
        """Warnings about names the target language would reject."""
        return []

    def format_code(self, code: str) -> str:
        """Drop trailing whitespace on every line and blank lines at both ends."""
        lines = [line.rstrip() for line in code.split("\n")]
        return "\n".join(lines).strip()

    def render_template(self, template_name: str, context: dict) -> str:
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.template_engine.template_exists(template_name)


def _join_blocks(blocks: Iterable[str]) -> str:
    """Join rendered blocks with one blank line between them."""
    return "\n\n".join(block.strip("\n") for block in blocks if block.strip())

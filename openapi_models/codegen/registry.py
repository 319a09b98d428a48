"""
Target language lookup for model generation.

``GeneratorConfig.language`` names the language declarations are rendered
in; the registry turns that name (or one of its aliases) into a generator.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from .core.config import GeneratorConfig
from .core.generator import CodeGenerator


class RegistryError(Exception):
    """Raised for unknown target languages and invalid registrations."""

    pass


@dataclass
class _Target:
    name: str
    generator_class: Type[CodeGenerator]
    aliases: List[str] = field(default_factory=list)


class GeneratorRegistry:
    """Known target languages, keyed by lower-cased name."""

    def __init__(self):
        self._targets: Dict[str, _Target] = {}
        self._alias_index: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Make a generator available under a language name.

        A second registration of the same name is ignored unless ``replace``
        is set.

        Args:
            language: Target language name, e.g. 'typescript'
            generator_class: CodeGenerator subclass rendering that language
            aliases: Extra names resolving to the same language
            replace: Overwrite an existing registration and its aliases

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, CodeGenerator)
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        key = language.lower()
        if key in self._targets and not replace:
            return

        alias_keys = [alias.lower() for alias in aliases or [] if alias.lower() != key]
        if not replace:
            for alias in alias_keys:
                self._check_alias(alias, key)

        self._targets[key] = _Target(key, generator_class, alias_keys)
        for alias in alias_keys:
            self._alias_index[alias] = key

    def _check_alias(self, alias: str, key: str):
        if alias in self._targets:
            raise RegistryError(f"Alias '{alias}' conflicts with existing primary language")
        owner = self._alias_index.get(alias)
        if owner is not None and owner != key:
            raise RegistryError(f"Alias '{alias}' already points to '{owner}'")

    def _resolve(self, language: str) -> Optional[_Target]:
        key = language.lower()
        return self._targets.get(self._alias_index.get(key, key))

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Look up the generator class for a language name or alias.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        target = self._resolve(language)
        if target is None:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return target.generator_class

    def create_generator(
        self, language: str, config: Optional[GeneratorConfig] = None
    ) -> CodeGenerator:
        """Instantiate the generator for a language with the given config."""
        return self.get_generator_class(language)(config)

    def list_languages(self) -> List[str]:
        return sorted(self._targets)

    def get_aliases_for_language(self, language: str) -> List[str]:
        target = self._targets.get(language.lower())
        return sorted(target.aliases) if target else []

    def is_supported(self, language: str) -> bool:
        return self._resolve(language) is not None


_default_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Registry with the built-in languages, built on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = GeneratorRegistry()
        _auto_register_generators(_default_registry)
    return _default_registry


def _auto_register_generators(registry: GeneratorRegistry):
    # Imported here, the language package depends on core modules
    from .languages.typescript import TypeScriptGenerator

    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])


def get_generator(
    language: str, config: Optional[GeneratorConfig] = None
) -> CodeGenerator:
    """
    Create a generator for ``language`` from the built-in registry.

    Args:
        language: Language name or alias, usually ``config.language``
        config: Configuration handed to the generator

    Returns:
        Generator instance
    """
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()

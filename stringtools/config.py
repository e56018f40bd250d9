"""
Process-wide defaults for the string tools and their YAML loader.

The defaults are read at call time. Every public function also accepts a
``settings`` argument, which overrides them for that call only.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Union

import yaml

from stringtools.exceptions import InvalidPatternError, SettingsValidationError, ValidationError
from stringtools.patterns import DEFAULT_BLANK, DEFAULT_NAME_PATTERN, compile_pattern


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledSettings:
    """Compiled forms of the pattern fields of a Settings instance."""
    blank_run: Pattern      # one-or-more blank-class characters
    all_blank: Pattern      # whole string consists of blank-class characters
    name: Pattern           # variable-name grammar


@dataclass(frozen=True)
class Settings:
    """
    Configurable defaults.

    Attributes:
        blank: Character class of blank characters
        thread: Separator placed between non-blank stitched items
        list_separator: Separator used when flattening sequences and mappings
        name_pattern: Variable-name grammar used by substitution
    """
    blank: str = DEFAULT_BLANK
    thread: str = ' '
    list_separator: str = ' '
    name_pattern: str = DEFAULT_NAME_PATTERN
    _compiled: Dict[str, CompiledSettings] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    FIELDS = ('blank', 'thread', 'list_separator', 'name_pattern')
    PATTERN_FIELDS = ('blank', 'name_pattern')

    def validate(self) -> List[ValidationError]:
        """
        Validate field types and pattern syntax.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        for name in self.FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                errors.append(ValidationError(
                    f"'{name}' must be a string, got {type(value).__name__}", path=name
                ))
                continue
            if name in self.PATTERN_FIELDS:
                if not value:
                    errors.append(ValidationError(f"'{name}' must not be empty", path=name))
                    continue
                try:
                    compile_pattern(value, role=name)
                except InvalidPatternError as e:
                    errors.append(ValidationError(str(e), path=name))
        return errors

    def compiled(self) -> CompiledSettings:
        """
        Compile the pattern fields once per instance.

        Raises:
            InvalidPatternError: If a pattern field does not compile
        """
        cached = self._compiled.get('patterns')
        if cached is None:
            cached = CompiledSettings(
                blank_run=compile_pattern(f'(?:{self.blank})+', role='blank'),
                all_blank=compile_pattern(rf'\A(?:{self.blank})+\Z', role='blank'),
                name=compile_pattern(self.name_pattern, role='name_pattern'),
            )
            self._compiled['patterns'] = cached
        return cached

    def replace(self, **changes: Any) -> 'Settings':
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


_defaults = Settings()


def get_settings(override: Optional[Settings] = None) -> Settings:
    """Return ``override`` if given, otherwise the process-wide defaults."""
    if override is not None:
        return override
    return _defaults


def configure(**changes: Any) -> Settings:
    """
    Replace the process-wide defaults.

    Intended for start-up configuration; per-call overrides should pass
    ``settings=`` instead.

    Raises:
        SettingsValidationError: If the resulting settings are invalid
    """
    global _defaults
    unknown = sorted(set(changes) - set(Settings.FIELDS))
    if unknown:
        raise SettingsValidationError(
            [ValidationError(f"Unknown setting '{key}'", path=key) for key in unknown]
        )
    candidate = _defaults.replace(**changes)
    errors = candidate.validate()
    if errors:
        raise SettingsValidationError(errors)
    _defaults = candidate
    logger.debug(f"Configured defaults: {candidate}")
    return candidate


def reset_settings() -> Settings:
    """Restore the built-in defaults."""
    global _defaults
    _defaults = Settings()
    return _defaults


class SettingsLoader:
    """Loads settings from a YAML file with strict key validation."""

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, path: Union[str, Path]) -> Settings:
        """Load and validate a settings file."""
        self.errors = []
        path = Path(path)
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load settings: {e}")
            self._raise_validation_errors()

        if data is None:
            data = {}
        if not isinstance(data, dict):
            self._add_error("Settings must be a YAML object/dictionary")
            self._raise_validation_errors()

        for key in data:
            if key not in Settings.FIELDS:
                self._add_error(f"Unknown setting '{key}'", path=str(key))

        if self.errors:
            self._raise_validation_errors()

        settings = Settings(**data)
        self.errors.extend(settings.validate())
        if self.errors:
            self._raise_validation_errors()

        logger.info(f"Loaded settings from {path}")
        return settings

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message, path=path))

    def _raise_validation_errors(self):
        raise SettingsValidationError(self.errors)


def load_settings(path: Union[str, Path]) -> Settings:
    """Load settings from a YAML file. See SettingsLoader."""
    return SettingsLoader().load(path)

"""
Settings validation system for mod-config.
"""

import logging
import os
from typing import List, Optional, TYPE_CHECKING

from ..options.types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings
    from ..options.registry import OptionRegistry

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self, registry: Optional["OptionRegistry"] = None) -> ValidationResult:
        """Validate current configuration.

        Problems with the data directory only warn, since the settings store
        falls back to an empty state when it cannot read its file. Option
        declarations that cannot be rendered are reported as errors.
        """
        errors: List[str] = []
        warnings: List[str] = []

        data_dir = self.settings.data_dir
        if data_dir.exists():
            if not data_dir.is_dir():
                warnings.append(f"Data path is not a directory: {data_dir}")
            elif not os.access(data_dir, os.W_OK):
                warnings.append(f"Data directory is not writable: {data_dir}")
        else:
            logger.debug(f"Data directory {data_dir} will be created on first save")

        if registry is not None:
            registry_result = registry.validate()
            errors.extend(registry_result.errors)
            warnings.extend(registry_result.warnings)

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )

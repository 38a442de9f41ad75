"""Data models for Genetics.

This package contains all Pydantic models used across the system:
- traits.py: Catalog entries, colors, morph presets, the trait catalog
- character.py: Per-character input context
- appearance.py: Tint operations, morph blends, generated appearances
- validation.py: Validation issues/results and error types
"""

from .traits import (
    # Colors
    LinearColor,
    TemplateColor,
    # Traits
    TraitEntry,
    TintTarget,
    MorphPreset,
    GenderCatalog,
    TraitCatalog,
    # Field names
    REQUIRED_HEAD_PART_TYPES,
    FACIAL_HAIR,
    REGION_FIELDS,
    BODY_VALUE_FIELDS,
)
from .character import Gender, CharacterContext
from .appearance import (
    NO_TEMPLATE_COLOR,
    TintType,
    TintOperation,
    MorphBlend,
    Appearance,
)
from .validation import (
    Severity,
    ValidationIssue,
    ValidationResult,
    GeneticsError,
    CatalogValidationError,
    ConfigError,
)

__all__ = [
    # Colors
    "LinearColor",
    "TemplateColor",
    # Traits
    "TraitEntry",
    "TintTarget",
    "MorphPreset",
    "GenderCatalog",
    "TraitCatalog",
    "REQUIRED_HEAD_PART_TYPES",
    "FACIAL_HAIR",
    "REGION_FIELDS",
    "BODY_VALUE_FIELDS",
    # Character
    "Gender",
    "CharacterContext",
    # Output
    "NO_TEMPLATE_COLOR",
    "TintType",
    "TintOperation",
    "MorphBlend",
    "Appearance",
    # Validation
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "GeneticsError",
    "CatalogValidationError",
    "ConfigError",
]

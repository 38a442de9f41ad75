"""Catalog validation.

Checks that every category the generator treats as mandatory is present
before any character is processed. All checks are structural; nothing is
sampled.

- ERROR: blocks generation (missing eyebrows, skin swatches, required
  head parts, lipstick when makeup is on)
- WARNING: generation proceeds (too few morph presets, lipstick colors
  that cannot be parsed)
"""

import logging

from ..core.color import parse_color
from ..core.config import GeneticsConfig
from ..core.models import (
    REQUIRED_HEAD_PART_TYPES,
    CatalogValidationError,
    GenderCatalog,
    Severity,
    TintTarget,
    TraitCatalog,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def _check_gender(
    gender: str,
    data: GenderCatalog,
    config: GeneticsConfig,
    result: ValidationResult,
) -> None:
    for part_type in REQUIRED_HEAD_PART_TYPES:
        if not data.parts(part_type):
            result.add(
                Severity.ERROR,
                "missing_head_parts",
                f"{gender}/head_parts/{part_type}",
                f"Couldn't find any {part_type}!",
            )

    if not data.traits(TintTarget.EYEBROWS):
        result.add(
            Severity.ERROR,
            "missing_tints",
            f"{gender}/tints/Eyebrows",
            "No eyebrows found!",
        )

    skin = data.traits(TintTarget.SKIN)
    if not skin:
        result.add(
            Severity.ERROR,
            "missing_tints",
            f"{gender}/tints/Skin",
            "No skin tints found!",
        )
    elif len(skin[0].colors or ()) < 2:
        result.add(
            Severity.ERROR,
            "missing_tints",
            f"{gender}/tints/Skin",
            f"Skin tint {skin[0].index} needs at least 2 template colors",
        )

    if gender == "female" and config.makeup.apply_foundation and config.makeup.apply_makeup:
        if not data.traits(TintTarget.LIPSTICK):
            result.add(
                Severity.ERROR,
                "missing_tints",
                f"{gender}/tints/Lipstick",
                "Makeup is enabled but no lipstick tint was found",
            )

    if config.generation.use_morphs and len(data.presets) < 2:
        result.add(
            Severity.WARNING,
            "few_presets",
            f"{gender}/presets",
            f"Found {len(data.presets)} presets, morphs need at least 2 and will be skipped",
        )


def _check_lipstick_colors(config: GeneticsConfig, result: ValidationResult) -> None:
    """Report unparseable lipstick colors once instead of once per character."""
    if not (config.makeup.apply_foundation and config.makeup.apply_makeup):
        return
    for key in ("pale_lipstick_color", "dark_lipstick_color"):
        warnings: list[str] = []
        if parse_color(getattr(config.makeup, key), warnings.append) is None:
            result.add(
                Severity.WARNING,
                "unrecognized_color",
                f"makeup/{key}",
                f"{warnings[0]}, lipstick will be skipped",
            )


def validate_catalog(catalog: TraitCatalog, config: GeneticsConfig) -> ValidationResult:
    """Check a catalog against the run configuration.

    Args:
        catalog: The catalog to validate
        config: Run configuration (makeup and morph settings add requirements)

    Returns:
        ValidationResult with errors and warnings

    Example:
        >>> catalog, build_result = load_catalog(Path("catalog.yaml"))
        >>> result = validate_catalog(catalog, GeneticsConfig())
        >>> [issue.location for issue in result.errors]
        ['male/tints/Eyebrows']
    """
    result = ValidationResult()
    _check_gender("female", catalog.female, config, result)
    _check_gender("male", catalog.male, config, result)
    _check_lipstick_colors(config, result)
    return result


def ensure_valid_catalog(catalog: TraitCatalog, config: GeneticsConfig) -> ValidationResult:
    """Validate and raise if the catalog cannot be used.

    Raises:
        CatalogValidationError: A mandatory category is empty.
    """
    result = validate_catalog(catalog, config)
    for issue in result.warnings:
        logger.warning(str(issue))
    if not result.valid:
        raise CatalogValidationError(result)
    return result

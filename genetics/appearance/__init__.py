"""Appearance generation for Genetics.

Pipeline per run:
    Step 0: load_catalog() / build_catalog() - Sort raw traits by target
    Step 1: validate_catalog() - Fail fast on missing mandatory traits
    Step 2: generate_population() - One seeded pass per character:
        select_head_parts() -> select_hair_color() -> blend_morphs()
        -> compose_tints()
    Step 3: Sink.write() - Hand each appearance to the caller
"""

from .classifier import classify_tint_option
from .catalog import build_catalog, load_catalog, load_characters, RawCatalog
from .validator import validate_catalog, ensure_valid_catalog
from .headparts import select_head_parts, select_hair_color
from .morphs import blend_morphs
from .tints import TintSettings, compose_tints
from .generator import GenerationResult, generate_appearance, generate_population
from .sink import Sink, MemorySink, JsonSink

__all__ = [
    # Catalog
    "classify_tint_option",
    "build_catalog",
    "load_catalog",
    "load_characters",
    "RawCatalog",
    "validate_catalog",
    "ensure_valid_catalog",
    # Generation
    "select_head_parts",
    "select_hair_color",
    "blend_morphs",
    "TintSettings",
    "compose_tints",
    "GenerationResult",
    "generate_appearance",
    "generate_population",
    # Output
    "Sink",
    "MemorySink",
    "JsonSink",
]

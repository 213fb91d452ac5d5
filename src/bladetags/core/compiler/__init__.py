"""Component tag compiler.

Rewrites custom HTML-like component tags into renderer directives:

- base: pass interface, context and pipeline
- attributes: attribute text parsing
- directives: directive syntax and emission
- slots, tags: the four rewrite passes
- engine: the per-component fold (Compiler)
"""
from __future__ import annotations

from .attributes import AttributeParser, parse_attributes
from .base import ContentTransformer, TransformContext, TransformerPipeline
from .directives import DirectiveEmitter, DirectiveSyntax
from .engine import Compiler, compile_template, default_pipeline
from .report import CompileReport, ComponentPassReport
from .slots import SlotTransformer
from .tags import (
    ClosingTagTransformer,
    OpeningTagTransformer,
    SelfClosingTagTransformer,
    build_tag_pattern,
)

__all__ = [
    # Base classes
    "ContentTransformer",
    "TransformContext",
    "TransformerPipeline",
    # Attributes
    "AttributeParser",
    "parse_attributes",
    # Directives
    "DirectiveEmitter",
    "DirectiveSyntax",
    # Passes
    "SlotTransformer",
    "SelfClosingTagTransformer",
    "OpeningTagTransformer",
    "ClosingTagTransformer",
    "build_tag_pattern",
    # Engine
    "Compiler",
    "compile_template",
    "default_pipeline",
    "CompileReport",
    "ComponentPassReport",
]

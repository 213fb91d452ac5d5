"""Core of bladetags: component registry, compiler and configuration."""
from __future__ import annotations

from .components import Component, ComponentRegistry
from .compiler import Compiler, CompileReport, DirectiveSyntax, compile_template

__all__ = [
    "Component",
    "ComponentRegistry",
    "Compiler",
    "CompileReport",
    "DirectiveSyntax",
    "compile_template",
]

"""
Integrity Zome Scaffold Generator

A Jinja2-based generator that produces Holochain integrity zome crates
from zome definitions.
"""

from .file_tree import ScDirectory, ScFile, ScNodeType
from .generator import ZomeCodeGenerator, ZomeTemplateEngine, render_lib_rs
from .parser import EntryDefinition, TypeDefinition, ZomeDefinition, ZomeDefinitionParser

__version__ = "1.0.0"

__all__ = [
    "EntryDefinition",
    "ScDirectory",
    "ScFile",
    "ScNodeType",
    "TypeDefinition",
    "ZomeCodeGenerator",
    "ZomeDefinition",
    "ZomeDefinitionParser",
    "ZomeTemplateEngine",
    "render_lib_rs",
]

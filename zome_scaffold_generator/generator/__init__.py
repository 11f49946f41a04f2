"""
Zome Code Generator Module

This module provides Jinja2-based code generation for Holochain integrity
zomes from zome definitions.
"""

from .template_engine import ZomeCodeGenerator, ZomeTemplateEngine, render_lib_rs

__all__ = [
    "ZomeCodeGenerator",
    "ZomeTemplateEngine",
    "render_lib_rs",
]

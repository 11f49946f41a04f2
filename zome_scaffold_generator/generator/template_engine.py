"""
Integrity Zome Template Engine

This module uses Jinja2 templates to generate the source of a Holochain
integrity zome crate from a parsed zome definition.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from zome_scaffold_generator.errors import GeneratedFileConflictError
from zome_scaffold_generator.file_tree import ScDirectory, ScFile, flatten_file_tree
from zome_scaffold_generator.generator.filters import (
    FILTERS,
    entry_variant,
    merge_strings,
    mod_declaration,
    use_declaration,
)
from zome_scaffold_generator.parser.zome_parser import EntryDefinition, ZomeDefinition
from zome_scaffold_generator.versions import HOLOCHAIN_DETERMINISTIC_INTEGRITY_VERSION, SERDE_VERSION

LIB_RS_TEMPLATE = "integrity/lib.rs.j2"
ENTRY_DEF_RS_TEMPLATE = "integrity/entry_def.rs.j2"
CARGO_TOML_TEMPLATE = "integrity/Cargo.toml.j2"


class ZomeTemplateEngine:
    """Template engine for generating integrity zome sources."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the template engine."""
        if template_dir is None:
            current_dir = Path(__file__).parent
            template_dir = current_dir.parent / "templates"

        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters.update(FILTERS)

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context."""
        template = self.env.get_template(template_name)
        return template.render(**context)


class ZomeCodeGenerator:
    """Main code generator for integrity zome crates."""

    def __init__(self, template_engine: ZomeTemplateEngine | None = None) -> None:
        """Initialize the code generator."""
        self.template_engine = template_engine or ZomeTemplateEngine()

    def render_lib_rs(self, zome: ZomeDefinition) -> ScFile:
        """Render the zome's ``lib.rs``.

        Entry types keep the order of ``zome.entry_defs``; names are neither
        validated nor deduplicated here.
        """
        names = [entry_def.type_definition.name for entry_def in zome.entry_defs]
        context = {
            "mod_declarations": merge_strings(mod_declaration(name) for name in names),
            "use_declarations": merge_strings(use_declaration(name) for name in names),
            "entry_variants": merge_strings(entry_variant(name) for name in names),
        }
        return ScFile(content=self.template_engine.render_template(LIB_RS_TEMPLATE, context))

    def render_entry_def_rs(self, entry_def: EntryDefinition) -> ScFile:
        """Render the sub-module holding a single entry type's struct."""
        context = {"type_definition": entry_def.type_definition}
        return ScFile(content=self.template_engine.render_template(ENTRY_DEF_RS_TEMPLATE, context))

    def render_cargo_toml(self, zome: ZomeDefinition) -> ScFile:
        """Render the crate manifest."""
        context = {
            "crate_name": zome.crate_name,
            "integrity_version": HOLOCHAIN_DETERMINISTIC_INTEGRITY_VERSION,
            "serde_version": SERDE_VERSION,
        }
        return ScFile(content=self.template_engine.render_template(CARGO_TOML_TEMPLATE, context))

    def generate_zome(self, zome: ZomeDefinition) -> ScDirectory:
        """Generate the complete crate tree for an integrity zome.

        Raises:
            GeneratedFileConflictError: If an entry module would replace
                ``lib.rs`` or another entry's module.
        """
        src_children: dict[str, ScFile | ScDirectory] = {"lib.rs": self.render_lib_rs(zome)}
        for entry_def in zome.entry_defs:
            filename = f"{entry_def.type_definition.rust_module_name}.rs"
            if filename in src_children:
                raise GeneratedFileConflictError(f"src/{filename}")
            src_children[filename] = self.render_entry_def_rs(entry_def)

        return ScDirectory(
            children={
                "Cargo.toml": self.render_cargo_toml(zome),
                "src": ScDirectory(children=src_children),
            }
        )

    def generate_files(self, zome: ZomeDefinition, output_dir: Path) -> dict[Path, str]:
        """Generate the crate and map it onto paths under ``output_dir``."""
        return flatten_file_tree(self.generate_zome(zome), Path(output_dir))


def render_lib_rs(zome: ZomeDefinition) -> ScFile:
    """Render ``lib.rs`` for ``zome`` with the bundled templates."""
    return ZomeCodeGenerator().render_lib_rs(zome)

"""Format a parsed data model into summary and compound tree outputs."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from doxygen2md.data_model import DataModel
from doxygen2md.model import CompoundDef
from doxygen2md.schemas import ParseReport


def format_report(data_model: DataModel) -> ParseReport:
    """Create the summary and compound tree of a parse run."""
    compound_defs = data_model.compound_defs
    tree = "Compounds:\n" + _create_compounds_tree(compound_defs)
    by_kind = Counter(compound_def.kind for compound_def in compound_defs)
    images = data_model.context.image_names()

    summary_lines = []
    if data_model.doxyfile is not None:
        project_name = data_model.doxyfile.get_value("PROJECT_NAME")
        project_number = data_model.doxyfile.get_value("PROJECT_NUMBER")
        if project_name:
            summary_lines.append(f"Project: {project_name}")
        if project_number:
            summary_lines.append(f"Version: {project_number}")
    summary_lines.append(f"Files parsed: {data_model.parsed_files_counter}")
    summary_lines.append(f"Compounds: {len(compound_defs)}")
    summary_lines.append(f"Members: {count_members(compound_defs)}")
    summary_lines.append(f"Images: {len(images)}")

    return ParseReport(
        summary="\n".join(summary_lines),
        compounds_tree=tree,
        parsed_files=data_model.parsed_files_counter,
        compounds_by_kind=dict(sorted(by_kind.items())),
        images=images,
    )


def count_members(compound_defs: Iterable[CompoundDef]) -> int:
    """Count the memberdefs defined in the given compounds."""
    total = 0
    for compound_def in compound_defs:
        for section_def in compound_def.section_defs or []:
            total += len(section_def.member_defs or [])
    return total


def _create_compounds_tree(compound_defs: list[CompoundDef]) -> str:
    by_kind: dict[str, list[CompoundDef]] = {}
    for compound_def in compound_defs:
        by_kind.setdefault(compound_def.kind, []).append(compound_def)

    lines: list[str] = []
    for kind in sorted(by_kind):
        lines.append(kind)
        for compound_def in by_kind[kind]:
            lines.append(" " * 4 + (compound_def.compound_name or compound_def.id))
            for section_def in compound_def.section_defs or []:
                for member_def in section_def.member_defs or []:
                    lines.append(" " * 8 + member_def.name)
    return "\n".join(lines)

"""Structured unpacking report helpers."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional


@dataclass
class ModuleReport:
    id: int
    name: str
    identifiers_renamed: int = 0
    requires_rewritten: int = 0
    requires_unresolved: int = 0
    path: Optional[str] = None
    written: bool = False
    error: Optional[str] = None


@dataclass
class UnbundleReport:
    """Summarises a single unpacking run."""

    origin: str = ""
    wrapper_found: bool = False
    module_count: int = 0
    output_dir: Optional[str] = None
    modules: List[ModuleReport] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def failed_modules(self) -> List[ModuleReport]:
        return [module for module in self.modules if module.error]

    def to_text(self) -> str:
        """Format the report as a human-readable summary."""

        lines: List[str] = []
        lines.append(f"Input: {self.origin or '<unknown>'}")
        lines.append("Webpack wrapper: " + ("found" if self.wrapper_found else "not found"))
        lines.append(f"Modules: {self.module_count}")
        if self.output_dir:
            lines.append(f"Output directory: {self.output_dir}")
        rewritten = sum(module.requires_rewritten for module in self.modules)
        unresolved = sum(module.requires_unresolved for module in self.modules)
        lines.append(f"require() calls rewritten: {rewritten} (unresolved: {unresolved})")
        failed = self.failed_modules
        if failed:
            lines.append("Failed modules: " + ", ".join(module.name for module in failed))
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)
        if self.errors:
            lines.append("Errors:")
            lines.extend(f"  - {error}" for error in self.errors)
        return "\n".join(lines)

    def to_json(self) -> Dict[str, object]:
        return asdict(self)


__all__ = ["ModuleReport", "UnbundleReport"]

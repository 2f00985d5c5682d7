"""Orchestration of a complete unpacking run.

``parse -> locate -> extract -> beautify -> write``; each stage is a plain
function so tests and callers can stop after any of them.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .codegen import CodeGenerator
from .exceptions import WrapperNotFoundError
from .extractor import ModuleTable, build_module_table
from .io.loader import BundleSource
from .io.writer import WriteResult, write_module
from .js_ast import Node
from .locator import find_webpack_expression
from .parser import parse_bundle
from .pretty.beautify import DEFAULT_INDENT_SIZE, beautify_module
from .report import ModuleReport, UnbundleReport

LOG = logging.getLogger(__name__)

TRACE_LOGGER_NAME = "unbundler.trace"


@dataclass
class UnbundleOptions:
    """Settings for one run, usually built from command line flags."""

    output_dir: Path = field(default_factory=Path.cwd)
    beautify: bool = True
    indent_size: int = DEFAULT_INDENT_SIZE
    list_only: bool = False
    debug_log: Optional[Path] = None


@dataclass
class UnbundleResult:
    table: ModuleTable
    files: Dict[str, str]
    report: UnbundleReport
    writes: List[WriteResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(write.success for write in self.writes)


def locate_wrapper(tree: Node) -> Node:
    expression = find_webpack_expression(tree)
    if expression is None:
        raise WrapperNotFoundError("Could not find a Webpack wrapper!")
    return expression


def extract_modules(source: str) -> ModuleTable:
    """Parse ``source`` and return the rewritten, rendered module table."""

    expression = locate_wrapper(parse_bundle(source))
    generator = CodeGenerator(source=source)
    return build_module_table(expression, generator.generate)


@contextmanager
def trace_log(path: Path) -> Iterator[logging.Logger]:
    """Route the trace logger to a fresh file at ``path`` for one run."""

    path.parent.mkdir(parents=True, exist_ok=True)
    trace = logging.getLogger(TRACE_LOGGER_NAME)
    trace.setLevel(logging.DEBUG)
    trace.propagate = False
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))
    trace.addHandler(handler)
    try:
        yield trace
    finally:
        trace.removeHandler(handler)
        handler.close()


def _trace(table: ModuleTable, path: Path) -> None:
    with trace_log(path) as trace:
        for module in table:
            trace.debug(
                "module %d name=%s function=%s stats=%s error=%s",
                module.id,
                module.name,
                module.is_function_module,
                module.stats,
                module.error,
            )


def run(bundle: BundleSource, options: Optional[UnbundleOptions] = None) -> UnbundleResult:
    """Unpack ``bundle`` and write one file per module unless ``list_only``.

    Raises :class:`~unbundler.exceptions.BundleParseError` or
    :class:`~unbundler.exceptions.WrapperNotFoundError`; per-module render and
    write failures are recorded in the report instead.
    """

    options = options or UnbundleOptions()
    report = UnbundleReport(origin=bundle.origin, output_dir=str(options.output_dir))
    table = extract_modules(bundle.text)
    report.wrapper_found = True
    report.module_count = len(table)
    if options.debug_log is not None:
        _trace(table, options.debug_log)

    files = {
        name: beautify_module(source, indent_size=options.indent_size, enabled=options.beautify)
        for name, source in table.sources_by_name().items()
    }
    if len(files) < len(table):
        report.warnings.append(f"{len(table) - len(files)} module(s) share a name with a later module")

    writes: List[WriteResult] = []
    by_name: Dict[str, WriteResult] = {}
    if not options.list_only:
        for name, content in files.items():
            result = write_module(options.output_dir, name, content)
            writes.append(result)
            by_name[name] = result
            if not result.success:
                report.errors.append(f"{result.path}: {result.error}")

    owner_of = {module.name: module.id for module in table}
    for module in table:
        entry = ModuleReport(id=module.id, name=module.name, error=module.error, **module.stats)
        written = by_name.get(module.name)
        if written is not None and owner_of[module.name] == module.id:
            entry.path = str(written.path)
            entry.written = written.success
        report.modules.append(entry)
        if module.error:
            report.warnings.append(f"module {module.id} ({module.name}) rendered empty: {module.error}")

    LOG.info("unpacked %d modules from %s", len(table), bundle.origin)
    return UnbundleResult(table=table, files=files, report=report, writes=writes)


__all__ = ["UnbundleOptions", "UnbundleResult", "extract_modules", "locate_wrapper", "run", "trace_log"]

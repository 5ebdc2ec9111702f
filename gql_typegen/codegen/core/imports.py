"""
Import tracking for generated code.

Parses "module#Symbol" mapper strings into import descriptors and
aggregates the imports a run needs into grouped, deduplicated statements.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_EXPORT = "default"


@dataclass(frozen=True)
class ParsedMapper:
    """A configured type mapping, either inline or imported from a module."""

    type: str  # Expression used in generated code
    is_external: bool = False
    module: Optional[str] = None
    imported: Optional[str] = None  # None for a default import
    local: Optional[str] = None  # Local binding created by the import

    @property
    def is_default(self) -> bool:
        return self.is_external and self.imported is None


@dataclass(frozen=True)
class ImportRecord:
    """One imported binding."""

    module: str
    local: str
    imported: Optional[str] = None  # None marks the default export
    reexport: bool = False
    type_only: bool = False

    @property
    def key(self) -> Tuple[str, str]:
        return (self.module, self.imported or DEFAULT_EXPORT)


def is_external_mapper(value: Any) -> bool:
    """Check whether a configured mapping points at another module."""
    if isinstance(value, dict):
        return "module" in value
    return isinstance(value, str) and "#" in value


def parse_mapper(
    value: Union[str, Dict[str, Any]], type_name: str, suffix: str = ""
) -> ParsedMapper:
    """
    Parse a configured mapping.

    Supported forms:
        "Date"                          inline type expression
        "./scalars#default"             default import bound to type_name
        "./scalars#default as Foo"      default import bound to Foo
        "./scalars#Foo"                 named import
        "./scalars#Foo as Bar"          named import with alias
        "./scalars#NS.Foo"              namespace import, used as NS.Foo
        {"module": ..., "symbol": ..., "alias": ..., "default": bool}

    Args:
        value: Mapping from configuration
        type_name: Schema name of the mapped type (local name for defaults)
        suffix: Alias suffix appended to named imports without an alias

    Returns:
        ParsedMapper describing the mapping
    """
    if isinstance(value, dict):
        module = value["module"]
        if value.get("default"):
            local = value.get("alias") or type_name
            return ParsedMapper(type=local, is_external=True, module=module, local=local)
        symbol = value.get("symbol") or type_name
        identifier = f"{symbol} as {value['alias']}" if value.get("alias") else symbol
        return _parse_identifier(module, identifier, type_name, suffix)

    if not is_external_mapper(value):
        return ParsedMapper(type=str(value))

    module, _, identifier = value.rpartition("#")
    return _parse_identifier(module, identifier.strip(), type_name, suffix)


def _parse_identifier(
    module: str, identifier: str, type_name: str, suffix: str
) -> ParsedMapper:
    imported, _, alias = (part.strip() for part in identifier.partition(" as "))

    if imported == DEFAULT_EXPORT:
        local = alias or type_name
        return ParsedMapper(type=local, is_external=True, module=module, local=local)

    if "." in imported:
        # Namespace access: import the namespace, reference the member
        namespace = imported.split(".")[0]
        return ParsedMapper(
            type=imported,
            is_external=True,
            module=module,
            imported=namespace,
            local=namespace,
        )

    if not alias and suffix:
        alias = f"{imported}{suffix}"
    local = alias or imported
    return ParsedMapper(
        type=local, is_external=True, module=module, imported=imported, local=local
    )


class ImportAggregator:
    """Collects imports, aliases and re-exports in first-seen order."""

    def __init__(self, use_type_imports: bool = False):
        self.use_type_imports = use_type_imports
        self._records: Dict[Tuple[str, str], ImportRecord] = {}
        self._assignments: Dict[str, str] = {}
        self._reexports: List[str] = []

    def add(
        self,
        module: str,
        local: str,
        imported: Optional[str] = None,
        reexport: bool = False,
        type_only: Optional[bool] = None,
    ) -> ImportRecord:
        """
        Register an imported binding.

        Records are keyed by (module, imported name). Registering the same
        symbol again keeps its position and takes the newer alias.
        """
        if type_only is None:
            type_only = self.use_type_imports
        record = ImportRecord(
            module=module,
            local=local,
            imported=imported,
            reexport=reexport,
            type_only=type_only,
        )
        previous = self._records.get(record.key)
        if previous is not None:
            if previous.local != local:
                logger.debug(
                    "Import %s from %s re-aliased: %s -> %s",
                    record.key[1],
                    module,
                    previous.local,
                    local,
                )
            record = ImportRecord(
                module=module,
                local=local,
                imported=imported,
                reexport=reexport or previous.reexport,
                type_only=type_only and previous.type_only,
            )
        self._records[record.key] = record
        return record

    def add_mapper(self, mapper: ParsedMapper, type_only: Optional[bool] = None):
        """Register the import behind an external ParsedMapper."""
        if mapper.is_external:
            self.add(mapper.module, mapper.local, mapper.imported, type_only=type_only)

    def add_assignment(self, local: str, target: str):
        """Register an alias assignment such as `import Foo = NS.Foo;`."""
        self._assignments[local] = target

    def add_reexport(self, name: str):
        """Register a binding to pass through with `export { name };`."""
        if name not in self._reexports:
            self._reexports.append(name)

    @property
    def records(self) -> List[ImportRecord]:
        return list(self._records.values())

    def import_statements(self) -> List[str]:
        """Render one statement per (module, type-only) group."""
        groups: Dict[Tuple[str, bool], List[ImportRecord]] = {}
        for record in self._records.values():
            groups.setdefault((record.module, record.type_only), []).append(record)

        statements = []
        for (module, type_only), records in groups.items():
            keyword = "import type" if type_only else "import"
            defaults = [r.local for r in records if r.imported is None]
            named = [
                r.imported if r.imported == r.local else f"{r.imported} as {r.local}"
                for r in records
                if r.imported is not None
            ]
            bindings = ""
            if named:
                bindings = "{ " + ", ".join(named) + " }"

            if defaults and named and not type_only:
                statements.append(
                    f"{keyword} {defaults[0]}, {bindings} from '{module}';"
                )
            else:
                if defaults:
                    statements.append(f"{keyword} {defaults[0]} from '{module}';")
                if named:
                    statements.append(f"{keyword} {bindings} from '{module}';")
        return statements

    def assignment_statements(self) -> List[str]:
        return [
            f"import {local} = {target};" for local, target in self._assignments.items()
        ]

    def reexport_statements(self) -> List[str]:
        return [f"export {{ {name} }};" for name in self._reexports]

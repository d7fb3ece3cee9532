"""Document subpackage: pure operations on JSON values.

Re-exports the public API for the document module:
- get_at_path / set_at_path / delete_at_path: copy-on-write path access
- extract_strings / rebuild: string leaves out, translated leaves back in
- merge / unflatten / build_export: structure-preserving deep merge
- parse_document / dump_document / load_locales: import and export
"""

from json_tree_translator.document.extract import (
    ExtractionResult,
    extract_strings,
    rebuild,
)
from json_tree_translator.document.io import (
    dump_document,
    export_filename,
    load_locales,
    parse_document,
    write_export,
)
from json_tree_translator.document.merge import (
    DEFAULT_NAMESPACES,
    build_export,
    merge,
    unflatten,
)
from json_tree_translator.document.paths import (
    delete_at_path,
    get_at_path,
    has_path,
    set_at_path,
)

__all__ = [
    "DEFAULT_NAMESPACES",
    "ExtractionResult",
    "build_export",
    "delete_at_path",
    "dump_document",
    "export_filename",
    "extract_strings",
    "get_at_path",
    "has_path",
    "load_locales",
    "merge",
    "parse_document",
    "rebuild",
    "set_at_path",
    "unflatten",
    "write_export",
]

"""JSON tree translator: edit JSON documents by path, bulk-translate their strings."""

from __future__ import annotations

from json_tree_translator.api import (
    translate_json,
    translate_json_languages,
    translate_json_sync,
)
from json_tree_translator.batch import BatchTranslator
from json_tree_translator.cache import TranslationCache
from json_tree_translator.config import BatchConfig, ProviderConfig
from json_tree_translator.document import (
    build_export,
    delete_at_path,
    dump_document,
    extract_strings,
    get_at_path,
    merge,
    parse_document,
    rebuild,
    set_at_path,
)
from json_tree_translator.errors import ParseError, TranslationError
from json_tree_translator.job import JobStatus, TranslationJob
from json_tree_translator.provider import FallbackTranslationProvider
from json_tree_translator.tree import TreeNode, TreeProjector
from json_tree_translator.types import MISSING

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "BatchConfig",
    "BatchTranslator",
    "FallbackTranslationProvider",
    "JobStatus",
    "ParseError",
    "ProviderConfig",
    "TranslationCache",
    "TranslationError",
    "TranslationJob",
    "TreeNode",
    "TreeProjector",
    "build_export",
    "delete_at_path",
    "dump_document",
    "extract_strings",
    "get_at_path",
    "merge",
    "parse_document",
    "rebuild",
    "set_at_path",
    "translate_json",
    "translate_json_languages",
    "translate_json_sync",
]

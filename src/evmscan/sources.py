"""
Normalization of `getsourcecode` results.

A contract verified from a single flattened file comes back as one record
whose SourceCode is the file text. A contract verified through the Solidity
standard-json-input format comes back as the same single record, but its
SourceCode is the whole compiler input (language, sources, settings) as one
escaped string. Such records are split into one record per embedded file.
"""
import logging
import re
from dataclasses import replace
from typing import List, Sequence, Tuple

from .models import ContractSourceCode

logger = logging.getLogger(__name__)

# Exact ABI text the explorers return for a contract without verified source.
UNVERIFIED_ABI_SENTINEL = "Contract source code not verified"

STANDARD_JSON_INPUT_RE = re.compile(r'"language"\s*:\s*"solidity"', re.IGNORECASE)

# "<path>": { ... "content": "<escaped text>" ... }; other flat keys (keccak256,
# urls) may precede content. The content group stops at the first unescaped
# quote so one file never swallows the next.
SOURCE_FILE_RE = re.compile(
    r'"(?P<path>[^"\\]+)"\s*:\s*\{(?:[^{}"]|"(?:[^"\\]|\\.)*")*?'
    r'"content"\s*:\s*"(?P<content>(?:[^"\\]|\\.)*?)"',
    re.DOTALL,
)


def clean_escaped_text(text: str) -> str:
    """
    Undo the extra escaping of source and ABI text.

    Literal `\\r` and `\\n` become CR and LF first, then every remaining
    backslash is dropped. Swapping the two steps would turn `\\n` into `n`.
    """
    text = text.replace("\\r", "\r").replace("\\n", "\n")
    return text.replace("\\", "")


def is_standard_json_input(source_code: str) -> bool:
    return bool(STANDARD_JSON_INPUT_RE.search(source_code or ""))


def extract_source_files(source_code: str) -> List[Tuple[str, str]]:
    """Return `(path, raw content)` pairs embedded in a standard-json-input bundle."""
    return [
        (match.group("path"), match.group("content"))
        for match in SOURCE_FILE_RE.finditer(source_code)
    ]


def is_unverified(record: ContractSourceCode) -> bool:
    return record.abi == UNVERIFIED_ABI_SENTINEL


def normalize_source_records(
    records: Sequence[ContractSourceCode],
) -> Tuple[List[ContractSourceCode], bool]:
    """
    Return `(records, is_multi_file)`.

    Multi-file: the combined record first, then one record per embedded file
    sharing its metadata, with the file path as contract name.
    Single file: the record with its source text cleaned.
    """
    first = records[0]

    if not is_standard_json_input(first.source_code):
        return [replace(first, source_code=clean_escaped_text(first.source_code))], False

    files = [
        replace(
            first,
            source_code=clean_escaped_text(content),
            contract_name=path,
            constructor_arguments=list(first.constructor_arguments),
        )
        for path, content in extract_source_files(first.source_code)
    ]
    if not files:
        logger.warning("standard-json-input source for %s has no extractable files", first.contract_name)
    return [first, *files], True

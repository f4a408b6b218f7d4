"""Decode raw input bytes into a value tree.

Formats are tried in order: JSON, XML, YAML. YAML streams with more than one
document produce a multi-document ParsedInput.
"""

import json
import logging
from typing import Any, FrozenSet, List
from xml.parsers.expat import ExpatError

import xmltodict
from ruamel.yaml import YAML
from ruamel.yaml.constructor import ConstructorError, SafeConstructor
from ruamel.yaml.error import YAMLError
from ruamel.yaml.nodes import MappingNode

from .errors import InputParseError
from .values import ParsedInput

logger = logging.getLogger(__name__)


def parse_input(data: bytes) -> ParsedInput:
    """Parse JSON, XML or YAML bytes.

    Raises:
        InputParseError: the bytes are none of the supported formats.
    """
    text = data.decode("utf-8-sig", errors="replace")

    try:
        value = json.loads(text)
    except ValueError:
        pass
    else:
        logger.debug("input parsed as JSON")
        return ParsedInput(_normalize(value))

    if text.lstrip().startswith("<"):
        try:
            value = parse_xml(text)
        except (ValueError, ExpatError) as e:
            logger.debug("input is not XML: %s", e)
        else:
            logger.debug("input parsed as XML")
            return ParsedInput(value)

    documents = parse_yaml_documents(text)
    logger.debug("input parsed as YAML (%d documents)", len(documents))
    if not documents:
        return ParsedInput({})
    if len(documents) == 1:
        return ParsedInput(documents[0])
    return ParsedInput(documents, multi_document=True)


def parse_xml(text: str) -> Any:
    """Parse an XML document, returning the root element's content.

    Attributes become ``@name`` keys, text next to children or attributes
    becomes ``#text``, repeated children become lists and empty elements
    become empty strings.
    """
    document = xmltodict.parse(text, postprocessor=_xml_postprocessor)
    if not document:
        raise ValueError("no XML start element found")
    (root,) = document.values()
    return "" if root is None else _normalize(root)


def _xml_postprocessor(path, key, value):
    return key, "" if value is None else value


class StringKeyConstructor(SafeConstructor):
    """Safe constructor that turns mapping keys into strings as it builds.

    Converting afterwards is too late: ``1`` and ``true`` are equal Python
    keys and would collide as duplicates.
    """

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, MappingNode):
            raise ConstructorError(
                problem=f"expected a mapping node, but found {node.id}",
                problem_mark=node.start_mark,
            )
        # flatten_mapping splices entries from "<<" merges in ahead of these
        own_entries = {id(entry) for entry in node.value}
        self.flatten_mapping(node)

        mapping = {}
        own_keys = set()
        for entry in node.value:
            key_node, value_node = entry
            key = _key_text(self.construct_object(key_node, deep=True))
            if id(entry) in own_entries:
                if key in own_keys:
                    raise ConstructorError(
                        problem=f"found duplicate key '{key}'",
                        problem_mark=key_node.start_mark,
                    )
                own_keys.add(key)
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


def parse_yaml_documents(text: str) -> List[Any]:
    """Load every document of a YAML stream."""
    yaml = YAML(typ="safe", pure=True)
    yaml.Constructor = StringKeyConstructor
    try:
        documents = list(yaml.load_all(text))
    except YAMLError as e:
        logger.debug("YAML parse failed: %s", e)
        raise InputParseError() from e
    return [_normalize(doc) for doc in documents]


def _normalize(value: Any, ancestors: FrozenSet[int] = frozenset()) -> Any:
    """Convert mapping types to dict with string keys, recursively.

    Raises:
        InputParseError: a container contains itself (a recursive YAML alias).
    """
    if isinstance(value, (dict, list, tuple)):
        if id(value) in ancestors:
            raise InputParseError("Input contains a recursive alias.")
        ancestors = ancestors | {id(value)}
    if isinstance(value, dict):
        return {_key_text(k): _normalize(v, ancestors) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(item, ancestors) for item in value]
    return value


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)

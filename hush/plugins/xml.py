"""XML rule file plugin for hush.

Expected layout::

    <?xml version="1.0"?>
    <suppressions>
      <suppress>
        <id>uninitvar</id>
        <fileName>src/file1.c</fileName>
        <lineNumber>10</lineNumber>
        <symbolName>var</symbolName>
      </suppress>
    </suppressions>

Only ``<suppress>`` children of the root element are rules; any other
element is skipped.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from hush.core.records import RULE_TAG, rule_from_record
from hush.errors import RuleFileError
from hush.models.rule import SuppressionRule
from hush.plugin import HushPlugin, hookimpl, peek_text, read_rule_file
from hush.utils.logging import get_logger

logger = get_logger(__name__)


class XmlRulesPlugin(HushPlugin):
    """Reader for XML suppression documents."""

    name = "xml"
    version = "1.0.0"
    description = "<suppressions> document of <suppress> records"

    @hookimpl
    def can_handle(self, path: Path) -> float:
        if path.suffix.lower() == ".xml":
            return 1.0
        head = peek_text(path, 512).lstrip()
        if head.startswith("<?xml") or head.startswith("<suppressions"):
            return 0.9
        return 0.0

    @hookimpl
    def load_rules(self, path: Path) -> list[SuppressionRule]:
        content = read_rule_file(path)
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            line = e.position[0] if e.position else None
            raise RuleFileError(f"Invalid XML: {e}", line=line, path=path) from e

        rules: list[SuppressionRule] = []
        for element in root:
            if element.tag != RULE_TAG:
                logger.debug("element_skipped", path=str(path), tag=element.tag)
                continue
            # Field text is kept as written; only lineNumber tolerates padding
            fields = {child.tag: child.text or "" for child in element}
            rules.append(rule_from_record(fields))
        return rules

# bugcount/patterns.py

"""
Pattern-metadata lookup: resolves a BugInstance `type` to its category and
abbreviation.

A PatternRegistry is an ordinary object handed to the counter. It can be
seeded from the bundled catalog, from FindBugs plugin descriptors
(findbugs.xml, streamed with lxml) and from a configuration table.
"""

from typing import Any, BinaryIO, Dict, Iterator, Mapping, Optional, Union

from lxml import etree

from bugcount.errors import ConfigError, MalformedInputError
from bugcount.pattern_catalog import BUG_PATTERNS
from bugcount.utils.logger import get_logger
from bugcount.utils.metadata import PatternMetadata
from bugcount.utils.settings import BUG_PATTERN_TAG
from bugcount.utils.xml_utils import error_position, local_name

LOG = get_logger(__name__)


class PatternRegistry:
    def __init__(self, patterns: Mapping[str, PatternMetadata] = None):
        self._patterns: Dict[str, PatternMetadata] = dict(patterns or {})

    @classmethod
    def default(cls) -> "PatternRegistry":
        """
        Return a registry preloaded with the bundled bug pattern catalog.
        """
        registry = cls()
        for bug_type, (abbrev, category) in BUG_PATTERNS.items():
            registry.register(PatternMetadata(bug_type, category, abbrev))
        LOG.debug("Loaded %d bundled bug patterns", len(registry))
        return registry

    def register(self, metadata: PatternMetadata) -> None:
        if metadata.type in self._patterns:
            LOG.debug("Overriding bug pattern %s", metadata.type)
        self._patterns[metadata.type] = metadata

    def lookup(self, bug_type: str) -> Optional[PatternMetadata]:
        """
        Return the metadata for `bug_type`, or None if it is unknown.
        """
        return self._patterns.get(bug_type)

    def load_plugin_descriptor(self, source: Union[str, BinaryIO]) -> int:
        """
        Merge the <BugPattern> entries of a FindBugs plugin descriptor.

        :param source: Path or binary stream of a findbugs.xml descriptor
        :return: Number of patterns registered
        """
        loaded = 0
        try:
            for _, elem in etree.iterparse(source, events=("end",)):
                if local_name(elem.tag) != BUG_PATTERN_TAG:
                    continue
                bug_type = elem.get("type")
                abbrev = elem.get("abbrev")
                category = elem.get("category")
                if bug_type and abbrev and category:
                    self.register(PatternMetadata(bug_type, category, abbrev))
                    loaded += 1
                else:
                    LOG.debug("Ignoring incomplete BugPattern element: %s", dict(elem.attrib))
                elem.clear()
        except etree.XMLSyntaxError as e:
            line, column = error_position(e)
            raise MalformedInputError(f"Malformed plugin descriptor: {e.msg}", line, column) from e
        LOG.info("Loaded %d bug pattern(s) from %s", loaded, getattr(source, "name", source))
        return loaded

    def load_mapping(self, mapping: Mapping[str, Any]) -> int:
        """
        Merge entries of the form {type: {"category": ..., "abbrev": ...}},
        as found in the `patterns` table of a configuration file.
        """
        loaded = 0
        for bug_type, entry in mapping.items():
            if not isinstance(entry, Mapping):
                raise ConfigError(f"Pattern entry for {bug_type!r} must be a table")
            category = entry.get("category")
            abbrev = entry.get("abbrev", entry.get("abbreviation"))
            if not category or not abbrev:
                raise ConfigError(f"Pattern entry for {bug_type!r} needs 'category' and 'abbrev'")
            self.register(PatternMetadata(
                str(bug_type), str(category), str(abbrev), entry.get("description")
            ))
            loaded += 1
        return loaded

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, bug_type: object) -> bool:
        return bug_type in self._patterns

    def __iter__(self) -> Iterator[PatternMetadata]:
        return iter(self._patterns.values())

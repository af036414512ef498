# bugcount/counter.py

"""
Count BugInstance elements matching given criteria using parser events.

The bug collection is fed to an lxml XMLParser in chunks. The parser calls
back into a BugInstanceHandler for every element start; no tree is built, so
memory use does not grow with the size of the collection.

Filtering rules, applied in order to each BugInstance:
  1) records without a `type` or `priority` attribute are skipped
  2) records whose type is unknown are skipped if a category or
     abbreviation filter is active, and counted otherwise
  3) category and abbreviation filters must both pass
  4) the priority must be numerically <= min_priority

A missing priority skips the record, but a priority that is not an integer
aborts the whole pass with InvalidPriorityValue.
"""

import gzip
import re
import zlib
from typing import IO, Optional, Set

from lxml import etree

from bugcount.errors import CounterStateError, InvalidPriorityValue, MalformedInputError
from bugcount.patterns import PatternRegistry
from bugcount.utils.file_utils import open_bug_collection
from bugcount.utils.logger import get_logger
from bugcount.utils.metadata import FilterCriteria, split_names
from bugcount.utils.settings import BUG_INSTANCE_TAG, NORMAL_PRIORITY, READ_CHUNK_SIZE, describe_priority
from bugcount.utils.xml_utils import error_position, local_name

LOG = get_logger(__name__)

_PRIORITY_RE = re.compile(r"[+-]?[0-9]+")

# Range of a 32-bit signed int, as FindBugs writes priorities
_PRIORITY_MIN = -2 ** 31
_PRIORITY_MAX = 2 ** 31 - 1


def parse_priority(value: str, bug_type: Optional[str] = None) -> int:
    """
    Parse a priority attribute as a base-10 integer.

    Raises InvalidPriorityValue for anything else, including surrounding
    whitespace and values outside the 32-bit signed range.
    """
    if not _PRIORITY_RE.fullmatch(value):
        raise InvalidPriorityValue(value, bug_type)
    priority = int(value)
    if not _PRIORITY_MIN <= priority <= _PRIORITY_MAX:
        raise InvalidPriorityValue(value, bug_type)
    return priority


class BugInstanceHandler:
    """
    Parser target holding the filter criteria and the running count.

    lxml only calls the methods a target defines, so character data and end
    tags never reach this object.
    """

    def __init__(self, criteria: FilterCriteria, patterns: PatternRegistry):
        self.criteria = criteria
        self.patterns = patterns
        self.count = 0

    def start(self, tag, attrib) -> None:
        if local_name(tag) != BUG_INSTANCE_TAG:
            return

        bug_type = attrib.get("type")
        priority = attrib.get("priority")
        if bug_type is None or priority is None:
            LOG.debug("Skipping BugInstance without type/priority: %s", dict(attrib))
            return

        pattern = self.patterns.lookup(bug_type)
        if pattern is None and self.criteria.needs_metadata:
            LOG.debug("Skipping unknown bug type %s", bug_type)
            return

        if not self.criteria.accepts_pattern(pattern):
            return

        if not self.criteria.accepts_priority(parse_priority(priority, bug_type)):
            return

        self.count += 1

    def close(self) -> int:
        return self.count


class BugCounter:
    """
    Count bugs in a bug collection stream without building the collection
    in memory.

    Usage:
        counter = BugCounter(stream, PatternRegistry.default())
        counter.set_categories("CORRECTNESS,MT_CORRECTNESS")
        counter.set_min_priority(HIGH_PRIORITY)
        print(counter.execute().count)

    The stream is read to the end by execute() but never closed; that is
    the caller's job.
    """

    def __init__(self, stream: IO, patterns: PatternRegistry = None):
        self.stream = stream
        self.patterns = patterns if patterns is not None else PatternRegistry()
        self._categories: Set[str] = set()
        self._abbrevs: Set[str] = set()
        self._min_priority = NORMAL_PRIORITY
        self._started = False
        self._count = 0

    def set_min_priority(self, min_priority: int) -> None:
        self._check_not_started()
        self._min_priority = min_priority

    def set_categories(self, categories: str) -> None:
        """
        Add the comma-separated `categories` to the category filter.
        """
        self._check_not_started()
        self._categories.update(split_names(categories))

    def set_abbrevs(self, abbrevs: str) -> None:
        """
        Add the comma-separated `abbrevs` to the abbreviation filter.
        """
        self._check_not_started()
        self._abbrevs.update(split_names(abbrevs))

    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria(
            categories=frozenset(self._categories),
            abbreviations=frozenset(self._abbrevs),
            min_priority=self._min_priority,
        )

    def execute(self) -> "BugCounter":
        """
        Read the whole stream and count the matching BugInstance elements.

        Raises MalformedInputError if the stream is not well-formed XML (or a
        gzip stream is truncated or corrupt) and
        InvalidPriorityValue if a priority is not an integer. Either way no
        count is recorded.
        """
        self._check_not_started()
        self._started = True

        criteria = self.criteria
        LOG.info(
            "Counting bugs (categories=%s, abbrevs=%s, min_priority=%s)",
            sorted(criteria.categories) or "any",
            sorted(criteria.abbreviations) or "any",
            describe_priority(criteria.min_priority),
        )

        handler = BugInstanceHandler(criteria, self.patterns)
        parser = etree.XMLParser(
            target=handler,
            resolve_entities=False,
            no_network=True,
            huge_tree=True,
        )
        try:
            while True:
                chunk = self.stream.read(READ_CHUNK_SIZE)
                if not chunk:
                    break
                if isinstance(chunk, str):
                    chunk = chunk.encode("utf-8")
                parser.feed(chunk)
            count = parser.close()
        except etree.XMLSyntaxError as e:
            line, column = error_position(e)
            raise MalformedInputError(f"Malformed bug collection: {e.msg}", line, column) from e
        except (EOFError, zlib.error, gzip.BadGzipFile) as e:
            raise MalformedInputError(f"Corrupt compressed bug collection: {e}") from e

        self._count = count
        LOG.info("Counted %d matching bug(s)", count)
        return self

    @property
    def count(self) -> int:
        return self._count

    def get_count(self) -> int:
        return self._count

    def _check_not_started(self) -> None:
        if self._started:
            raise CounterStateError("Counter has already consumed its input stream")


def count_bugs(
    path: str,
    patterns: PatternRegistry = None,
    categories: str = None,
    abbrevs: str = None,
    min_priority: int = NORMAL_PRIORITY,
) -> int:
    """
    Count matching bugs in the bug collection at `path` (plain or gzipped).

    :param path: Path to the bug collection file
    :param patterns: Pattern lookup; defaults to the bundled catalog
    :param categories: Comma-separated category filter
    :param abbrevs: Comma-separated abbreviation filter
    :param min_priority: Least severe priority to count
    :return: Number of matching BugInstance elements
    """
    if patterns is None:
        patterns = PatternRegistry.default()
    with open_bug_collection(path) as stream:
        counter = BugCounter(stream, patterns)
        if categories:
            counter.set_categories(categories)
        if abbrevs:
            counter.set_abbrevs(abbrevs)
        counter.set_min_priority(min_priority)
        return counter.execute().count

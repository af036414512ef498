import pytest

from bugcount.patterns import PatternRegistry
from bugcount.utils.metadata import PatternMetadata


def bug_collection(*instances: str) -> bytes:
    """
    Wrap BugInstance elements in a minimal bug collection document.
    """
    body = "\n".join(instances)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<BugCollection version="0.9.1" sequence="0" timestamp="0">\n'
        '  <Project filename="demo"><Jar>demo.jar</Jar></Project>\n'
        f"{body}\n"
        '  <Errors></Errors>\n'
        "</BugCollection>\n"
    ).encode("utf-8")


def bug(bug_type=None, priority=None, body="") -> str:
    attrs = []
    if bug_type is not None:
        attrs.append(f'type="{bug_type}"')
    if priority is not None:
        attrs.append(f'priority="{priority}"')
    return f"  <BugInstance {' '.join(attrs)}>{body}</BugInstance>"


@pytest.fixture
def registry():
    return PatternRegistry({
        "NP_NULL_ON_SOME_PATH": PatternMetadata("NP_NULL_ON_SOME_PATH", "CORRECTNESS", "NP"),
        "RV_RETURN_VALUE_IGNORED": PatternMetadata("RV_RETURN_VALUE_IGNORED", "CORRECTNESS", "RV"),
        "DLS_DEAD_LOCAL_STORE": PatternMetadata("DLS_DEAD_LOCAL_STORE", "STYLE", "DLS"),
        "DM_STRING_CTOR": PatternMetadata("DM_STRING_CTOR", "PERFORMANCE", "Dm"),
    })

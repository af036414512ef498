import gzip
import io

import pytest

from bugcount.cli import EXIT_ERROR, EXIT_OK, EXIT_USAGE, main

from conftest import bug, bug_collection

DOC = bug_collection(
    bug("NP_NULL_ON_SOME_PATH", 1),
    bug("RV_RETURN_VALUE_IGNORED", 2),
    bug("DLS_DEAD_LOCAL_STORE", 2),
    bug("DM_STRING_CTOR", 3),
    bug("XL_LEAK", 1),
)

PLUGIN = b"""<FindbugsPlugin>
  <BugPattern abbrev="XL" type="XL_LEAK" category="PERFORMANCE"/>
</FindbugsPlugin>
"""


@pytest.fixture
def collection(tmp_path, monkeypatch):
    # keep config discovery away from the developer's working directory
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BUGCOUNT_NO_COLOR", "1")
    path = tmp_path / "bugs.xml"
    path.write_bytes(DOC)
    return str(path)


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


@pytest.mark.parametrize("argv,expected", [
    ([], "4"),
    (["-minPriority", "3"], "5"),
    (["-minPriority", "1"], "2"),
    (["-categories", "CORRECTNESS"], "2"),
    (["-categories", "CORRECTNESS,STYLE"], "3"),
    (["-abbrevs", "RV,Dm", "-minPriority", "3"], "2"),
    (["-categories", "PERFORMANCE", "-minPriority", "3"], "1"),
])
def test_prints_count(collection, capsys, argv, expected):
    assert _run(argv + [collection]) == EXIT_OK
    out = capsys.readouterr().out
    assert out.strip() == expected


def test_plugin_descriptor_resolves_extra_types(collection, tmp_path, capsys):
    plugin = tmp_path / "findbugs.xml"
    plugin.write_bytes(PLUGIN)
    assert _run(["-plugin", str(plugin), "-categories", "PERFORMANCE", collection]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "1"


def test_config_file_supplies_defaults(collection, tmp_path, capsys):
    (tmp_path / "bugcount.toml").write_text(
        'categories = "CORRECTNESS"\n'
        "min_priority = 3\n"
    )
    assert _run([collection]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "2"

    # command-line options win over the config file
    assert _run(["-categories", "STYLE,PERFORMANCE", collection]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "2"


def test_config_patterns_table(collection, tmp_path, capsys):
    config = tmp_path / "custom.yaml"
    config.write_text(
        "patterns:\n"
        "  XL_LEAK:\n"
        "    category: SECURITY\n"
        "    abbrev: XL\n"
    )
    assert _run(["-config", str(config), "-categories", "SECURITY", collection]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "1"


@pytest.mark.parametrize("argv", [
    [],
    ["a.xml", "b.xml"],
    ["-bogus", "x", "a.xml"],
    ["-minPriority", "high", "a.xml"],
])
def test_usage_errors_exit_1(collection, capsys, argv):
    assert _run(argv) == EXIT_USAGE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: bugcount" in captured.err
    assert "-categories" in captured.err


def test_missing_input_file(collection, tmp_path, capsys):
    assert _run([str(tmp_path / "missing.xml")]) == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.xml" in captured.err


def test_malformed_input(collection, tmp_path, capsys):
    broken = tmp_path / "broken.xml"
    broken.write_bytes(b"<BugCollection><BugInstance type='X' priority='1'>")
    assert _run([str(broken)]) == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Malformed bug collection" in captured.err


def test_invalid_priority_value(collection, tmp_path, capsys):
    bad = tmp_path / "bad.xml"
    bad.write_bytes(bug_collection(bug("NP_NULL_ON_SOME_PATH", "urgent")))
    assert _run([str(bad)]) == EXIT_ERROR
    assert "Invalid priority value 'urgent'" in capsys.readouterr().err


def test_bad_config_file(collection, tmp_path, capsys):
    config = tmp_path / "bad.toml"
    config.write_text("min_priority = \"high\"\n")
    assert _run(["-config", str(config), collection]) == EXIT_ERROR
    assert "min_priority" in capsys.readouterr().err


def test_truncated_gzip_input(collection, tmp_path, capsys):
    buf = io.BytesIO()
    with gzip.GzipFile(fileobj=buf, mode="wb") as f:
        f.write(DOC)
    data = buf.getvalue()
    packed = tmp_path / "bugs.xml.gz"
    packed.write_bytes(data[:len(data) // 2])

    assert _run([str(packed)]) == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Corrupt compressed bug collection" in captured.err

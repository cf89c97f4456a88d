"""Shared test fixtures for d3js-report tests."""

import logging
from pathlib import Path

import pytest

from d3js_report.context import ReportRegistry
from d3js_report.models import Result, Rule
from d3js_report.plugin import D3JSReportPlugin
from d3js_report.resources import DirectoryResourceProvider


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user config files, D3JS_REPORT_* variables and logger state out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(workdir)
    for name in ("OUTPUT_STYLE", "ENCODING", "VERBOSITY", "LOG_FILE"):
        monkeypatch.delenv(f"D3JS_REPORT_{name}", raising=False)

    yield

    logger = logging.getLogger("d3js_report")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def output_root(tmp_path):
    return tmp_path / "report" / "d3js"


@pytest.fixture
def bundle(tmp_path):
    """A small resource bundle: shared lib plus a 'chord' and an entry-less 'broken' type."""
    root = tmp_path / "bundle"
    (root / "lib" / "fonts").mkdir(parents=True)
    (root / "lib" / "d3.js").write_text("// d3\n")
    (root / "lib" / "fonts" / "mono.txt").write_text("font\n")
    (root / "chord").mkdir()
    (root / "chord" / "diagram.html").write_text("<html>chord</html>\n")
    (root / "chord" / "chord-diagram.js").write_text("drawChords();\n")
    (root / "broken").mkdir()
    (root / "broken" / "readme.txt").write_text("no entry file\n")
    return root


@pytest.fixture
def provider(bundle):
    return DirectoryResourceProvider(bundle)


@pytest.fixture
def registry():
    return ReportRegistry()


@pytest.fixture
def plugin(registry, provider, output_root):
    plugin = D3JSReportPlugin(registry, provider=provider)
    plugin.configure(output_root)
    return plugin


def _make_rule(rule_id="my:rule", diagram_type="chord", data_format="csv"):
    properties = {}
    if diagram_type is not None:
        properties["diagram-type"] = diagram_type
    if data_format is not None:
        properties["data-format"] = data_format
    return Rule(id=rule_id, report_properties=properties)


def _make_result(rule=None, columns=("a", "b"), rows=({"a": 1, "b": 2},)):
    return Result(rule=rule or _make_rule(), column_names=list(columns), rows=list(rows))


@pytest.fixture
def dependency_result():
    """Typical chord input: package dependencies with weights."""
    rule = _make_rule("dependency:Packages")
    return Result(
        rule=rule,
        column_names=["Source", "Target", "Weight"],
        rows=[
            {"Source": "api", "Target": "core", "Weight": 12},
            {"Source": "core", "Target": "util", "Weight": 3},
            {"Source": "web", "Target": "api", "Weight": 7},
        ],
    )


@pytest.fixture
def make_rule():
    return _make_rule


@pytest.fixture
def make_result():
    return _make_result

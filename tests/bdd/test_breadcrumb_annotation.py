"""Behaviour tests for the breadcrumb pre-render hook.

These pytest-bdd scenarios drive ``BreadcrumbAnnotator`` with the page URLs
described in ``features/breadcrumb_annotation.feature`` and check the
metadata written into the page's ``data`` mapping.

Usage
-----
Run ``pytest tests/bdd/test_breadcrumb_annotation.py -v`` after installing the
dev dependencies (``uv sync --group dev``). No external services are needed.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from module_pages.breadcrumbs import BreadcrumbAnnotator
from module_pages.pages import Page

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "breadcrumb_annotation.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a page at "{url}"'))
def given_page(url: str, scenario_state: ScenarioState) -> None:
    page = Page(source_path=Path("page.md"), url=url, data={"title": "Sample"})
    scenario_state["page"] = page
    scenario_state["before"] = dict(page.data)


@when("the breadcrumb hook runs")
def when_hook_runs(scenario_state: ScenarioState) -> None:
    BreadcrumbAnnotator()(scenario_state["page"])


@then(parsers.parse('the breadcrumb paths are "{paths}"'))
def then_paths(paths: str, scenario_state: ScenarioState) -> None:
    expected = [item.strip() for item in paths.split(",")]
    actual = scenario_state["page"].data["breadcrumb_paths"]
    assert actual == expected, f"expected {expected!r}, got {actual!r}"


@then(parsers.parse('the module name is "{name}"'))
def then_module_name(name: str, scenario_state: ScenarioState) -> None:
    assert scenario_state["page"].data["module_name"] == name


@then("the page is marked as a command section")
def then_command_section(scenario_state: ScenarioState) -> None:
    assert scenario_state["page"].data["command_section"] is True


@then(parsers.parse('the breadcrumb title is "{title}"'))
def then_breadcrumb_title(title: str, scenario_state: ScenarioState) -> None:
    assert scenario_state["page"].data["breadcrumb_title"] == title


@then("no module name is recorded")
def then_no_module_name(scenario_state: ScenarioState) -> None:
    assert "module_name" not in scenario_state["page"].data


@then("the page metadata is unchanged")
def then_unchanged(scenario_state: ScenarioState) -> None:
    assert scenario_state["page"].data == scenario_state["before"]

"""Behaviour tests for building the site with the breadcrumb hook enabled.

The scenario in ``features/site_build.feature`` writes a config and a small
Markdown tree, runs ``pages build`` through ``SiteBuilder``, and reads the
JSON data island each rendered page exposes to theme scripts.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v``.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from module_pages.config import load_site_config
from module_pages.generator import SiteBuilder

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _page_data(path: Path) -> dict[str, typ.Any]:
    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
    island = soup.find("script", id="page-data")
    assert island is not None, f"expected a page-data script in {path}"
    return json.loads(island.get_text())


@given("a site config with a module command page")
def given_site(tmp_path: Path, scenario_state: ScenarioState) -> None:
    source_dir = tmp_path / "site"
    command_dir = source_dir / "modules" / "pester" / "commands"
    command_dir.mkdir(parents=True)
    (source_dir / "index.md").write_text("Home.\n", encoding="utf-8")
    (command_dir / "invoke-pester.md").write_text(
        "---\ntitle: Invoke-Pester\n---\nRuns tests.\n", encoding="utf-8"
    )
    output_dir = tmp_path / "public"
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        f"""
site:
  source_dir: {source_dir}
  output_dir: {output_dir}
hooks:
  pre_render: [breadcrumbs]
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    scenario_state["config_path"] = config_path
    scenario_state["output_dir"] = output_dir


@when("I build the site")
def when_build(scenario_state: ScenarioState) -> None:
    config = load_site_config(scenario_state["config_path"])
    scenario_state["written"] = SiteBuilder(config).run()


@then("the command page data island lists its breadcrumb paths")
def then_command_paths(scenario_state: ScenarioState) -> None:
    path = scenario_state["output_dir"] / "modules/pester/commands/invoke-pester.html"
    data = _page_data(path)
    assert data["breadcrumb_paths"] == [
        "/",
        "/modules",
        "/modules/pester",
        "/modules/pester/commands",
    ]


@then("the command page data island names the module")
def then_command_module(scenario_state: ScenarioState) -> None:
    path = scenario_state["output_dir"] / "modules/pester/commands/invoke-pester.html"
    data = _page_data(path)
    assert data["module_name"] == "Pester"
    assert data["command_section"] is True


@then("the home page data island has no breadcrumb paths")
def then_home_untouched(scenario_state: ScenarioState) -> None:
    data = _page_data(scenario_state["output_dir"] / "index.html")
    assert "breadcrumb_paths" not in data

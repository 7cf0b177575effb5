"""Tests for the MCP server tools.

Tools are called directly as coroutines; skipped when the optional
mcp extra is not installed.
"""

import asyncio

import pytest

pytest.importorskip("mcp")

from wagecalc import gemini_client  # noqa: E402
from wagecalc.mcp import server  # noqa: E402
from wagecalc.sdk import MAX_PROJECTION_YEARS  # noqa: E402


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("WAGE_CALC_CONFIG_PATH", str(config_dir))
    return config_dir


class TestCalculateWageImpactTool:
    def test_stats_and_formatting(self, isolated_config):
        result = asyncio.run(server.calculate_wage_impact(
            start_wage=50.0, weekly_hours=40.0, projection_years=4, include_chart=False,
        ))

        assert result["chart_points"] == 17
        assert result["stats"]["loss_4_year"] > 0
        assert result["stats"]["loss_30_year"] == 0
        assert result["formatted"]["loss_30_year"] == "$0"
        assert "chart_data" not in result

    def test_include_chart(self, isolated_config):
        result = asyncio.run(server.calculate_wage_impact(
            start_wage=50.0, weekly_hours=40.0, projection_years=1, include_chart=True,
        ))

        assert [p["date"] for p in result["chart_data"]][-1] == "10/2026"

    def test_bad_schedules_return_error(self, isolated_config):
        (isolated_config / "schedules.yaml").write_text("kp: {}\n")

        result = asyncio.run(server.calculate_wage_impact(
            start_wage=50.0, weekly_hours=40.0, projection_years=4, include_chart=False,
        ))

        assert "error" in result

    def test_horizon_above_limit_is_rejected(self, isolated_config):
        result = asyncio.run(server.calculate_wage_impact(
            start_wage=50.0, weekly_hours=40.0, projection_years=10 ** 8, include_chart=False,
        ))

        assert result["error"].startswith("Invalid inputs")

    def test_horizon_at_limit_is_accepted(self, isolated_config):
        result = asyncio.run(server.calculate_wage_impact(
            start_wage=50.0, weekly_hours=40.0, projection_years=MAX_PROJECTION_YEARS,
            include_chart=False,
        ))

        assert result["chart_points"] == MAX_PROJECTION_YEARS * 4 + 1

    def test_input_schema_advertises_horizon_limit(self):
        tools = {tool.name: tool for tool in asyncio.run(server.mcp.list_tools())}
        schema = tools["calculate_wage_impact"].inputSchema["properties"]["projection_years"]

        assert schema["maximum"] == MAX_PROJECTION_YEARS
        assert schema["minimum"] == 0


class TestInsightsTool:
    def test_falls_back_without_gemini(self, isolated_config, monkeypatch):
        def failing(prompt, timeout):
            raise RuntimeError("Gemini CLI not found on PATH")

        monkeypatch.setattr(gemini_client, "process_prompt", failing)

        result = asyncio.run(server.get_ai_insights(start_wage=50.0, weekly_hours=40.0))

        assert "currently unavailable" in result["insights"]
        assert result["loss_30_year"].startswith("$")


class TestSchedulesTool:
    def test_returns_reference_tables(self, isolated_config):
        result = asyncio.run(server.get_schedules())

        assert result["fallback_rate"] == 1.03
        assert result["kp"]["name"] == "KP"

"""Wage Calc MCP Server - FastMCP implementation for wage projection tools."""

import asyncio
import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field, ValidationError

from wagecalc.sdk import (
    MAX_PROJECTION_YEARS,
    ProjectionInputs,
    ScheduleConfigError,
    calculate_wage_impact as sdk_calculate,
    format_currency,
    get_ai_insights as sdk_insights,
    load_projection_config,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("wage-calc")


# --- Tools ---

@mcp.tool()
async def calculate_wage_impact(
    start_wage: float = Field(default=50.0, gt=0, description="Current hourly wage in dollars (typically 40-70)"),
    weekly_hours: float = Field(default=40.0, gt=0, description="Hours worked per week (typically 20-40)"),
    projection_years: int = Field(default=30, ge=0, le=MAX_PROJECTION_YEARS,
                                  description=f"Projection horizon in years (0-{MAX_PROJECTION_YEARS})"),
    include_chart: bool = Field(default=False, description="Include the quarterly chart series (can be long)"),
) -> dict[str, Any]:
    """Compare cumulative earnings under the Alliance and KP raise schedules.

    Returns the cumulative loss under KP at 4, 10, 20 and 30 years, each
    also formatted as whole dollars. Set include_chart for the quarterly
    hourly-rate series.
    """
    try:
        inputs = ProjectionInputs(
            start_wage=start_wage, weekly_hours=weekly_hours, projection_years=projection_years
        )
    except ValidationError as e:
        return {"error": f"Invalid inputs: {e}"}

    try:
        config = load_projection_config()
        result = sdk_calculate(
            inputs.start_wage, inputs.weekly_hours, inputs.projection_years, config
        )

        stats = result.stats.model_dump()
        output = {
            "inputs": inputs.model_dump(),
            "stats": stats,
            "formatted": {key: format_currency(value) for key, value in stats.items()},
            "chart_points": len(result.chart_data),
        }
        if include_chart:
            output["chart_data"] = [p.model_dump(mode="json") for p in result.chart_data]
        return output

    except ScheduleConfigError as e:
        logger.error(f"Error loading schedules: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_schedules() -> dict[str, Any]:
    """Get the active raise schedules, anchor date and post-contract fallback rate."""
    try:
        config = load_projection_config()
        return config.model_dump(mode="json")
    except ScheduleConfigError as e:
        logger.error(f"Error loading schedules: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_ai_insights(
    start_wage: float = Field(default=50.0, gt=0, description="Current hourly wage in dollars"),
    weekly_hours: float = Field(default=40.0, gt=0, description="Hours worked per week"),
) -> dict[str, Any]:
    """Get persuasive commentary on why front-loaded raises matter, for these inputs.

    Runs a 30-year projection, then asks Gemini to explain how the 4-year
    loss compounds into the 30-year loss. Falls back to a fixed message if
    Gemini is unavailable.
    """
    try:
        config = load_projection_config()
    except ScheduleConfigError as e:
        logger.error(f"Error loading schedules: {e}")
        return {"error": str(e)}

    result = sdk_calculate(start_wage, weekly_hours, 30, config)
    stats = result.stats

    text = await asyncio.to_thread(
        sdk_insights, start_wage, stats.loss_4_year, stats.loss_30_year, weekly_hours
    )
    return {
        "insights": text,
        "loss_4_year": format_currency(stats.loss_4_year),
        "loss_30_year": format_currency(stats.loss_30_year),
    }


# --- Resources (optional, for browsing) ---

@mcp.resource("wagecalc://schedules")
async def schedules_resource() -> str:
    """Active raise schedules as JSON."""
    try:
        return json.dumps(load_projection_config().model_dump(mode="json"), indent=2)
    except ScheduleConfigError as e:
        return json.dumps({"error": str(e)})


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()

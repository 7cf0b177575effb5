"""Narrative commentary on a projection via Gemini.

SDK layer - never raises. Any failure degrades to a fixed message so the
projection itself is always shown.
"""

import logging

from .. import gemini_client
from .formatting import to_fixed

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "Unable to generate insights at this time."
FALLBACK_MESSAGE = (
    "The AI analysis is currently unavailable. Focus on the 'Snowball Effect' "
    "of front-loaded raises depicted in the charts."
)

PROMPT_TEMPLATE = """
Context: A unionized healthcare worker is comparing two wage proposals (Alliance vs KP).
Data:
- Current Wage: ${current_wage}/hr
- Weekly Hours: {weekly_hours}
- 4-Year Contract Cumulative Loss: ${loss_4_year}
- 30-Year Career Cumulative Loss: ${loss_30_year}

Task:
Provide a concise (3-4 bullet points), powerful strategic insight on why "front-loading" raises is critical.
Explain how the early ${loss_4_year} gap compounds into the massive ${loss_30_year} deficit.
Use persuasive but professional language suitable for a union communication tool.
Keep it brief and high-impact.
"""


def _format_number(value: float) -> str:
    """Render 50.0 as "50" and 52.5 as "52.5"."""
    return f"{value:g}"


def build_insights_prompt(
    current_wage: float,
    loss_4_year: float,
    loss_30_year: float,
    weekly_hours: float,
) -> str:
    """Build the prompt sent to Gemini (losses rounded to whole dollars)."""
    return PROMPT_TEMPLATE.format(
        current_wage=_format_number(current_wage),
        weekly_hours=_format_number(weekly_hours),
        loss_4_year=to_fixed(loss_4_year, 0),
        loss_30_year=to_fixed(loss_30_year, 0),
    )


def get_ai_insights(
    current_wage: float,
    loss_4_year: float,
    loss_30_year: float,
    weekly_hours: float,
    timeout: int = 60,
) -> str:
    """Ask Gemini why front-loaded raises matter for these numbers.

    Args:
        current_wage: Starting hourly wage
        loss_4_year: Cumulative loss at the end of the contract
        loss_30_year: Cumulative loss over a 30-year career
        weekly_hours: Hours worked per week
        timeout: Seconds to wait for the Gemini CLI

    Returns:
        Gemini's response, or a fixed fallback message on any failure
    """
    prompt = build_insights_prompt(current_wage, loss_4_year, loss_30_year, weekly_hours)

    try:
        response = gemini_client.process_prompt(prompt, timeout=timeout)
    except Exception as e:
        logger.error(f"AI insight error: {e}")
        return FALLBACK_MESSAGE

    return response or EMPTY_RESPONSE_MESSAGE

"""
Motivational quote collaborator.

Asks the Gemini generateContent endpoint for a one-line quote. It is
optional: without an API key, or on any failure, it yields "" and the
caller falls back to the static pools below.
"""

from __future__ import annotations

import json
import random
from typing import Any, Optional

import httpx

from salary_ticker.domain.models import Quote, WorkStats
from salary_ticker.utils.config import TickerSettings, config
from salary_ticker.utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_QUOTES = [
    Quote("Good morning! A new day, a new way to get paid!", "Piggy Bank", "fun"),
    Quote("Lunch time: you've already earned a proper feast!", "Foodie", "fun"),
    Quote("Keep it up this afternoon, clock-out is getting closer!", "The Clock", "serious"),
    Quote("Today's job is done. Give yourself a thumbs up!", "Office Worker", "serious"),
    Quote("Every second turns into cash. Your time is valuable!", "Wolf of Wall Street (sort of)", "serious"),
    Quote("Hang in there, this second's pay just bought you a candy.", "Finance Buddy", "fun"),
]

REST_DAY_QUOTES = [
    Quote("No alarm today, only freedom! Enjoy your day off.", "Pillow", "rest"),
    Quote("Charging... happiness +100", "Battery", "rest"),
    Quote("Resting today so the money road runs further tomorrow!", "Philosopher", "rest"),
    Quote("No work talk today, only good times (and good food).", "Life Artist", "rest"),
    Quote("Lying flat is a kind of productivity too!", "Sofa", "rest"),
]

REST_DAY_PROMPT = """
You are a witty, cartoonish friend of a hard worker.
Today is a REST DAY for the user.
Generate a short, funny, or relaxing one-sentence quote to encourage them to enjoy their break, recharge, or do something fun.
Avoid talking about earning money today. Focus on "recharging" or "freedom".
Keep it under 20 words.
"""

WORK_DAY_PROMPT = """
You are a witty, cartoonish financial assistant for a worker.
The user has currently earned {earnings:.2f} today.
They are {progress:.1f}% through their workday.
Their monthly salary is {salary:.0f}.

Generate a short, funny, or encouraging one-sentence quote to motivate them.
If earnings are low, be playful. If earnings are high, celebrate.
Keep it under 20 words.
"""


def build_prompt(current_earnings: float, progress: float, salary: float, is_rest_day: bool) -> str:
    if is_rest_day:
        return REST_DAY_PROMPT
    return WORK_DAY_PROMPT.format(earnings=current_earnings, progress=progress, salary=salary)


def _request_body(prompt: str) -> dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": {
                "type": "OBJECT",
                "properties": {"quote": {"type": "STRING"}},
            },
        },
    }


def _extract_quote(payload: dict[str, Any]) -> str:
    text = payload["candidates"][0]["content"]["parts"][0]["text"].strip()
    if not text:
        return ""
    data = json.loads(text)
    return str(data.get("quote") or "").strip()


def generate_motivational_quote(
    current_earnings: float,
    progress: float,
    salary: float,
    is_rest_day: bool = False,
    *,
    settings: Optional[TickerSettings] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    One-line quote from the model, or "" when unconfigured or on failure.
    """
    if settings is None:
        settings = config
    if not settings.gemini_api_key:
        logger.info("API key not found, using fallback quotes.")
        return ""

    url = f"{settings.gemini_base_url.rstrip('/')}/models/{settings.gemini_model}:generateContent"
    body = _request_body(build_prompt(current_earnings, progress, salary, is_rest_day))
    headers = {"x-goog-api-key": settings.gemini_api_key}

    try:
        if client is None:
            with httpx.Client(timeout=settings.quote_timeout) as own_client:
                response = own_client.post(url, json=body, headers=headers)
        else:
            response = client.post(url, json=body, headers=headers)
        response.raise_for_status()
        return _extract_quote(response.json())
    except httpx.HTTPError as e:
        logger.error("Error generating quote: %s", e)
        return ""
    except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
        logger.error("Unexpected quote response: %s", e)
        return ""


def fallback_quote(is_rest_day: bool, rng: Optional[random.Random] = None) -> Quote:
    pool = REST_DAY_QUOTES if is_rest_day else FALLBACK_QUOTES
    return (rng or random).choice(pool)


def pick_quote(
    stats: WorkStats,
    salary: float,
    *,
    settings: Optional[TickerSettings] = None,
    client: Optional[httpx.Client] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Model quote when available, otherwise a random static one."""
    text = generate_motivational_quote(
        stats.current_earnings,
        stats.progress_percentage,
        salary,
        stats.is_rest_day,
        settings=settings,
        client=client,
    )
    return text or fallback_quote(stats.is_rest_day, rng).text

"""Prompt templates for the unmet-needs analysis."""

from textwrap import dedent
from typing import Sequence

SYSTEM_PROMPT = (
    "You are an expert product strategist and startup advisor with experience launching "
    "consumer-facing mobile apps. You must respond with a valid JSON object in the exact "
    "format specified, with no additional text or explanations. The response must be parseable JSON."
)

ANALYSIS_PROMPT = dedent("""
I want to explore unmet needs and potential business opportunities based on competitors in the App Store. Analyze these App Store reviews and provide insights in the following JSON format. When doing the analysis, put an emphasis on topics that suggest potential for a new entrant in the market, and less of an emphasis on minor issues like customer service or minor UI complaints. Return ONLY the JSON object, with no additional text or explanations:

{
  "themes": [
    {
      "title": "string",
      "summary": "string",
      "quote": "string",
      "impact": "High|Medium|Low",
      "feature": "string"
    }
  ],
  "prioritizedThemes": [
    {
      "title": "string",
      "impact": "High|Medium|Low"
    }
  ]
}

Requirements:
- Return 3-5 themes
- Each theme must have all fields filled
- Impact must be exactly "High", "Medium", or "Low"
- Prioritized themes should be ordered by impact (High first)
- The review quote should be a verbatim quote from the reviews, do not make up anything
- Return ONLY the JSON object, with no additional text or explanations
- Ensure the response is valid JSON that can be parsed

Reviews:
""").strip()


def build_prompt(reviews: Sequence[str]) -> str:
    """Build the user message: instructions followed by the review blocks."""
    return f"{ANALYSIS_PROMPT}\n" + "\n\n".join(reviews)

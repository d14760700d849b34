# ABOUTME: LLM API client for generating bunk excuses and decision analysis
# ABOUTME: Uses Google Gemini 2.5 Flash-Lite with canned fallbacks when the API is unavailable

import logging
import random
from typing import Optional

import google.generativeai as genai

from bunkmate.debug import debug_log

log = logging.getLogger(__name__)

MODEL_NAME = "gemini-2.5-flash-lite"

FALLBACK_EXCUSES = [
    "I'm feeling a bit under the weather today - might have caught something from the hostel mess.",
    "Had a family emergency that needs my immediate attention.",
    "Feeling really unwell today, don't want to risk spreading anything to classmates.",
    "Transportation issues due to the weather conditions.",
    "Need to handle an urgent administrative matter at the university office.",
]


def fallback_excuse(mood: str, weather_condition: str, rng: Optional[random.Random] = None) -> str:
    """Canned excuse picked from mood and weather"""
    if "rain" in weather_condition.lower():
        return "The heavy rain has caused severe transportation issues in my area."
    if mood == "tired":
        return "I'm feeling really unwell today and need to rest to recover properly."
    if mood == "lazy":
        return "I have a family commitment that I can't postpone."

    return (rng or random).choice(FALLBACK_EXCUSES)


def fallback_analysis(attendance_percentage: float, days_until_exam: int, decision: str) -> str:
    """Canned analysis keyed by decision"""
    if decision == "bunk":
        return (
            f"Your attendance is at {attendance_percentage:g}%, which gives you some flexibility. "
            f"With {days_until_exam} days until your exam, you have time to catch up on missed material."
        )
    if decision == "risky":
        return (
            f"Your attendance is at {attendance_percentage:g}%, which is borderline. "
            "Consider the importance of today's class content before making your final decision."
        )
    return (
        f"Your attendance is at {attendance_percentage:g}%, and with only {days_until_exam} days "
        "until your exam, it's better to attend and stay on track."
    )


class LLMClient:
    """Client for generating excuses and analysis via LLM API"""

    def __init__(self, api_key: str):
        self.model = None
        if not api_key:
            log.warning("Gemini API key not found. AI features will use fallback responses.")
            return

        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(MODEL_NAME)

    def _generate(self, prompt: str, max_output_tokens: int, temperature: float) -> Optional[str]:
        """Run one prompt, returning stripped text or None on any failure"""
        if self.model is None:
            return None

        debug_log(f"Prompt length: {len(prompt)} chars", "LLM")

        try:
            response = self.model.generate_content(
                prompt,
                generation_config=genai.GenerationConfig(
                    max_output_tokens=max_output_tokens,
                    temperature=temperature,
                )
            )
            text = (response.text or "").strip()
            debug_log(f"Response length: {len(text)} chars", "LLM")
            return text or None
        except Exception as e:
            # Any SDK or transport failure degrades to the canned text
            log.error(f"LLM API error: {e}")
            return None

    def generate_excuse(
        self,
        mood: str,
        weather_condition: str,
        professor_strictness: str,
        attendance_percentage: float
    ) -> str:
        """
        Generate a believable excuse for missing class

        Args:
            mood: "tired", "lazy" or "energetic"
            weather_condition: Current weather description
            professor_strictness: "chill", "moderate" or "strict"
            attendance_percentage: Current attendance (0-100)

        Returns:
            1-2 sentence excuse
        """
        prompt = f"""Generate a believable and creative excuse for missing class. Context:
- Student is feeling: {mood}
- Weather condition: {weather_condition}
- Professor is: {professor_strictness}
- Current attendance: {attendance_percentage}%

The excuse should be:
- Brief (1-2 sentences)
- Believable but creative
- Appropriate for the context
- Slightly humorous if possible

Excuse:"""

        text = self._generate(prompt, max_output_tokens=100, temperature=0.8)
        return text or fallback_excuse(mood, weather_condition)

    def generate_analysis(
        self,
        attendance_percentage: float,
        days_until_exam: int,
        mood: str,
        bunk_score: int,
        decision: str
    ) -> str:
        """
        Generate a short analysis explaining the decision

        Args:
            attendance_percentage: Current attendance (0-100)
            days_until_exam: Days until the next exam
            mood: Student mood
            bunk_score: 0-100 bunk score
            decision: "bunk", "risky" or "attend"

        Returns:
            2-3 sentence analysis
        """
        prompt = f"""Provide a smart analysis for a student's class attendance decision. Context:
- Current attendance: {attendance_percentage}%
- Days until next exam: {days_until_exam}
- Student mood: {mood}
- Calculated bunk score: {bunk_score}/100
- AI recommendation: {decision}

Provide a brief analysis (2-3 sentences) that:
- Explains the reasoning behind the decision
- Considers the attendance percentage and exam timing
- Gives practical advice
- Is supportive but realistic

Analysis:"""

        text = self._generate(prompt, max_output_tokens=150, temperature=0.7)
        return text or fallback_analysis(attendance_percentage, days_until_exam, decision)

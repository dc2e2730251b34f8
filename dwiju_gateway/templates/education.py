"""Education prompts: quiz generation, expert answers, study planning.

Quiz and planner prompts ask for JSON only; the model does not always
comply, so their output goes through structured extraction.
"""

from __future__ import annotations

from dwiju_gateway.models.requests import Capability, EducationRequest, EducationTask
from dwiju_gateway.templates.base import PromptTemplate

EDUCATION_PERSONA = (
    "You are Dwiju Education AI, an expert teacher created by students at BHILODIYA "
    "PRIMARY SCHOOL, Gujarat. You help students learn in Gujarati, Hindi, and English. "
    "Always be encouraging and supportive."
)

STRUCTURED_TASKS = frozenset({EducationTask.QUIZ.value, EducationTask.PLANNER.value})

_QUIZ_FORMAT = """{
  "title": "Quiz title",
  "questions": [
    {
      "question": "Question text",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correct": 0,
      "explanation": "Brief explanation"
    }
  ]
}"""

_PLAN_FORMAT = """{
  "planTitle": "Study Plan Title",
  "duration": "X weeks/days",
  "dailyHours": 2,
  "schedule": [
    {
      "day": "Day 1",
      "topic": "Topic name",
      "activities": ["Activity 1", "Activity 2"],
      "resources": ["Resource 1"],
      "goals": "What to achieve"
    }
  ],
  "tips": ["Tip 1", "Tip 2"]
}"""


def _quiz(req: EducationRequest) -> str:
    return (
        f'Generate a quiz with 5 multiple choice questions about "{req.topic}" in {req.subject}.\n'
        f"Difficulty: {req.difficulty}\n"
        f"Language: {req.language}\n\n"
        "Return ONLY valid JSON in this exact format:\n"
        f"{_QUIZ_FORMAT}"
    )


def _expert(req: EducationRequest) -> str:
    return (
        f"You are a {req.subject} expert teacher. Answer this student's question in {req.language}:\n\n"
        f'"{req.question}"\n\n'
        "Provide a clear, educational explanation suitable for school students. "
        "Include examples if helpful."
    )


def _planner(req: EducationRequest) -> str:
    return (
        f'Create a study plan for a student with this goal: "{req.study_goal}"\n'
        f"Language: {req.language}\n\n"
        "Return ONLY valid JSON in this exact format:\n"
        f"{_PLAN_FORMAT}"
    )


EDUCATION_TEMPLATES = [
    PromptTemplate(Capability.EDUCATION, EducationTask.QUIZ.value, _quiz, EDUCATION_PERSONA),
    PromptTemplate(Capability.EDUCATION, EducationTask.EXPERT.value, _expert, EDUCATION_PERSONA),
    PromptTemplate(Capability.EDUCATION, EducationTask.PLANNER.value, _planner, EDUCATION_PERSONA),
]

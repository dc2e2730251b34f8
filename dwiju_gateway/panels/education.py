"""Education panel: quizzes with scoring, expert answers, study plans.

Quiz and plan answers come back either as a JSON object or as plain text.
Both cases are handled: a parsed object is shown in its structured view,
anything else in a text view.
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from dwiju_gateway.models.requests import Capability, EducationTask
from dwiju_gateway.models.schemas import Quiz, StudyPlan
from dwiju_gateway.models.structured import Structured, Unstructured, from_payload
from dwiju_gateway.panels.base import Panel


class EducationPanel(Panel):
    capability = Capability.EDUCATION

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.subject = "Mathematics"
        self.language = "English"

        self.quiz_topic = ""
        self.difficulty = "medium"
        self.quiz: Quiz | None = None
        self.quiz_text = ""
        self.answers: dict[int, int] = {}
        self.show_results = False

        self.expert_question = ""
        self.expert_answer = ""

        self.study_goal = ""
        self.plan: StudyPlan | None = None
        self.plan_text = ""

    # -- quiz ---------------------------------------------------------------

    async def generate_quiz(self) -> bool:
        if not self.require(self.quiz_topic, message="Please enter a topic"):
            return False

        envelope = await self.invoke(
            {
                "type": EducationTask.QUIZ.value,
                "subject": self.subject,
                "topic": self.quiz_topic,
                "difficulty": self.difficulty,
                "language": self.language,
            },
            failure_message="Failed to generate quiz",
        )
        if envelope is None:
            return False

        output = from_payload(envelope.get("data"))
        quiz = _validate(Quiz, output)
        if quiz is not None and quiz.questions:
            self.quiz, self.quiz_text = quiz, ""
            self.notifier.success("Quiz generated! 🎯")
        else:
            self.quiz, self.quiz_text = None, _as_text(output)
            self.notifier.info("Quiz returned as text")
        self.answers = {}
        self.show_results = False
        return True

    def answer(self, question_index: int, option_index: int) -> None:
        if self.show_results:
            return
        self.answers[question_index] = option_index

    def score(self) -> int:
        if self.quiz is None:
            return 0
        return sum(
            1
            for index, question in enumerate(self.quiz.questions)
            if question.correct is not None and self.answers.get(index) == question.correct
        )

    def submit_quiz(self) -> int:
        self.show_results = True
        total = len(self.quiz.questions) if self.quiz else 0
        result = self.score()
        self.notifier.success(f"Score: {result}/{total} 🎉")
        return result

    # -- expert -------------------------------------------------------------

    async def ask_expert(self) -> bool:
        if not self.require(self.expert_question, message="Please enter your question"):
            return False

        envelope = await self.invoke(
            {
                "type": EducationTask.EXPERT.value,
                "subject": self.subject,
                "question": self.expert_question,
                "language": self.language,
            },
            failure_message="Failed to get answer",
        )
        if envelope is None:
            return False

        self.expert_answer = _as_text(from_payload(envelope.get("data")))
        self.notifier.success("Answer received! 📚")
        return True

    # -- planner ------------------------------------------------------------

    async def create_plan(self) -> bool:
        if not self.require(self.study_goal, message="Please enter your study goal"):
            return False

        envelope = await self.invoke(
            {
                "type": EducationTask.PLANNER.value,
                "studyGoal": self.study_goal,
                "language": self.language,
            },
            failure_message="Failed to create study plan",
        )
        if envelope is None:
            return False

        output = from_payload(envelope.get("data"))
        plan = _validate(StudyPlan, output)
        if plan is not None:
            self.plan, self.plan_text = plan, ""
        else:
            self.plan, self.plan_text = None, _as_text(output)
        self.notifier.success("Study plan created! 📅")
        return True


def _validate(model, output):
    if isinstance(output, Structured):
        try:
            return model.model_validate(output.value)
        except ValidationError:
            return None
    return None


def _as_text(output: Structured | Unstructured) -> str:
    if isinstance(output, Structured):
        return json.dumps(output.value, ensure_ascii=False, indent=2)
    return output.text

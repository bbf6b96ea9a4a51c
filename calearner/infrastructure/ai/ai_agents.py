from pydantic import BaseModel, Field
from pydantic_ai import Agent

from calearner.infrastructure.ai.ai_model import get_ai_model


class LessonContent(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    practical_tip: str
    example: str | None = None


def get_lesson_agent() -> Agent[None, LessonContent]:
    return Agent(
        get_ai_model(),
        output_type=LessonContent,
        instructions="""
        You write one short daily micro-lesson for a self-improvement learning app.
        The user gives you a track (or a custom topic) and the date of the lesson.

        Generate:
        1. A catchy, specific title (max 8 words)
        2. The lesson body: 120-200 words of plain prose explaining ONE idea,
           readable in about two minutes
        3. A practical tip: one sentence the reader can act on today
        4. Optionally a short concrete example illustrating the idea

        Pick a different idea for different dates so lessons do not repeat.
        Do not use markdown headings. Do not address the user by name.
        """,
    )

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.question.generator import QuestionGenerator

PROMPT_DIR = Path(__file__).resolve().parents[1] / "app" / "question" / "prompt"


def make_response(args=None, name="emit_questions"):
    """Gemini generate_content 응답 흉내 (function_calls 편의 속성만 채움)"""
    return SimpleNamespace(
        function_calls=[SimpleNamespace(name=name, args=args)],
        candidates=None,
    )


def echo_interviewer_lines(*, model, contents, config):
    """대본 프롬프트에서 'Interviewer:' 줄만 골라 그대로 돌려주는 provider stub"""
    transcript = contents.split("<transcript>", 1)[1].split("</transcript>", 1)[0]
    questions = [
        line.split(":", 1)[1].strip()
        for line in transcript.strip().splitlines()
        if line.startswith("Interviewer:")
    ]
    return make_response({"questions": questions})


@pytest.fixture
def genai_client():
    return MagicMock()


@pytest.fixture
def generator(genai_client):
    return QuestionGenerator(
        client=genai_client,
        model="gemini-test",
        question_tool_path=PROMPT_DIR / "tool" / "emit_questions.json",
        transcript_user_prompt_path=PROMPT_DIR / "user" / "transcript.md",
        video_user_prompt_path=PROMPT_DIR / "user" / "video.md",
    )

import pytest
from pydantic import ValidationError

from app.question.schema import ExtractionResult, QuestionRequest, QuestionResponse, VideoExtractionRequest


def test_extraction_result_collapses_exact_duplicates_in_order():
    """대소문자/공백만 다른 중복 질문은 처음 나온 하나만 남아야 한다."""
    result = ExtractionResult(questions=[
        "Why did you leave?",
        "Tell me about yourself?",
        "why did  you leave?",
    ])

    assert result.questions == ["Why did you leave?", "Tell me about yourself?"]


def test_extraction_result_accepts_numbered_text_block():
    """이전 형식(번호 매긴 텍스트 블록)은 리스트로 정규화되어야 한다."""
    result = ExtractionResult.model_validate({"questions": "1. Tell me about yourself?\n2. Why did you leave?"})

    assert result.questions == ["Tell me about yourself?", "Why did you leave?"]


def test_extraction_result_allows_no_questions():
    assert ExtractionResult(questions=[]).questions == []


@pytest.mark.parametrize("payload", [
    {},
    {"questions": None},
    {"questions": [1, 2]},
    {"questions": ["Why?", "   "]},
    {"questions": {"q": "Why?"}},
])
def test_extraction_result_rejects_non_conforming_payload(payload):
    with pytest.raises(ValidationError):
        ExtractionResult.model_validate(payload)


def test_request_models_accept_wire_aliases():
    """UI에서 쓰는 camelCase 필드명으로도 요청을 만들 수 있어야 한다."""
    assert QuestionRequest.model_validate({"videoMedia": "data:x"}).video_media == "data:x"
    assert VideoExtractionRequest.model_validate({"videoDataUri": "data:x"}).video_data_uri == "data:x"


def test_question_response_requires_exactly_one_field():
    with pytest.raises(ValidationError):
        QuestionResponse()
    with pytest.raises(ValidationError):
        QuestionResponse(questions=["A?"], error="boom")

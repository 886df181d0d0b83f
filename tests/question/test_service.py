from unittest.mock import MagicMock

import pytest

from app.question.exception import InvalidInputError, ProviderError, SchemaViolationError
from app.question.generator import QuestionGenerator
from app.question.schema import ExtractionResult, TranscriptExtractionRequest, VideoExtractionRequest
from app.question.service import QuestionService

VIDEO_URI = "data:video/mp4;base64,aGVsbG8="


@pytest.fixture
def mock_generator():
    generator = MagicMock(spec=QuestionGenerator)
    generator.extract_from_transcript.return_value = ExtractionResult(questions=["Why?"])
    generator.extract_from_video.return_value = ExtractionResult(questions=["Why?"])
    return generator


@pytest.mark.asyncio
async def test_transcript_request_uses_transcript_prompt(mock_generator):
    service = QuestionService(generator=mock_generator)

    result = await service.extract(TranscriptExtractionRequest(transcript="  Interviewer: Why?  "))

    assert result.questions == ["Why?"]
    mock_generator.extract_from_transcript.assert_called_once_with("Interviewer: Why?")
    mock_generator.extract_from_video.assert_not_called()


@pytest.mark.asyncio
async def test_video_request_decodes_data_uri(mock_generator):
    service = QuestionService(generator=mock_generator)

    await service.extract(VideoExtractionRequest(video_data_uri=VIDEO_URI))

    mock_generator.extract_from_video.assert_called_once_with("video/mp4", b"hello")


@pytest.mark.asyncio
@pytest.mark.parametrize("request_", [
    TranscriptExtractionRequest(transcript=""),
    TranscriptExtractionRequest(transcript=" \n\t "),
    VideoExtractionRequest(video_data_uri=""),
    VideoExtractionRequest(video_data_uri="not-a-data-uri"),
    VideoExtractionRequest(video_data_uri="data:image/png;base64,aGVsbG8="),
])
async def test_invalid_input_never_reaches_provider(mock_generator, request_):
    """비어 있거나 잘못된 입력은 Gemini를 호출하기 전에 InvalidInputError로 거절되어야 한다."""
    service = QuestionService(generator=mock_generator)

    with pytest.raises(InvalidInputError):
        await service.extract(request_)

    mock_generator.extract_from_transcript.assert_not_called()
    mock_generator.extract_from_video.assert_not_called()


@pytest.mark.asyncio
async def test_generator_errors_propagate_unchanged(mock_generator):
    mock_generator.extract_from_transcript.side_effect = SchemaViolationError("no function call")
    service = QuestionService(generator=mock_generator)

    with pytest.raises(SchemaViolationError):
        await service.extract(TranscriptExtractionRequest(transcript="Interviewer: Why?"))


@pytest.mark.asyncio
async def test_unexpected_error_becomes_provider_error(mock_generator):
    mock_generator.extract_from_transcript.side_effect = RuntimeError("connection reset")
    service = QuestionService(generator=mock_generator)

    with pytest.raises(ProviderError) as exc_info:
        await service.extract(TranscriptExtractionRequest(transcript="Interviewer: Why?"))
    assert "connection reset" in str(exc_info.value)


@pytest.mark.asyncio
async def test_recorded_webm_with_codec_list_is_accepted(mock_generator):
    service = QuestionService(generator=mock_generator)

    await service.extract(VideoExtractionRequest(video_data_uri="data:video/webm;codecs=vp8,opus;base64,aGVsbG8="))

    mock_generator.extract_from_video.assert_called_once_with("video/webm", b"hello")

"""질문 추출 요청 처리 (호출자에게 예외를 던지지 않고 항상 questions 또는 error를 반환)"""

import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from app.constants import ErrorMessages
from app.exception import BusinessException
from app.question.schema import (
    ExtractionRequest,
    QuestionRequest,
    QuestionResponse,
    TranscriptExtractionRequest,
    VideoExtractionRequest,
)
from app.question.service import QuestionService

logger = logging.getLogger(__name__)


def _failure(message: str) -> QuestionResponse:
    return QuestionResponse(error=ErrorMessages.EXTRACTION_FAILED.format(message=message))


def _to_extraction_request(
    request: QuestionRequest,
    max_video_size_mb: Optional[int],
) -> Union[ExtractionRequest, str]:
    if request.video_media is not None:
        if not request.video_media.strip():
            return ErrorMessages.VIDEO_EMPTY
        # Data URI 길이 = Gemini에 inline으로 실리는 base64 크기
        if max_video_size_mb is not None and len(request.video_media) > max_video_size_mb * 1024 * 1024:
            return ErrorMessages.VIDEO_TOO_LARGE.format(max_mb=max_video_size_mb)
        return VideoExtractionRequest(video_data_uri=request.video_media)

    if not request.transcript or not request.transcript.strip():
        return ErrorMessages.TRANSCRIPT_EMPTY
    return TranscriptExtractionRequest(transcript=request.transcript)


async def handle(
    raw_input: Any,
    service: QuestionService,
    max_video_size_mb: Optional[int] = None,
) -> QuestionResponse:
    if isinstance(raw_input, QuestionRequest):
        request = raw_input
    else:
        try:
            request = QuestionRequest.model_validate(raw_input or {})
        except ValidationError as e:
            logger.warning(f"[QuestionHandler] ▶ 요청 형식 오류 | error={e}")
            return _failure("request must contain a transcript or videoMedia string.")

    extraction_request = _to_extraction_request(request, max_video_size_mb)
    if isinstance(extraction_request, str):
        return QuestionResponse(error=extraction_request)

    try:
        result = await service.extract(extraction_request)
    except BusinessException as e:
        logger.exception(f"[QuestionHandler] ▶ 질문 추출 실패 | error_code={e.error_code} | error={e}")
        return _failure(str(e))
    except Exception as e:
        logger.exception(f"[QuestionHandler] ▶ 질문 추출 중 예상치 못한 오류 | error={e}")
        return _failure(str(e) or ErrorMessages.UNEXPECTED)

    return QuestionResponse(questions=result.questions)

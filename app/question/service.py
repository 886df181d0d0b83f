import asyncio
import logging

from app.constants import UploadConfig
from app.question.exception import InvalidInputError, ProviderError, QuestionException
from app.question.generator import QuestionGenerator
from app.question.schema import (
    ExtractionRequest,
    ExtractionResult,
    TranscriptExtractionRequest,
    VideoExtractionRequest,
)
from app.utils.data_uri import DataUri, parse_data_uri


class QuestionService:
    def __init__(self, generator: QuestionGenerator):
        self.logger = logging.getLogger(__name__)
        self.generator = generator

    @staticmethod
    def _parse_video(video_data_uri: str) -> DataUri:
        try:
            media = parse_data_uri(video_data_uri)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        if not media.mime_type.startswith(UploadConfig.ALLOWED_MIME_PREFIX):
            raise InvalidInputError(f"unsupported media type: {media.mime_type}")
        return media

    async def extract(self, request: ExtractionRequest) -> ExtractionResult:
        """
        1) 입력값을 검증합니다. (비어 있거나 형식이 잘못되면 Gemini를 호출하지 않음)
        2) 영상이면 Data URI를 바이트로 풀어 영상 프롬프트로, 대본이면 대본 프롬프트로 질문을 추출합니다.
        """
        if isinstance(request, VideoExtractionRequest):
            media = self._parse_video(request.video_data_uri)
            self.logger.info(f"[QuestionService] ▶ 영상 질문 추출 시작 | mime_type={media.mime_type} | size={len(media.data)}")
            call = (self.generator.extract_from_video, media.mime_type, media.data)
        elif isinstance(request, TranscriptExtractionRequest):
            transcript = (request.transcript or "").strip()
            if not transcript:
                raise InvalidInputError("transcript is empty")
            self.logger.info(f"[QuestionService] ▶ 대본 질문 추출 시작 | length={len(transcript)}")
            call = (self.generator.extract_from_transcript, transcript)
        else:
            raise InvalidInputError(f"unsupported request type: {type(request).__name__}")

        try:
            return await asyncio.to_thread(*call)
        except QuestionException:
            raise
        except Exception as e:
            self.logger.error(f"[QuestionService] ▶ 질문 추출 중 예상치 못한 오류 발생 | error={e}")
            raise ProviderError(str(e) or type(e).__name__) from e

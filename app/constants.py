"""
애플리케이션 전역 상수 정의
"""


class GeminiConfig:
    """Gemini 호출 관련 설정"""
    DEFAULT_MODEL = "gemini-2.5-flash"
    DEFAULT_TIMEOUT_MS = 120_000
    TEMPERATURE = 0.0
    FUNCTION_NAME = "emit_questions"


class QuestionConfig:
    """질문 추출 관련 설정"""
    # 원본이 충분할 때 목표로 하는 최소 질문 수 (부족하면 채우지 않는다)
    MIN_TARGET_QUESTIONS = 10


class UploadConfig:
    """영상 업로드 관련 설정"""
    # Gemini inline 요청 한도 (~20MB, base64 인코딩 후 기준)
    MAX_FILE_SIZE_MB = 20
    DEFAULT_VIDEO_MIME_TYPE = "video/mp4"
    ALLOWED_MIME_PREFIX = "video/"
    READ_CHUNK_SIZE = 1024 * 1024


class ErrorMessages:
    """사용자에게 노출되는 에러 메시지 상수"""
    TRANSCRIPT_EMPTY = "Transcript cannot be empty."
    VIDEO_EMPTY = "Video cannot be empty."
    VIDEO_TOO_LARGE = "Video is too large (max {max_mb} MB)."
    EXTRACTION_FAILED = "Failed to extract questions: {message}"
    UNEXPECTED = "An unexpected error occurred."

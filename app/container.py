from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from dependency_injector import containers, providers
from google import genai
from google.genai import types

from app.constants import GeminiConfig, QuestionConfig, UploadConfig
from app.gemini_safety import interview_safety_settings
from app.question.generator import QuestionGenerator
from app.question.service import QuestionService

PROMPT_DIR = Path(__file__).resolve().parent / "question" / "prompt"


class Container(containers.DeclarativeContainer):
    """의존성 주입 컨테이너"""

    # Configuration
    wiring_config = containers.WiringConfiguration(
        modules=["app.question.router"],
        auto_wire=False,
    )
    config = providers.Configuration()
    config.google.api_key.from_env("GOOGLE_API_KEY")

    config.gemini.model.from_env("GEMINI_MODEL", default=GeminiConfig.DEFAULT_MODEL)
    config.gemini.timeout_ms.from_env("GEMINI_TIMEOUT_MS", default=GeminiConfig.DEFAULT_TIMEOUT_MS, as_=int)
    config.gemini.safety_threshold.from_env("GEMINI_SAFETY_THRESHOLD", default="BLOCK_ONLY_HIGH")

    config.upload.max_size_mb.from_env("MAX_VIDEO_SIZE_MB", default=UploadConfig.MAX_FILE_SIZE_MB, as_=int)

    # Gemini
    genai_client = providers.Singleton(
        genai.Client,
        api_key=config.google.api_key,
        http_options=providers.Factory(
            types.HttpOptions,
            timeout=config.gemini.timeout_ms,
        ),
    )

    # Question
    question_generator = providers.Singleton(
        QuestionGenerator,
        client=genai_client,
        model=config.gemini.model,
        min_questions=QuestionConfig.MIN_TARGET_QUESTIONS,
        safety_settings=providers.Callable(
            interview_safety_settings,
            threshold=config.gemini.safety_threshold,
        ),

        question_tool_path=PROMPT_DIR / "tool" / "emit_questions.json",
        transcript_user_prompt_path=PROMPT_DIR / "user" / "transcript.md",
        video_user_prompt_path=PROMPT_DIR / "user" / "video.md",
    )
    question_service = providers.Factory(
        QuestionService,
        generator=question_generator,
    )


# 전역 컨테이너 인스턴스
container = Container()

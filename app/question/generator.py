import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError

from app.constants import GeminiConfig, QuestionConfig
from app.question.exception import ProviderError, SchemaViolationError
from app.question.schema import ExtractionResult


class QuestionGenerator:
    ALLOWED_FUNCTION_NAME = GeminiConfig.FUNCTION_NAME

    def __init__(
        self,
        *,
        client: genai.Client,
        model: str,
        question_tool_path: Path,
        transcript_user_prompt_path: Path,
        video_user_prompt_path: Path,
        min_questions: int = QuestionConfig.MIN_TARGET_QUESTIONS,
        safety_settings: Optional[List[types.SafetySetting]] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.client = client
        self.model = model
        self.min_questions = min_questions

        self.transcript_user_prompt = transcript_user_prompt_path.read_text(encoding="utf-8")
        self.video_user_prompt = video_user_prompt_path.read_text(encoding="utf-8")

        question_tool_spec = json.loads(question_tool_path.read_text(encoding="utf-8"))
        self.question_tool = self._build_tool_from_spec(question_tool_spec)

        self.system_instruction = (
            "You must respond by calling the provided function. "
            "Do not generate natural language text outside of a function call. "
            "If no interviewer questions are found, call the function with an empty list.\n"
            "Only return questions that were actually asked by the interviewer."
        )

        self.question_conf = types.GenerateContentConfig(
            system_instruction=self.system_instruction,
            temperature=GeminiConfig.TEMPERATURE,
            tools=[self.question_tool],
            tool_config=types.ToolConfig(
                function_calling_config=types.FunctionCallingConfig(
                    mode="ANY",
                    allowed_function_names=[self.ALLOWED_FUNCTION_NAME],
                )
            ),
            safety_settings=safety_settings,
        )

    @staticmethod
    def _build_tool_from_spec(tool_list: list) -> types.Tool:
        if not tool_list:
            raise ValueError("Question tool spec list is empty")

        tool_spec = tool_list[0].get("toolSpec") or {}
        name = tool_spec.get("name")
        description = tool_spec.get("description", "")
        json_schema = (tool_spec.get("inputSchema") or {}).get("json") or {}

        if not name:
            raise ValueError("toolSpec.name is required in question tool spec JSON")

        fn_decl = {"name": name, "description": description, "parameters": json_schema}
        return types.Tool(function_declarations=[fn_decl])

    @staticmethod
    def _render_prompt(template: str, **vars: str) -> str:
        out = template
        for k, v in vars.items():
            out = out.replace(f"{{{{ {k} }}}}", v)
        return out

    def _call_for_questions(self, contents: Any, input_kind: str) -> ExtractionResult:
        self.logger.info(f"[QuestionGenerator] ▶ Gemini API 호출 시도 | model={self.model} | input={input_kind}")
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=self.question_conf,
            )
        except genai_errors.APIError as e:
            self.logger.exception("[QuestionGenerator] ▶ Gemini API 호출 중 오류가 발생했습니다.")
            raise ProviderError(getattr(e, "message", None) or str(e)) from e
        except Exception as e:
            self.logger.exception("[QuestionGenerator] ▶ Gemini API 호출 중 예기치 못한 오류가 발생했습니다.")
            raise ProviderError(str(e) or type(e).__name__) from e

        question_args = self._extract_emit_questions_args(response)
        result = self._parse_questions(question_args)
        self.logger.info(f"[QuestionGenerator] ▶ 질문 추출 완료 | count={len(result.questions)}")
        return result

    def _extract_emit_questions_args(self, response) -> dict:
        calls = list(getattr(response, "function_calls", None) or [])

        if not calls and getattr(response, "candidates", None):
            for cand in response.candidates:
                content = getattr(cand, "content", None)
                if not content:
                    continue
                for part in getattr(content, "parts", []) or []:
                    fc = getattr(part, "function_call", None)
                    if fc:
                        calls.append(fc)

        for call in calls:
            if getattr(call, "name", None) == self.ALLOWED_FUNCTION_NAME:
                return call.args or {}

        self.logger.error("[QuestionGenerator] ▶ Gemini가 emit_questions를 호출하지 않았습니다.")
        raise SchemaViolationError(f"no {self.ALLOWED_FUNCTION_NAME} function call in response")

    def _parse_questions(self, question_args: dict) -> ExtractionResult:
        try:
            return ExtractionResult.model_validate(question_args)
        except ValidationError as e:
            self.logger.exception("[QuestionGenerator] ▶ Gemini API 응답 형식이 올바르지 않습니다.")
            raise SchemaViolationError(
                "; ".join(err["msg"] for err in e.errors()) or str(e)
            ) from e

    def extract_from_transcript(self, transcript: str) -> ExtractionResult:
        user_prompt = self._render_prompt(
            self.transcript_user_prompt,
            min_questions=str(self.min_questions),
            transcript=transcript,
        )
        return self._call_for_questions(user_prompt, "transcript")

    def extract_from_video(self, mime_type: str, data: bytes) -> ExtractionResult:
        user_prompt = self._render_prompt(
            self.video_user_prompt,
            min_questions=str(self.min_questions),
        )
        contents = [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_bytes(data=data, mime_type=mime_type),
                    types.Part.from_text(text=user_prompt),
                ],
            )
        ]
        return self._call_for_questions(contents, f"video({mime_type}, {len(data)} bytes)")

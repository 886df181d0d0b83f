from __future__ import annotations

import re
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.utils.numbering import split_numbered_questions


class VideoExtractionRequest(BaseModel):
    """영상 기반 질문 추출 요청"""
    model_config = ConfigDict(populate_by_name=True)

    video_data_uri: str = Field(
        ...,
        alias="videoDataUri",
        description="면접 영상 Data URI ('data:<mimetype>;base64,<encoded_data>')",
    )


class TranscriptExtractionRequest(BaseModel):
    """대본 기반 질문 추출 요청"""
    transcript: str = Field(..., description="면접 대본 (화자 구분 포함)")


ExtractionRequest = Union[VideoExtractionRequest, TranscriptExtractionRequest]


class ExtractionResult(BaseModel):
    """질문 추출 결과"""
    questions: List[str] = Field(..., description="면접관이 한 질문 목록 (번호 없이 질문당 1개)")

    @field_validator("questions", mode="before")
    @classmethod
    def _accept_numbered_block(cls, value):
        # 이전 형식: 번호가 매겨진 하나의 텍스트 블록
        if isinstance(value, str):
            return split_numbered_questions(value)
        return value

    @field_validator("questions")
    @classmethod
    def _clean_questions(cls, value: List[str]) -> List[str]:
        seen: set[str] = set()
        questions: List[str] = []
        for raw in value:
            question = raw.strip()
            if not question:
                raise ValueError("questions must not contain empty entries")
            key = re.sub(r"\s+", " ", question).casefold()
            if key in seen:
                continue
            seen.add(key)
            questions.append(question)
        return questions


class QuestionRequest(BaseModel):
    """질문 추출 API 요청 (대본 또는 영상 중 하나)"""
    model_config = ConfigDict(populate_by_name=True)

    transcript: Optional[str] = Field(None, description="면접 대본")
    video_media: Optional[str] = Field(None, alias="videoMedia", description="면접 영상 Data URI")


class QuestionResponse(BaseModel):
    """질문 추출 API 응답 (questions 또는 error 중 하나)"""
    questions: Optional[List[str]] = Field(None, description="추출된 질문 목록")
    error: Optional[str] = Field(None, description="사용자에게 보여줄 에러 메시지")

    @model_validator(mode="after")
    def _exactly_one(self) -> "QuestionResponse":
        if (self.questions is None) == (self.error is None):
            raise ValueError("exactly one of questions or error must be set")
        return self


class HealthResponse(BaseModel):
    status: str

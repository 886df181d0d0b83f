"""
번호 매긴 질문 목록(텍스트 블록) 변환 유틸리티
"""

import re
from typing import List

# "1.", "2)", "3 -", "-", "*", "•" 같은 목록 표시
_LIST_MARKER = re.compile(r"^\s*(?:\d+\s*[.)\-:]|[-*•])\s*")


def split_numbered_questions(text: str) -> List[str]:
    """
    줄바꿈으로 구분된 번호 목록을 질문 리스트로 분리

    Args:
        text: 예) "1. Tell me about yourself?\\n2. Why did you leave?"

    Returns:
        번호가 제거된 질문 리스트 (빈 줄 제외)
    """
    questions: List[str] = []
    for line in (text or "").splitlines():
        stripped = _LIST_MARKER.sub("", line, count=1).strip()
        if stripped:
            questions.append(stripped)
    return questions


def format_numbered_questions(questions: List[str]) -> str:
    return "\n".join(f"{i}. {q}" for i, q in enumerate(questions, start=1))

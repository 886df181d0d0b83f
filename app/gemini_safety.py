from google.genai import types

_CATEGORIES = (
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
)


def parse_threshold(threshold: str) -> types.HarmBlockThreshold:
    name = (threshold or "").strip().upper()
    # 알 수 없는 값도 경고만 내고 통과시키는 SDK enum 대신 멤버 이름으로 직접 검증
    if name not in types.HarmBlockThreshold.__members__:
        allowed = ", ".join(types.HarmBlockThreshold.__members__)
        raise ValueError(f"GEMINI_SAFETY_THRESHOLD must be one of: {allowed} (got {threshold!r})")
    return types.HarmBlockThreshold[name]


def interview_safety_settings(threshold: str = "BLOCK_ONLY_HIGH") -> list[types.SafetySetting]:
    """면접 대본/영상용 안전 설정 (질문 추출이 막히지 않도록 높은 위험만 차단)"""
    block = parse_threshold(threshold)
    return [types.SafetySetting(category=category, threshold=block) for category in _CATEGORIES]

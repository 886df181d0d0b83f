"""
Data URI 처리 유틸리티 함수들
"""

import base64
import binascii
import re
from typing import NamedTuple

_MIME_TYPE_PATTERN = re.compile(r"^[\w.+-]+/[\w.+-]+$")
_BASE64_MARKER = ";base64,"


class DataUri(NamedTuple):
    mime_type: str
    data: bytes


def parse_data_uri(uri: str) -> DataUri:
    """
    `data:<mimetype>;base64,<payload>` 형식의 문자열을 MIME 타입과 바이트로 분리

    Args:
        uri: Data URI 문자열

    Returns:
        DataUri(mime_type, data)

    Raises:
        ValueError: 형식이 잘못됐거나 payload가 비어 있는 경우
    """
    if not uri or not uri.strip():
        raise ValueError("data URI is empty")

    # 파라미터 값에 쉼표가 올 수 있음 (예: codecs=vp8,opus)
    header, marker, payload = uri.strip().partition(_BASE64_MARKER)
    if not marker or not header.startswith("data:"):
        raise ValueError("expected 'data:<mimetype>;base64,<payload>'")

    mime_type = header[len("data:"):].split(";", 1)[0].strip()
    if not _MIME_TYPE_PATTERN.match(mime_type):
        raise ValueError(f"invalid mime type: {mime_type!r}")

    payload = re.sub(r"\s+", "", payload)
    if not payload:
        raise ValueError("data URI payload is empty")

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64 payload: {e}") from e

    return DataUri(mime_type=mime_type.lower(), data=data)


def to_data_uri(mime_type: str, data: bytes) -> str:
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"

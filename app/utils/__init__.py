"""
유틸리티 함수들 패키지
"""

from .data_uri import DataUri, parse_data_uri, to_data_uri
from .numbering import format_numbered_questions, split_numbered_questions

__all__ = [
    'DataUri',
    'parse_data_uri',
    'to_data_uri',
    'split_numbered_questions',
    'format_numbered_questions',
]

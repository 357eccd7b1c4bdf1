"""
상품 레코드 검증 모듈

에이징 엔진 입력(상품 목록)의 형식을 검증합니다.
"""

from src.validation.validation_result import (
    ValidationResult,
    ValidationError,
)
from src.validation.item_validator import InvalidItemError, ItemValidator

__all__ = [
    'ValidationResult',
    'ValidationError',
    'InvalidItemError',
    'ItemValidator',
]

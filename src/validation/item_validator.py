"""
상품 레코드 검증기

에이징 엔진에 넘기기 전에 상품 목록 전체를 검증합니다.
오류가 하나라도 있으면 어떤 상품도 갱신되지 않도록 tick 이전에 거부합니다.
"""
from collections.abc import Sequence
from typing import Any, Optional
from typing import Sequence as SequenceType

from src.domain.models import Item
from src.settings.constants import LEGENDARY_ITEMS, MAX_QUALITY, MIN_QUALITY
from src.validation.validation_result import ValidationResult


# =============================================================================
# 예외 클래스
# =============================================================================

class InvalidItemError(ValueError):
    """잘못된 상품 레코드 (tick 전에 거부됨)"""

    def __init__(self, result: ValidationResult):
        self.result = result
        first = result.errors[0] if result.errors else None
        detail = f" (첫 오류: [{first.error_code}] {first.error_message})" if first else ""
        super().__init__(f"잘못된 상품 레코드 {len(result.errors)}건{detail}")


def _is_int(value: Any) -> bool:
    # bool은 int 서브클래스지만 수량으로 인정하지 않음
    return isinstance(value, int) and not isinstance(value, bool)


class ItemValidator:
    """상품 레코드 검증기

    Usage:
        validator = ItemValidator()
        result = validator.validate(items)     # ValidationResult
        validator.ensure_valid(items)          # 오류 시 InvalidItemError
    """

    def validate(self, items: SequenceType[Optional[Item]]) -> ValidationResult:
        """상품 목록 검증 (메인 엔트리포인트)

        Args:
            items: 검증할 상품 목록 (list/tuple 등 재순회 가능한 시퀀스)

        Returns:
            ValidationResult: 검증 결과
        """
        result = ValidationResult()

        # 0. 목록 형식 검증 (generator 등 1회성 iterable은 검증 후 갱신할 수 없음)
        if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
            result.add_error(
                'INVALID_COLLECTION',
                f'상품 목록은 시퀀스여야 합니다: {type(items).__name__}',
                -1,
                metadata={'actual': type(items).__name__},
            )
            return result

        for index, item in enumerate(items):
            result.total_count += 1

            # 1. 누락(None) 검증
            if item is None:
                result.add_error('NULL_ITEM', '상품 레코드가 None입니다', index)
                result.failed_count += 1
                continue

            # 2. 타입 검증
            if not isinstance(item, Item):
                result.add_error(
                    'INVALID_TYPE',
                    f'Item 타입이 아닙니다: {type(item).__name__}',
                    index,
                    metadata={'actual': type(item).__name__},
                )
                result.failed_count += 1
                continue

            # 3. 필드 검증
            item_errors = 0
            name = item.name if isinstance(item.name, str) else None

            if not isinstance(item.name, str) or not item.name:
                result.add_error(
                    'INVALID_NAME',
                    f'상품명이 비어있거나 문자열이 아닙니다: {item.name!r}',
                    index,
                    metadata={'actual': repr(item.name)},
                )
                item_errors += 1

            if not _is_int(item.sell_in):
                result.add_error(
                    'INVALID_SELL_IN',
                    f'sell_in이 정수가 아닙니다: {item.sell_in!r}',
                    index,
                    item_name=name,
                    metadata={'actual': repr(item.sell_in)},
                )
                item_errors += 1

            if not _is_int(item.quality):
                result.add_error(
                    'INVALID_QUALITY',
                    f'quality가 정수가 아닙니다: {item.quality!r}',
                    index,
                    item_name=name,
                    metadata={'actual': repr(item.quality)},
                )
                item_errors += 1
            elif name not in LEGENDARY_ITEMS and not (MIN_QUALITY <= item.quality <= MAX_QUALITY):
                # 4. 품질 범위 (전설 아이템 제외)
                result.add_error(
                    'QUALITY_OUT_OF_RANGE',
                    f'품질 범위({MIN_QUALITY}~{MAX_QUALITY}) 밖: {item.quality}',
                    index,
                    item_name=name,
                    metadata={'min': MIN_QUALITY, 'max': MAX_QUALITY, 'actual': item.quality},
                )
                item_errors += 1

            if item_errors:
                result.failed_count += 1
                continue

            result.passed_count += 1

        return result

    def ensure_valid(self, items: SequenceType[Optional[Item]]) -> ValidationResult:
        """검증 후 오류가 있으면 예외

        Raises:
            InvalidItemError: 오류가 하나라도 있을 때
        """
        result = self.validate(items)
        if not result.is_valid:
            raise InvalidItemError(result)
        return result

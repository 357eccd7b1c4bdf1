"""
검증 결과 데이터 클래스

ValidationResult, ValidationError를 정의합니다.
"""
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional


@dataclass
class ValidationError:
    """검증 오류 정보

    에이징 엔진에 넘길 수 없는 상품 레코드임을 나타냅니다.
    """
    error_code: str                              # 'NULL_ITEM', 'INVALID_QUALITY', etc.
    error_message: str                           # 사람이 읽을 수 있는 오류 메시지
    index: int                                   # 목록 내 위치 (-1 = 목록 자체)
    item_name: Optional[str] = None              # 상품명 (알 수 있을 때)
    metadata: Optional[Dict[str, Any]] = None    # 추가 정보 (actual 등)


@dataclass
class ValidationResult:
    """검증 결과

    상품 목록 검증의 전체 결과를 담는 컨테이너입니다.
    """
    # 전체 결과
    is_valid: bool = True                        # 검증 통과 여부 (error가 없으면 True)

    # 통계
    total_count: int = 0                         # 검증한 레코드 수
    passed_count: int = 0                        # 통과한 레코드 수
    failed_count: int = 0                        # 실패한 레코드 수

    # 상세 정보
    errors: List[ValidationError] = field(default_factory=list)

    def add_error(
        self,
        error_code: str,
        error_message: str,
        index: int,
        item_name: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        """오류 추가

        Args:
            error_code: 오류 코드
            error_message: 오류 메시지
            index: 목록 내 위치
            item_name: 상품명
            metadata: 추가 정보
        """
        self.errors.append(ValidationError(
            error_code=error_code,
            error_message=error_message,
            index=index,
            item_name=item_name,
            metadata=metadata
        ))
        self.is_valid = False

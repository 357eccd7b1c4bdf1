"""
도메인 값 객체 (Value Objects)

재고 에이징 엔진에서 사용하는 데이터 구조를 정의합니다.
I/O 의존성 없이 순수 데이터 구조만 포함합니다.
"""

from dataclasses import dataclass, field
from typing import Any, List, Tuple


@dataclass
class Item:
    """재고 상품

    에이징 엔진이 tick마다 sell_in / quality를 직접(in-place) 변경합니다.
    name은 카테고리(전략) 판별 키이므로 생성 후 재할당하면 AttributeError.
    """
    name: str
    sell_in: int       # 남은 판매일 (0 = 마지막 판매일, 음수 = 기한 경과)
    quality: int       # 품질 점수 (일반 0~50, 전설 아이템은 예외)

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("Item.name은 변경할 수 없습니다")
        super().__setattr__(key, value)

    def __repr__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"

    def as_tuple(self) -> Tuple[str, int, int]:
        """(name, sell_in, quality) 튜플 (스냅샷/비교용)"""
        return (self.name, self.sell_in, self.quality)


@dataclass
class DaySnapshot:
    """특정 일자 시작 시점의 재고 상태

    day N = N번째 tick까지 적용된 상태 (day 0 = 초기 상태)
    """
    day: int
    items: List[Tuple[str, int, int]] = field(default_factory=list)


@dataclass
class AgingFlowResult:
    """DailyAgingFlow 실행 결과"""
    days: int = 0
    item_count: int = 0
    success: bool = False
    snapshots: List[DaySnapshot] = field(default_factory=list)

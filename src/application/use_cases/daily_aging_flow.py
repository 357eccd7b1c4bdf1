"""
DailyAgingFlow -- 일일 에이징 시뮬레이션 파이프라인

재고 상태를 기록(Snapshot)한 뒤 하루치 갱신(Tick)하는 과정을 지정 일수만큼 반복합니다.
엔진(InventoryAgingService)을 하루에 한 번만 호출하는 유일한 오케스트레이터입니다.

파이프라인 (일자별):
    기록(Snapshot) -> 갱신(Tick) -> 로그(Log)
"""

from typing import List, Optional

from src.application.services.aging_service import InventoryAgingService
from src.domain.models import AgingFlowResult, DaySnapshot, Item
from src.utils.logger import get_logger, log_with_context

logger = get_logger(__name__)


class DailyAgingFlow:
    """일일 에이징 시뮬레이션

    Usage:
        flow = DailyAgingFlow(default_inventory())
        result = flow.run(days=30)
        print(render_report(result))
    """

    def __init__(self, items: List[Item], service: Optional[InventoryAgingService] = None):
        """초기화

        Args:
            items: 시뮬레이션 대상 상품 목록 (in-place 변경됨)
            service: 에이징 서비스 (None이면 기본 레지스트리 사용)
        """
        self.items = items
        self.service = service or InventoryAgingService()

    def _snapshot(self, day: int) -> DaySnapshot:
        return DaySnapshot(day=day, items=[item.as_tuple() for item in self.items])

    def run(self, days: int) -> AgingFlowResult:
        """지정 일수만큼 시뮬레이션 실행

        day 0 ~ day N 상태를 기록합니다 (day N = 마지막 tick 이후 상태).

        Args:
            days: 진행할 일수 (0이면 초기 상태만 기록)

        Returns:
            AgingFlowResult

        Raises:
            ValueError: days가 음수일 때
            InvalidItemError: 잘못된 상품 레코드가 있을 때 (첫 tick 전에 거부)
        """
        if days < 0:
            raise ValueError(f"days는 0 이상이어야 합니다: {days}")

        # 첫 스냅샷 전에 전체 목록 검증 (days=0이어도 거부)
        self.service.validator.ensure_valid(self.items)

        logger.info(f"=== DailyAgingFlow 시작 === days={days}, items={len(self.items)}")

        result = AgingFlowResult(days=days, item_count=len(self.items))

        for day in range(days):
            result.snapshots.append(self._snapshot(day))
            self.service.tick(self.items)
            log_with_context(logger, "info", "일일 갱신 완료", day=day + 1, items=len(self.items))

        result.snapshots.append(self._snapshot(days))
        result.success = True

        logger.info(f"=== DailyAgingFlow 완료 === days={days}")
        return result


def render_report(result: AgingFlowResult) -> str:
    """일자별 텍스트 리포트 생성

    Output:
        -------- day 0 --------
        name, sellIn, quality
        +5 Dexterity Vest, 10, 20
        ...
    """
    lines: List[str] = []
    for snapshot in result.snapshots:
        lines.append(f"-------- day {snapshot.day} --------")
        lines.append("name, sellIn, quality")
        for name, sell_in, quality in snapshot.items:
            lines.append(f"{name}, {sell_in}, {quality}")
        lines.append("")
    return "\n".join(lines)

"""
CLI 진입점 -- 모든 CLI 명령의 통합 디스패처

Usage:
    python -m src.presentation.cli.main simulate --days 30
    python -m src.presentation.cli.main categories
"""

import argparse
import sys
from typing import List, Optional

from src.settings.app_config import DEFAULT_SIMULATION_DAYS
from src.utils.logger import get_logger

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """CLI 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="inventory-aging",
        description="재고 에이징 시뮬레이션 CLI",
    )

    subparsers = parser.add_subparsers(dest="command", help="명령")

    # simulate 명령
    simulate_parser = subparsers.add_parser("simulate", help="샘플 재고로 일자별 시뮬레이션")
    simulate_parser.add_argument(
        "--days", type=int, default=DEFAULT_SIMULATION_DAYS, help="진행 일수"
    )

    # categories 명령
    subparsers.add_parser("categories", help="등록된 카테고리 전략 목록")

    return parser


def cmd_simulate(args) -> int:
    """시뮬레이션 명령 실행"""
    from src.application.use_cases.daily_aging_flow import DailyAgingFlow, render_report
    from src.domain.inventory.fixtures import default_inventory

    flow = DailyAgingFlow(default_inventory())
    result = flow.run(days=args.days)
    print(render_report(result))
    return 0


def cmd_categories(args) -> int:
    """카테고리 전략 목록 출력"""
    from src.application.services.aging_service import get_default_registry

    registry = get_default_registry()
    for item_name in registry.registered_item_names():
        print(f"{item_name} -> {registry.get_strategy(item_name).name}")
    for name in registry.list_strategies():
        if name.endswith("(default)"):
            print(f"* -> {name}")
    return 0


COMMANDS = {
    "simulate": cmd_simulate,
    "categories": cmd_categories,
}


def main(argv: Optional[List[str]] = None) -> int:
    """CLI 메인

    Returns:
        종료 코드 (0=성공, 1=입력 오류, 2=명령 없음)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 2

    try:
        return handler(args)
    except ValueError as e:
        logger.error(f"명령 실패: {args.command} - {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
통합 설정 진입점

- 프로젝트 경로
- 로그 디렉토리 / 레벨 (.env 로 덮어쓰기 가능)
- 시뮬레이션 기본 일수

Usage:
    from src.settings.app_config import LOG_DIR, LOG_LEVEL
    from src.settings.constants import MAX_QUALITY
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# ── 프로젝트 경로 ──
PROJECT_ROOT = Path(__file__).parent.parent.parent

# .env 로드 (이미 설정된 환경변수는 유지)
load_dotenv(PROJECT_ROOT / ".env")


def _env_int(key: str, default: int) -> int:
    """정수 환경변수 조회 (형식 오류 시 기본값)"""
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ── 로그 설정 ──
LOG_DIR = Path(os.getenv("INVENTORY_LOG_DIR") or PROJECT_ROOT / "logs")
LOG_LEVEL = (os.getenv("INVENTORY_LOG_LEVEL") or "INFO").upper()

# ── 시뮬레이션 설정 ──
DEFAULT_SIMULATION_DAYS = _env_int("INVENTORY_SIMULATION_DAYS", 2)

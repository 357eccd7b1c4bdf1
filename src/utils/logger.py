"""
통합 로깅 모듈

사용법:
    from src.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("시뮬레이션 시작")
    logger.warning("알 수 없는 상품명, 기본 전략 적용")
    logger.error("상품 검증 실패", exc_info=True)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from src.settings.app_config import LOG_DIR, LOG_LEVEL


class SafeRotatingFileHandler(RotatingFileHandler):
    """파일 잠금에 안전한 RotatingFileHandler

    동기화 도구 등으로 로그 파일이 잠겨있을 때
    PermissionError를 무시하고 기존 파일에 계속 쓴다.
    """

    def doRollover(self):
        try:
            super().doRollover()
        except PermissionError:
            # 로테이션 실패 → stream이 닫혀있으면 다시 열기
            if self.stream is None and not self.delay:
                self.stream = self._open()


# 로그 포맷
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_FORMAT_SIMPLE = "%(asctime)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# 영역별 로그 파일
LOG_FILES = {
    "main": "inventory.log",    # 전체 로그
    "aging": "aging.log",       # 에이징 엔진/시뮬레이션
    "error": "error.log",       # 에러만
}

# 이미 설정된 로거 추적
_configured_loggers = set()


def _resolve_level(level: str) -> int:
    value = getattr(logging, level, None)
    return value if isinstance(value, int) else logging.INFO


def setup_logger(
    name: str,
    level: Optional[int] = None,
    log_file: str = "main",
    console: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    로거 설정

    Args:
        name: 로거 이름 (보통 __name__)
        level: 로그 레벨 (None이면 INVENTORY_LOG_LEVEL)
        log_file: 로그 파일 키 ("main", "aging", "error")
        console: 콘솔 출력 여부
        max_bytes: 파일당 최대 크기
        backup_count: 백업 파일 수

    Returns:
        설정된 Logger
    """
    logger = logging.getLogger(name)

    # 이미 설정된 로거면 반환
    if name in _configured_loggers:
        return logger

    if level is None:
        level = _resolve_level(LOG_LEVEL)
    logger.setLevel(level)

    # 이미 핸들러가 있으면 스킵
    if logger.handlers:
        _configured_loggers.add(name)
        return logger

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    simple_formatter = logging.Formatter(LOG_FORMAT_SIMPLE, DATE_FORMAT)

    # 파일 핸들러 (로테이션)
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_path = LOG_DIR / LOG_FILES.get(log_file, LOG_FILES["main"])
        file_handler = SafeRotatingFileHandler(
            file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

        # 에러 전용 파일 핸들러
        error_handler = SafeRotatingFileHandler(
            LOG_DIR / LOG_FILES["error"],
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        error_handler.setFormatter(formatter)
        error_handler.setLevel(logging.ERROR)
        logger.addHandler(error_handler)
    except OSError as e:
        print(f"[WARN] 로그 파일 핸들러 설정 실패: {e}", file=sys.stderr)

    # 콘솔 핸들러 (stdout은 리포트 출력용이므로 stderr 사용)
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(simple_formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    # 상위 로거로 전파 방지
    logger.propagate = False

    _configured_loggers.add(name)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    로거 가져오기 (편의 함수)

    모듈별 자동 분류:
        - src.domain.inventory.* / *aging* → aging.log
        - 그 외 → inventory.log

    Args:
        name: 모듈 이름 (보통 __name__)

    Returns:
        모듈에 맞게 설정된 Logger 인스턴스
    """
    if "domain.inventory" in name or "aging" in name:
        return setup_logger(name, log_file="aging")
    return setup_logger(name, log_file="main")


def log_with_context(
    _logger: logging.Logger,
    level: str,
    msg: str,
    exc_info: bool = False,
    **ctx: Any,
) -> None:
    """컨텍스트 키워드를 자동 포맷하는 로깅 헬퍼

    Args:
        _logger: 로거 인스턴스
        level: 로그 레벨 ("debug", "info", "warning", "error")
        msg: 로그 메시지
        exc_info: True면 예외 스택 트레이스 포함
        **ctx: 컨텍스트 키=값 쌍 (day, items, strategy 등)

    Usage:
        log_with_context(logger, "info", "일일 갱신 완료", day=3, items=9)
        # Output: "일일 갱신 완료 | day=3 | items=9"
    """
    if ctx:
        ctx_str = " | ".join(f"{k}={v}" for k, v in ctx.items() if v is not None)
        if ctx_str:
            msg = f"{msg} | {ctx_str}"

    log_fn = getattr(_logger, level, None) or _logger.info
    log_fn(msg, exc_info=exc_info)

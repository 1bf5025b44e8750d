#!/usr/bin/env python
"""
설정 파일 감시 스크립트

ConfigStore를 띄워 두고 키 추가/변경 이벤트를 로그로 출력합니다.
SIGINT/SIGTERM 수신 시 종료 이벤트를 set 하여 갱신 스레드를 멈춥니다.

사용법:
    # 기본 실행
    python scripts/watch_config.py config/app.conf

    # 갱신 주기 지정
    python scripts/watch_config.py config/app.conf --interval 0.5

    # 시작/종료 시 전체 값 출력
    python scripts/watch_config.py config/app.conf --dump
"""

import argparse
import logging
import os
import signal
import sys
import threading
from pathlib import Path

from dotenv import load_dotenv

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from liveconf import ConfigStore, ConfigurationError, StoreSettings  # noqa: E402

logger = logging.getLogger("liveconf.watch")


def setup_logging(level: str = "INFO") -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_env_file(env: str) -> None:
    """환경별 .env 파일 로드"""
    env_files = [
        PROJECT_ROOT / f".env.{env}",
        PROJECT_ROOT / ".env.local",
        PROJECT_ROOT / ".env",
    ]

    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file)
            logger.info(f"[Config] 환경 파일 로드: {env_file}")
            break


def dump(store: ConfigStore) -> None:
    for key, value in sorted(store.snapshot().items()):
        print(f"{key}={value}")


def run_watch(path: str, settings: StoreSettings, dump_values: bool = False) -> None:
    """스토어 생성 후 종료 신호까지 대기

    Args:
        path: 감시할 설정 파일
        settings: 스토어 설정
        dump_values: 시작/종료 시 전체 값 출력 여부
    """
    done = threading.Event()

    def signal_handler(sig, frame):
        logger.info(f"[Watch] 종료 신호 수신: {sig}")
        done.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    store = ConfigStore(path, settings=settings, done=done)

    if not os.path.exists(path):
        logger.warning(f"[Watch] 설정 파일 없음 (생성되면 자동 로드): {path}")

    logger.info(
        f"[Watch] 감시 시작: {store.filename} "
        f"(주기: {settings.refresh_interval}초, 키: {len(store)}개)"
    )
    if dump_values:
        dump(store)

    # Event.wait()는 시그널 핸들러가 set 하면 깨어남
    while not done.wait(1.0):
        pass

    logger.info(f"[Watch] 감시 종료 (키: {len(store)}개)")
    if dump_values:
        dump(store)


def main() -> None:
    """메인 함수"""
    parser = argparse.ArgumentParser(
        description="liveconf 설정 파일 감시",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
    # 기본 실행
    python scripts/watch_config.py config/app.conf

    # 디버그 모드 (짧은 갱신 주기)
    python scripts/watch_config.py config/app.conf --interval 0.2 --log-level DEBUG

    # 변경 로그 끄기
    python scripts/watch_config.py config/app.conf --quiet --dump
        """,
    )

    parser.add_argument("path", help="감시할 key=value 설정 파일")

    # 환경 설정
    parser.add_argument(
        "--env",
        choices=["dev", "staging", "prod"],
        default="dev",
        help="실행 환경 (기본: dev)",
    )

    # 스토어 설정
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="갱신 주기 (초, 기본: LIVECONF_REFRESH_INTERVAL 또는 1.0)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="키 추가/변경 로그 끄기",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="시작/종료 시 전체 값 출력",
    )

    # 로깅
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="로그 레벨",
    )

    args = parser.parse_args()

    # 로깅 설정
    log_level = args.log_level or ("DEBUG" if args.env == "dev" else "INFO")
    setup_logging(log_level)

    # 환경 설정
    os.environ["ENV"] = args.env
    load_env_file(args.env)

    try:
        settings = StoreSettings.from_env()
        if args.interval is not None:
            settings.refresh_interval = args.interval
        if args.quiet:
            settings.log_updates = False
        settings.validate(strict=True)
    except ConfigurationError as e:
        logger.error(f"[Watch] 설정 오류: {e}")
        sys.exit(2)

    run_watch(args.path, settings, dump_values=args.dump)


if __name__ == "__main__":
    main()

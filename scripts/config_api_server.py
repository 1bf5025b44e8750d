#!/usr/bin/env python
"""
liveconf 설정 조회 API 서버 실행 스크립트

사용법:
    # 개발 모드
    python scripts/config_api_server.py --config config/app.conf

    # 프로덕션 모드
    python scripts/config_api_server.py --env prod --port 8080 --config /etc/app/app.conf
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

logger = logging.getLogger("liveconf.server")


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


def main() -> None:
    """메인 함수"""
    parser = argparse.ArgumentParser(description="liveconf 설정 조회 API 서버")

    parser.add_argument(
        "--env",
        choices=["dev", "staging", "prod"],
        default="dev",
        help="실행 환경 (기본: dev)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="바인딩 호스트 (기본: 환경변수 API_HOST 또는 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="바인딩 포트 (기본: 환경변수 API_PORT 또는 8000)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="key=value 설정 파일 경로 (기본: 환경변수 CONFIG_PATH 또는 config/app.conf)",
    )
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

    host = args.host or os.getenv("API_HOST", "0.0.0.0")
    port = args.port or int(os.getenv("API_PORT", "8000"))

    # 설정 파일 경로는 앱 lifespan에서 CONFIG_PATH로 읽음
    if args.config:
        os.environ["CONFIG_PATH"] = args.config

    logger.info(
        f"[Server] 시작: env={args.env}, http://{host}:{port}, "
        f"config={os.getenv('CONFIG_PATH', 'config/app.conf')}"
    )

    # 스토어 갱신 스레드가 프로세스마다 생기므로 워커는 1개
    uvicorn.run(
        "api.server:app",
        host=host,
        port=port,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()

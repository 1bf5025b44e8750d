"""
API Key 인증 미들웨어

X-API-Key 헤더를 검증하여 인증을 수행합니다.
"""

import os

from fastapi import HTTPException, Request, status

DEV_API_KEY = "dev-api-key-change-in-production"


class APIKeyAuth:
    """API Key 인증 클래스

    사용법:
        ```python
        auth = APIKeyAuth()

        @app.get("/protected")
        async def protected_endpoint(api_key: str = Depends(auth)):
            return {"message": "Authenticated"}
        ```
    """

    HEADER_NAME = "X-API-Key"

    def __init__(self, api_keys: list[str] | None = None):
        """
        Args:
            api_keys: 유효한 API Key 목록 (None이면 환경변수에서 로드)
        """
        self._api_keys = api_keys if api_keys is not None else self._load_api_keys_from_env()

    def _load_api_keys_from_env(self) -> list[str]:
        """환경변수에서 API Key 로드

        환경변수:
            - LIVECONF_API_KEYS: 쉼표로 구분된 API Key 목록
            - LIVECONF_API_KEY: 단일 API Key

        키가 하나도 없고 ENV=dev 이면 개발용 기본 키를 허용합니다.
        """
        keys: list[str] = []

        if api_keys_str := os.getenv("LIVECONF_API_KEYS"):
            keys.extend(k.strip() for k in api_keys_str.split(",") if k.strip())

        if key := os.getenv("LIVECONF_API_KEY"):
            keys.append(key)

        # 개발 환경 기본 키 (프로덕션에서는 반드시 설정 필요)
        if not keys and os.getenv("ENV", "dev") == "dev":
            keys.append(DEV_API_KEY)

        return list(dict.fromkeys(keys))

    async def __call__(self, request: Request) -> str:
        """API Key 검증

        Raises:
            HTTPException: 헤더 누락 또는 잘못된 키 (401)
        """
        api_key = request.headers.get(self.HEADER_NAME)

        if not api_key:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={
                    "error": "MISSING_API_KEY",
                    "message": f"Missing {self.HEADER_NAME} header",
                },
            )

        if api_key not in self._api_keys:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={
                    "error": "INVALID_API_KEY",
                    "message": "Invalid API key",
                },
            )

        return api_key


_auth_instance: APIKeyAuth | None = None


def get_api_key_auth() -> APIKeyAuth:
    """API Key 인증 인스턴스 반환 (싱글톤)"""
    global _auth_instance
    if _auth_instance is None:
        _auth_instance = APIKeyAuth()
    return _auth_instance


def reset_api_key_auth() -> None:
    """싱글톤 초기화 (환경변수 변경 후 재로드용)"""
    global _auth_instance
    _auth_instance = None

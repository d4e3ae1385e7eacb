# catalog/core/exceptions.py

"""
API 전반에서 사용하는 오류 분류(taxonomy)를 정의하는 모듈입니다.

모든 예외는 FastAPI의 HTTPException을 상속하므로, 라우터나 서비스 어디에서 발생하더라도
FastAPI가 해당 상태 코드와 `{"detail": ...}` 본문으로 바로 응답합니다.
"""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel


VALIDATION_MESSAGE = "The JSON sent contains invalid data. Here are the errors you need to correct: "


class Violation(BaseModel):
    """필드 단위 유효성 검사 실패 한 건"""
    field: str
    message: str


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found."):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AccessDeniedError(HTTPException):
    def __init__(self, detail: str = "Access denied."):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Invalid JWT Token"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ValidationError(HTTPException):
    """
    비어 있지 않은 위반 목록(violation list)을 400 응답으로 변환합니다.
    본문은 사람이 읽을 수 있는 메시지와 필드/메시지 쌍의 목록을 함께 담습니다.
    """
    def __init__(self, violations: List[Violation], headers: Optional[Dict[str, Any]] = None):
        self.violations = list(violations)
        message = VALIDATION_MESSAGE + "; ".join(
            f"Field {v.field}: {v.message}" for v in self.violations
        )
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": message,
                "violations": [v.model_dump() for v in self.violations],
            },
            headers=headers,
        )

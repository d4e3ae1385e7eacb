# catalog/core/validation.py

"""
요청 본문 유효성 검사 결과를 위반 목록(violation list)으로 다루는 모듈입니다.

- 본문을 스키마로 검증하되, 실패하더라도 예외 대신 위반 목록을 핸들러에 넘겨줍니다.
  (핸들러가 다른 어떤 로직보다 먼저 check_violations()를 호출하도록 하기 위함)
- FastAPI가 자체적으로 발생시키는 RequestValidationError도 같은 400 응답 형태로 변환합니다.
"""

from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Sequence, Type, TypeVar

from fastapi import Body, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from catalog.core.exceptions import ValidationError, Violation

SchemaType = TypeVar("SchemaType", bound=BaseModel)

# 오류 위치(loc)에서 필드 이름으로 보여줄 필요가 없는 접두사
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def violations_from_errors(errors: Iterable[Dict[str, Any]]) -> List[Violation]:
    """pydantic 오류 목록을 필드/메시지 쌍의 위반 목록으로 변환합니다."""
    violations = []
    for error in errors:
        location = list(error.get("loc", ()))
        if location and location[0] in _LOCATION_PREFIXES:
            location = location[1:]
        # 잘못된 JSON 본문은 필드 대신 문자 위치(offset)를 loc에 담습니다.
        if error.get("type") == "json_invalid" or (location and isinstance(location[0], int)):
            location = []
        violations.append(Violation(field=".".join(str(part) for part in location) or "body", message=error.get("msg", "Invalid value.")))
    return violations


def check_violations(violations: Sequence[Violation]) -> None:
    """위반 사항이 하나라도 있으면 400 ValidationError를 발생시킵니다."""
    if violations:
        raise ValidationError(list(violations))


class ValidatedPayload(Generic[SchemaType]):
    """
    검증된 본문(data)과 위반 목록(violations)을 함께 담는 컨테이너입니다.
    위반 사항이 있으면 data는 None입니다.
    """

    def __init__(self, data: Optional[SchemaType], violations: List[Violation]):
        self.data = data
        self.violations = violations


def validated_body(schema: Type[SchemaType]) -> Callable[..., ValidatedPayload[SchemaType]]:
    """
    주어진 스키마로 JSON 본문을 검증하는 FastAPI 의존성을 생성합니다.
    """
    def _dependency(payload: Dict[str, Any] = Body(...)) -> ValidatedPayload[SchemaType]:
        try:
            return ValidatedPayload(schema.model_validate(payload), [])
        except PydanticValidationError as e:
            return ValidatedPayload(None, violations_from_errors(e.errors()))

    return _dependency


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """FastAPI의 422 응답 대신 위반 목록 형태의 400 응답을 반환합니다."""
    error = ValidationError(violations_from_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})

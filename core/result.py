# core/result.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class Reason(str, Enum):
    """Absent 결과의 원인. 비교(==)에는 사용되지 않음"""

    INPUT_ABSENT = "input_absent"
    TRANSPORT_FAILURE = "transport_failure"
    NOT_FOUND = "not_found"
    DECODE_FAILURE = "decode_failure"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def value_or(self, default: Any = None) -> T:
        return self.value

    def then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        return fn(self.value)

    def __bool__(self) -> bool:
        # Ok("") 도 결과가 있는 것으로 취급
        return True


@dataclass(frozen=True)
class Absent:
    """
    결과 없음.
    네트워크 에러, 응답 형식 오류, 검색 결과 없음을 호출자 입장에서 구분하지 않는다.
    reason 은 로그/디버깅용으로만 남기며 Absent() == Absent(Reason.NOT_FOUND) 이다.
    """

    reason: Reason = field(default=Reason.NOT_FOUND, compare=False)

    @property
    def is_ok(self) -> bool:
        return False

    def value_or(self, default: Any = None) -> Any:
        return default

    def then(self, fn: Callable[[Any], "Result[U]"]) -> "Absent":
        return self

    def __bool__(self) -> bool:
        return False


Result = Union[Ok[T], Absent]


def from_optional(value, reason: Reason = Reason.INPUT_ABSENT) -> "Result":
    """None 이면 Absent, 아니면 Ok"""
    if value is None:
        return Absent(reason)
    return Ok(value)

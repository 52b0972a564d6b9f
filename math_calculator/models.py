from enum import Enum
from typing import Any, FrozenSet, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class OperationId(str, Enum):
    FACTORIAL = "factorial"
    PALINDROME = "palindrome"
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    CUBE_ROOT = "cubeRoot"

    @classmethod
    def parse(cls, raw: str) -> Optional["OperationId"]:
        """Returnează identificatorul cunoscut sau None pentru chei necunoscute"""
        try:
            return cls(raw)
        except ValueError:
            return None


class OperationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    operation: str = Field(..., description="Identificatorul cerut")
    title: str
    success: bool = True
    message: str
    value: Optional[str] = Field(None, description="Factorial / radical cubic")
    verdict: Optional[bool] = Field(None, description="Prim / palindrom")
    terms: Optional[List[int]] = Field(None, description="Termenii Fibonacci")


class ValidInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["valid"] = "valid"
    number: int = Field(..., gt=0)
    operations: FrozenSet[str] = Field(..., min_length=1)


class InvalidInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["invalid"] = "invalid"
    reason: str


ValidationOutcome = Union[ValidInput, InvalidInput]


class CalculationRequest(BaseModel):
    # orice valoare JSON ajunge nemodificată la validare
    number: Optional[Any] = Field(None, description="Numărul de intrare")
    operations: Optional[List[str]] = Field(None, description="Operațiile cerute")


class CalculationResponse(BaseModel):
    number: int
    results: List[OperationResult]


class OperationInfo(BaseModel):
    id: str
    title: str

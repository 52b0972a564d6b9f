from typing import List

from ..models import OperationId, OperationResult
from .base import MathOperation


def fibonacci(n: int) -> List[int]:
    """Primii n termeni ai șirului, F(0)=0, F(1)=1"""
    if n < 0:
        raise ValueError("Fibonacci series is not defined for negative numbers.")
    series = [0, 1][:n]
    for _ in range(2, n):
        series.append(series[-1] + series[-2])
    return series


class FibonacciOperation(MathOperation):
    operation_id = OperationId.FIBONACCI
    title = "Fibonacci Series"

    def execute(self, number: int) -> OperationResult:
        series = fibonacci(number)
        label = "term" if number == 1 else "terms"
        return self._result(
            f"Fibonacci series with {number} {label}: {series}", terms=series
        )

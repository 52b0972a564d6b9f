from ..models import OperationId, OperationResult
from .base import MathOperation


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError("Factorial is not defined for negative numbers.")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


class FactorialOperation(MathOperation):
    operation_id = OperationId.FACTORIAL
    title = "Factorial"

    def execute(self, number: int) -> OperationResult:
        result = factorial(number)
        return self._result(f"Factorial of {number} = {result}", value=str(result))

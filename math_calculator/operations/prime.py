from ..models import OperationId, OperationResult
from .base import MathOperation


def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    # doar divizori de forma 6k ± 1
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


class PrimeOperation(MathOperation):
    operation_id = OperationId.PRIME
    title = "Prime Number Check"

    def execute(self, number: int) -> OperationResult:
        if number < 2:
            return self._result(
                f"The number {number} is not prime (prime numbers start from 2).",
                verdict=False,
            )

        if is_prime(number):
            return self._result(f"The number {number} is a prime number.", verdict=True)
        return self._result(
            f"The number {number} is not a prime number.", verdict=False
        )

from ..models import OperationId, OperationResult
from .base import MathOperation


def is_palindrome(n: int) -> bool:
    digits = str(n)
    left, right = 0, len(digits) - 1
    while left < right:
        if digits[left] != digits[right]:
            return False
        left += 1
        right -= 1
    return True


class PalindromeOperation(MathOperation):
    operation_id = OperationId.PALINDROME
    title = "Palindrome Check"

    def execute(self, number: int) -> OperationResult:
        # fără verdict: nici adevărat, nici fals
        if number < 0:
            return self._result("Negative numbers are not considered palindromes.")

        if is_palindrome(number):
            return self._result(f"The number {number} is a palindrome.", verdict=True)
        return self._result(f"The number {number} is not a palindrome.", verdict=False)

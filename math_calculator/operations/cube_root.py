from ..models import OperationId, OperationResult
from .base import MathOperation

PRECISION = 1e-10
MAX_ITERATIONS = 100


def cube_root(number: float) -> float:
    """
    Radical cubic prin metoda lui Newton pentru x^3 - number.

    Se presupune number >= 0; semnul se tratează de apelant.
    """
    if number == 0:
        return 0.0

    x = float(number)
    for _ in range(MAX_ITERATIONS):
        previous = x
        x = (2 * x + number / (x * x)) / 3
        if abs(x - previous) < PRECISION:
            break
    return x


class CubeRootOperation(MathOperation):
    operation_id = OperationId.CUBE_ROOT
    title = "Cube Root"

    def execute(self, number: int) -> OperationResult:
        if number == 0:
            return self._result("Cube root of 0 = 0.000000", value="0.000000")

        root = f"{cube_root(abs(number)):.6f}"
        if number < 0:
            root = f"-{root}"
        return self._result(f"Cube root of {number} = {root}", value=root)

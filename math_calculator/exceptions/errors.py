class CalculatorError(Exception):
    """Baza pentru erorile de domeniu ale calculatorului"""


class UnsupportedOperationError(CalculatorError, LookupError):
    def __init__(self, operation: str):
        super().__init__(operation)
        self.operation = operation

    def __str__(self) -> str:
        return f"Unsupported operation: {self.operation}"

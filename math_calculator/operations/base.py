from abc import ABC, abstractmethod

from ..models import OperationId, OperationResult


class MathOperation(ABC):
    """Strategia comună pentru toate operațiile matematice"""

    operation_id: OperationId
    title: str

    @abstractmethod
    def execute(self, number: int) -> OperationResult:
        ...

    def _result(self, message: str, **payload) -> OperationResult:
        return OperationResult(
            operation=self.operation_id.value,
            title=self.title,
            message=message,
            **payload,
        )

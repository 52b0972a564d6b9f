"""
Registrul operațiilor matematice.

Se construiește o singură dată și este doar citit după aceea, deci poate fi
folosit din mai multe cereri concurente fără blocare.
"""

from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, Mapping, Union

from .exceptions.errors import UnsupportedOperationError
from .models import OperationId
from .operations.base import MathOperation
from .operations.cube_root import CubeRootOperation
from .operations.factorial import FactorialOperation
from .operations.fibonacci import FibonacciOperation
from .operations.palindrome import PalindromeOperation
from .operations.prime import PrimeOperation


class OperationRegistry:
    def __init__(self, operations: Iterable[MathOperation]):
        table = {}
        for operation in operations:
            if operation.operation_id in table:
                raise ValueError(
                    f"Duplicate operation: {operation.operation_id.value}"
                )
            table[operation.operation_id] = operation
        self._operations: Mapping[OperationId, MathOperation] = MappingProxyType(table)

    def lookup(self, identifier: Union[str, OperationId]) -> MathOperation:
        operation_id = (
            identifier
            if isinstance(identifier, OperationId)
            else OperationId.parse(identifier)
        )
        if operation_id is None or operation_id not in self._operations:
            raise UnsupportedOperationError(str(getattr(identifier, "value", identifier)))
        return self._operations[operation_id]

    def known_ids(self) -> FrozenSet[str]:
        return frozenset(operation_id.value for operation_id in self._operations)

    def __contains__(self, identifier: object) -> bool:
        if isinstance(identifier, str):
            return OperationId.parse(identifier) in self._operations
        return False

    def __iter__(self) -> Iterator[MathOperation]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)


def build_registry() -> OperationRegistry:
    return OperationRegistry(
        [
            FactorialOperation(),
            PalindromeOperation(),
            FibonacciOperation(),
            PrimeOperation(),
            CubeRootOperation(),
        ]
    )


default_registry = build_registry()

import logging
from typing import FrozenSet, Iterable, List, Optional, Sequence, Union

from .exceptions.errors import UnsupportedOperationError
from .models import (CalculationResponse, InvalidInput, OperationInfo,
                     OperationResult)
from .registry import OperationRegistry, default_registry
from .validation import validate

logger = logging.getLogger(__name__)


def known_operation_ids(
    registry: OperationRegistry = default_registry,
) -> FrozenSet[str]:
    return registry.known_ids()


def list_operations(registry: OperationRegistry = default_registry) -> List[OperationInfo]:
    return [
        OperationInfo(id=operation.operation_id.value, title=operation.title)
        for operation in registry
    ]


def run(
    number: int, operation_id: str, registry: OperationRegistry = default_registry
) -> OperationResult:
    """
    Rulează o singură operație.

    Nu aruncă excepții: un identificator necunoscut sau o eroare internă
    produce un rezultat cu success=False care numește cauza.
    """
    try:
        operation = registry.lookup(operation_id)
    except UnsupportedOperationError as e:
        logger.warning(f"Operație necunoscută: {operation_id!r}")
        return OperationResult(
            operation=operation_id, title=operation_id, success=False, message=str(e)
        )

    try:
        return operation.execute(number)
    except Exception as e:
        logger.exception(f"Eroare la {operation_id}({number}): {e}")
        return OperationResult(
            operation=operation_id,
            title=operation.title,
            success=False,
            message=str(e),
        )


def _ordered(
    operation_ids: Iterable[str], registry: OperationRegistry
) -> List[str]:
    requested = set(operation_ids)
    known = [
        operation.operation_id.value
        for operation in registry
        if operation.operation_id.value in requested
    ]
    unknown = sorted(requested - set(known))
    return known + unknown


def run_all(
    number: int,
    operation_ids: Iterable[str],
    registry: OperationRegistry = default_registry,
) -> List[OperationResult]:
    """Rulează fiecare operație cerută; o eroare nu le oprește pe celelalte"""
    return [run(number, op, registry) for op in _ordered(operation_ids, registry)]


def calculate(
    number_text: Optional[str],
    operation_ids: Optional[Sequence[str]],
    registry: OperationRegistry = default_registry,
    max_number: Optional[int] = None,
) -> Union[CalculationResponse, InvalidInput]:
    outcome = validate(number_text, operation_ids, max_number=max_number)
    if isinstance(outcome, InvalidInput):
        logger.info(f"Cerere respinsă: {outcome.reason}")
        return outcome

    results = run_all(outcome.number, outcome.operations, registry)
    logger.info(
        f"Calcul complet pentru {outcome.number}: "
        f"{', '.join(r.operation for r in results)}"
    )
    return CalculationResponse(number=outcome.number, results=results)

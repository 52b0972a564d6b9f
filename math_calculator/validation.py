import re
from typing import Optional, Sequence

from .config import get_settings
from .models import InvalidInput, ValidationOutcome, ValidInput

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def validate(
    number_text: Optional[str],
    operation_ids: Optional[Sequence[str]],
    max_number: Optional[int] = None,
) -> ValidationOutcome:
    """
    Validează parametrii brut primiți înainte de orice calcul.

    Regulile se aplică în ordine, prima eroare câștigă:
    - numărul lipsește sau e gol -> "Number is required"
    - numărul nu e întreg -> "Invalid number format"
    - numărul <= 0 -> "Number must be positive"
    - numărul > max_number -> "Number must not exceed {max_number}"
    - nicio operație -> "At least one operation must be selected"

    Identificatorii necunoscuți NU sunt erori de validare; ei devin erori
    per operație la rulare.
    """
    if max_number is None:
        max_number = get_settings().MAX_NUMBER

    if number_text is None or not str(number_text).strip():
        return InvalidInput(reason="Number is required")

    text = str(number_text).strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return InvalidInput(reason="Invalid number format")

    # int() refuzează șirurile foarte lungi, deci limita se verifică pe cifre
    digits = text.lstrip("+-").lstrip("0")
    if not digits or text.startswith("-"):
        return InvalidInput(reason="Number must be positive")
    if len(digits) > len(str(max_number)):
        return InvalidInput(reason=f"Number must not exceed {max_number}")

    number = int(digits)
    if number > max_number:
        return InvalidInput(reason=f"Number must not exceed {max_number}")

    if not operation_ids:
        return InvalidInput(reason="At least one operation must be selected")

    return ValidInput(number=number, operations=frozenset(operation_ids))

"""Form-level input checks shared by the transaction and payment type services."""
import math


def is_valid_amount(text: str | None) -> bool:
    """True if text is a plain positive decimal number, e.g. '100.0'."""
    if text is None:
        return False
    text = text.strip()
    if not text:
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value) and value > 0


def is_valid_name(value: str | None) -> bool:
    return bool(value and value.strip())


def is_valid_category(value: str | None) -> bool:
    return is_valid_name(value)


def is_valid_payment_type(value: str | None) -> bool:
    return is_valid_name(value)


def is_valid_place_and_beneficiary(place: str | None, beneficiary: str | None) -> bool:
    """Both fields filled in, for front ends that require them."""
    return is_valid_name(place) and is_valid_name(beneficiary)

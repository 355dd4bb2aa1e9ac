import math
from typing import List, Optional
from imc_backend.schemas.sch_errors import FieldError
from imc_backend.validators.val_errors import raise_if_errors

HEIGHT_MIN = 0.01
HEIGHT_MAX = 2.99
WEIGHT_MIN = 0.01
WEIGHT_MAX = 499.99
SORT_VALUES = ("asc", "desc")
DEFAULT_SORT = "desc"
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 5

class BmiValidator:
    @staticmethod
    def _range_errors(field: str, value: float, minimum: float, maximum: float, unit: str) -> List[FieldError]:
        if not math.isfinite(value):
            return [FieldError(field=field, message=f"{field} must be a number")]
        if value < minimum:
            return [FieldError(field=field, message=f"{field} must be at least {minimum} {unit}")]
        if value > maximum:
            return [FieldError(field=field, message=f"{field} cannot be greater than {maximum} {unit}")]
        return []

    @staticmethod
    def calculation_errors(altura: float, peso: float) -> List[FieldError]:
        """Collect range errors for a BMI calculation input"""
        errors = BmiValidator._range_errors("altura", altura, HEIGHT_MIN, HEIGHT_MAX, "m")
        errors += BmiValidator._range_errors("peso", peso, WEIGHT_MIN, WEIGHT_MAX, "kg")
        return errors

    @staticmethod
    def validate_calculation(altura: float, peso: float):
        raise_if_errors(BmiValidator.calculation_errors(altura, peso))

    @staticmethod
    def normalize_sort(sort: Optional[str]) -> str:
        """Return 'asc' or 'desc'. Missing or empty means 'desc'; matching is case-insensitive."""
        if sort is None or sort == "":
            return DEFAULT_SORT
        normalized = str(sort).lower()
        if normalized not in SORT_VALUES:
            raise_if_errors([FieldError(
                field="sort",
                message=f"'{sort}' is not a valid value for sort. Use 'asc' or 'desc'."
            )])
        return normalized

    @staticmethod
    def pagination_errors(pag: int, mostrar: int) -> List[FieldError]:
        errors = []
        if pag < 1:
            errors.append(FieldError(field="pag", message="pag must be greater than or equal to 1"))
        if mostrar < 1:
            errors.append(FieldError(field="mostrar", message="mostrar must be greater than or equal to 1"))
        return errors

    @staticmethod
    def validate_pagination(pag: int, mostrar: int):
        raise_if_errors(BmiValidator.pagination_errors(pag, mostrar))

from decimal import Decimal, ROUND_HALF_UP
from imc_backend.models.mod_bmi import BmiCategory

# Upper bounds (exclusive) of each category, checked in order
UNDERWEIGHT_LIMIT = 18.5
NORMAL_LIMIT = 25
OVERWEIGHT_LIMIT = 30

def calculate_bmi(peso: float, altura: float) -> float:
    """Body mass index: weight (kg) / height (m) squared. Ranges are validated upstream."""
    return peso / (altura * altura)

def round_half_away_from_zero(value: float, decimals: int = 2) -> float:
    """Round to `decimals` places, ties going away from zero (2.675 -> 2.68, -1.005 -> -1.01)"""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))

def categorize(bmi: float) -> BmiCategory:
    if bmi < UNDERWEIGHT_LIMIT:
        return BmiCategory.BAJO_PESO
    if bmi < NORMAL_LIMIT:
        return BmiCategory.NORMAL
    if bmi < OVERWEIGHT_LIMIT:
        return BmiCategory.SOBREPESO
    return BmiCategory.OBESO

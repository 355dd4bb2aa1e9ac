import statistics
from typing import Iterable, List, Sequence
from imc_backend.helpers.hlp_bmi import round_half_away_from_zero
from imc_backend.models.mod_bmi import BmiCategory, BmiRecord
from imc_backend.schemas.sch_bmi import (
    CategoryCounts,
    DashboardHistoryItem,
    DashboardResponse,
    MeanDeviation
)

# Response field for each category label
CATEGORY_FIELDS = {
    BmiCategory.BAJO_PESO.value: "cantBajoPeso",
    BmiCategory.NORMAL.value: "cantNormal",
    BmiCategory.SOBREPESO.value: "cantSobrepeso",
    BmiCategory.OBESO.value: "cantObeso",
}

def mean(values: Sequence[float]) -> float:
    """Arithmetic mean rounded to 2 decimals, 0 for an empty sequence"""
    if not values:
        return 0
    return round_half_away_from_zero(statistics.fmean(values), 2)

def stddev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N) rounded to 2 decimals"""
    if len(values) < 2:
        return 0
    return round_half_away_from_zero(statistics.pstdev(values), 2)

def tally(categories: Iterable[str]) -> CategoryCounts:
    """Count each known category label. Unknown labels are ignored."""
    counts = {field: 0 for field in CATEGORY_FIELDS.values()}
    for category in categories:
        label = category.value if isinstance(category, BmiCategory) else category
        field = CATEGORY_FIELDS.get(label)
        if field:
            counts[field] += 1
    return CategoryCounts(**counts)

def build_dashboard(records: List[BmiRecord]) -> DashboardResponse:
    """
    Build the dashboard for a user's history.

    Args:
        records: BMI records of a single user

    Returns:
        The chronological (oldest first) series plus weight/BMI statistics and
        the category tally
    """
    ordered = sorted(records, key=lambda record: record.fecha_calculo)
    weights = [record.peso for record in ordered]
    bmis = [record.imc for record in ordered]

    return DashboardResponse(
        historiales=[
            DashboardHistoryItem(fecha_calculo=record.fecha_calculo, imc=record.imc, peso=record.peso)
            for record in ordered
        ],
        estadisticasPeso=MeanDeviation(promedio=mean(weights), desviacion=stddev(weights)),
        estadisticasImc=MeanDeviation(promedio=mean(bmis), desviacion=stddev(bmis)),
        categorias=tally(record.categoria for record in ordered)
    )

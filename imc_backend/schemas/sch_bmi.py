from pydantic import BaseModel, Field
from typing import List
from datetime import datetime
from imc_backend.models.mod_bmi import BmiCategory
from imc_backend.schemas.sch_user import UserResponse

class BmiCalculationRequest(BaseModel):
    altura: float = Field(strict=True, description="Height in meters (0.01 - 2.99)", examples=[1.78])
    peso: float = Field(strict=True, description="Weight in kilograms (0.01 - 499.99)", examples=[56])

class BmiResponse(BaseModel):
    id: str
    altura: float
    peso: float
    imc: float
    categoria: BmiCategory
    fecha_calculo: datetime
    user: UserResponse

class BmiPageResponse(BaseModel):
    data: List[BmiResponse]
    total: int

# Dashboard Schemas
class DashboardHistoryItem(BaseModel):
    fecha_calculo: datetime
    imc: float
    peso: float

class MeanDeviation(BaseModel):
    promedio: float
    desviacion: float

class CategoryCounts(BaseModel):
    cantBajoPeso: int = 0
    cantNormal: int = 0
    cantSobrepeso: int = 0
    cantObeso: int = 0

class DashboardResponse(BaseModel):
    historiales: List[DashboardHistoryItem]
    estadisticasPeso: MeanDeviation
    estadisticasImc: MeanDeviation
    categorias: CategoryCounts

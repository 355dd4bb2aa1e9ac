from enum import Enum
from pydantic import BaseModel
from datetime import datetime

class BmiCategory(str, Enum):
    BAJO_PESO = "Bajo peso"
    NORMAL = "Normal"
    SOBREPESO = "Sobrepeso"
    OBESO = "Obeso"

class BmiRecord(BaseModel):
    id: str
    user_id: str
    altura: float               # meters
    peso: float                 # kilograms
    imc: float                  # rounded to 2 decimals
    categoria: BmiCategory
    fecha_calculo: datetime

    class Config:
        from_attributes = True

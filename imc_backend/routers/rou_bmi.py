from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from imc_backend.schemas.sch_bmi import BmiCalculationRequest, BmiPageResponse, BmiResponse, DashboardResponse
from imc_backend.schemas.sch_errors import ValidationErrorResponse
from imc_backend.services.svc_bmi import BmiService
from imc_backend.repositories.rep_bmi import BmiRecordRepository
from imc_backend.validators.val_bmi import BmiValidator, DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from imc_backend.dependencies.dep_auth import get_current_user, get_bmi_repository
from imc_backend.models.mod_user import User

router = APIRouter(
    prefix="/imc",
    tags=["IMC"],
    responses={400: {"model": ValidationErrorResponse}},
)

@router.post('/calcular', response_model=BmiResponse, status_code=201)
def calculate(
    request: BmiCalculationRequest,
    records: BmiRecordRepository = Depends(get_bmi_repository),
    current_user: User = Depends(get_current_user)
):
    """
    Calculate the BMI and store it in the history of the authenticated user.

    - altura: height in meters, between 0.01 and 2.99
    - peso: weight in kilograms, between 0.01 and 499.99
    """
    return BmiService.calculate(records, current_user, request)

@router.get('/historial', response_model=List[BmiResponse])
def get_history(
    sort: Optional[str] = Query(default=None, description="asc or desc (default desc)"),
    records: BmiRecordRepository = Depends(get_bmi_repository),
    current_user: User = Depends(get_current_user)
):
    """
    Get all calculations of the authenticated user ordered by date.
    """
    return BmiService.history(records, current_user, BmiValidator.normalize_sort(sort))

@router.get('/pag', response_model=BmiPageResponse)
def get_page(
    pag: int = Query(default=DEFAULT_PAGE, description="Page number (minimum 1)"),
    mostrar: int = Query(default=DEFAULT_PAGE_SIZE, description="Items per page (minimum 1)"),
    sort: Optional[str] = Query(default=None, description="asc or desc (default desc)"),
    records: BmiRecordRepository = Depends(get_bmi_repository),
    current_user: User = Depends(get_current_user)
):
    """
    Get one page of the authenticated user's calculations, e.g. /imc/pag?pag=2&mostrar=5
    """
    return BmiService.paginate(records, current_user, pag, mostrar, BmiValidator.normalize_sort(sort))

@router.get('/dashboard', response_model=DashboardResponse)
def get_dashboard(
    records: BmiRecordRepository = Depends(get_bmi_repository),
    current_user: User = Depends(get_current_user)
):
    """
    Get the history series (oldest first), weight and BMI statistics and the
    number of calculations in each category.
    """
    return BmiService.dashboard(records, current_user)

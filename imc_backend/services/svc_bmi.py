import uuid
from datetime import datetime, timezone
from typing import List
from imc_backend.helpers.hlp_bmi import calculate_bmi, categorize, round_half_away_from_zero
from imc_backend.helpers.hlp_dashboard import build_dashboard
from imc_backend.models.mod_bmi import BmiRecord
from imc_backend.models.mod_user import User
from imc_backend.repositories.rep_bmi import BmiRecordRepository
from imc_backend.schemas.sch_bmi import BmiCalculationRequest, BmiPageResponse, BmiResponse, DashboardResponse
from imc_backend.services.svc_user import UserService
from imc_backend.validators.val_bmi import BmiValidator
from imc_backend.configuration.monitor import log_event, log_exception, start_span

class BmiService:
    @staticmethod
    def _get_current_time() -> datetime:
        """Get current time as UTC timezone-aware datetime"""
        return datetime.now(timezone.utc)

    @staticmethod
    def to_response(record: BmiRecord, user: User) -> BmiResponse:
        return BmiResponse(
            id=record.id,
            altura=record.altura,
            peso=record.peso,
            imc=record.imc,
            categoria=record.categoria,
            fecha_calculo=record.fecha_calculo,
            user=UserService.to_user_response(user)
        )

    @staticmethod
    def calculate(records: BmiRecordRepository, user: User, request: BmiCalculationRequest) -> BmiResponse:
        """
        Compute the BMI for the given height and weight and store it in the
        user's history. The category comes from the unrounded value.
        """
        try:
            with start_span("calculate_bmi", attributes={"user_id": user.id}):
                BmiValidator.validate_calculation(request.altura, request.peso)

                bmi = calculate_bmi(request.peso, request.altura)
                record = BmiRecord(
                    id=str(uuid.uuid4()),
                    user_id=user.id,
                    altura=request.altura,
                    peso=request.peso,
                    imc=round_half_away_from_zero(bmi, 2),
                    categoria=categorize(bmi),
                    fecha_calculo=BmiService._get_current_time()
                )
                saved = records.save(record)

                log_event("BMI calculated", {
                    "record_id": saved.id,
                    "user_id": user.id,
                    "categoria": saved.categoria.value
                })
                return BmiService.to_response(saved, user)
        except Exception as e:
            log_exception(e, {"operation": "calculate_bmi", "user_id": user.id})
            raise

    @staticmethod
    def history(records: BmiRecordRepository, user: User, sort: str = "desc") -> List[BmiResponse]:
        """All calculations of the user ordered by date ('asc' or 'desc')"""
        with start_span("bmi_history", attributes={"user_id": user.id, "sort": sort}):
            items = records.find_all_sorted(user.id, sort.upper())
            log_event("BMI history retrieved", {"user_id": user.id, "count": len(items)})
            return [BmiService.to_response(item, user) for item in items]

    @staticmethod
    def paginate(records: BmiRecordRepository, user: User, pag: int, mostrar: int, sort: str = "desc") -> BmiPageResponse:
        with start_span("bmi_page", attributes={"user_id": user.id, "pag": pag, "mostrar": mostrar}):
            BmiValidator.validate_pagination(pag, mostrar)
            data, total = records.find_page(user.id, pag, mostrar, sort.upper())
            return BmiPageResponse(
                data=[BmiService.to_response(item, user) for item in data],
                total=total
            )

    @staticmethod
    def dashboard(records: BmiRecordRepository, user: User) -> DashboardResponse:
        with start_span("bmi_dashboard", attributes={"user_id": user.id}):
            return build_dashboard(records.find_all_sorted(user.id, "ASC"))

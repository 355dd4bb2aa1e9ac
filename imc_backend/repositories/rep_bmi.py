from datetime import datetime
from typing import List, Tuple
from azure.cosmos import ContainerProxy, exceptions
from imc_backend.models.mod_bmi import BmiRecord
from imc_backend.configuration.monitor import log_exception
from imc_backend.validators.val_errors import InternalServerError

ORDERS = ("ASC", "DESC")

class BmiRecordRepository:
    """BMI calculations stored in a Cosmos container partitioned by /user_id"""

    def __init__(self, db: ContainerProxy):
        self.db = db

    @staticmethod
    def _to_document(record: BmiRecord) -> dict:
        document = record.model_dump(mode="json")
        # Stored as ISO 8601 UTC so ORDER BY on the string is chronological
        document["fecha_calculo"] = record.fecha_calculo.isoformat()
        return document

    @staticmethod
    def _to_model(item: dict) -> BmiRecord:
        item = dict(item)
        item["fecha_calculo"] = datetime.fromisoformat(item["fecha_calculo"])
        return BmiRecord(**item)

    @staticmethod
    def _check_order(order: str) -> str:
        if order not in ORDERS:
            raise ValueError(f"Order must be one of {ORDERS}, got {order!r}")
        return order

    def save(self, record: BmiRecord) -> BmiRecord:
        try:
            self.db.create_item(body=self._to_document(record))
            return record
        except exceptions.CosmosHttpResponseError as e:
            log_exception(e, {"operation": "save_bmi_record", "user_id": record.user_id})
            raise InternalServerError("Error while saving BMI calculation", context="save_bmi_record")

    def find_all_sorted(self, user_id: str, order: str = "DESC") -> List[BmiRecord]:
        query = f'SELECT * FROM c WHERE c.user_id = @user_id ORDER BY c.fecha_calculo {self._check_order(order)}'
        try:
            items = self.db.query_items(
                query=query,
                parameters=[{"name": "@user_id", "value": user_id}],
                partition_key=user_id
            )
            return [self._to_model(item) for item in items]
        except exceptions.CosmosHttpResponseError as e:
            log_exception(e, {"operation": "find_all_sorted", "user_id": user_id, "order": order})
            raise InternalServerError(f"Error while fetching BMI history ({order})", context="find_all_sorted")

    def find_page(self, user_id: str, pag: int, mostrar: int, order: str = "DESC") -> Tuple[List[BmiRecord], int]:
        """
        Return one page of a user's records and the total number of records the user owns.

        Offset and limit never go past the total, so any pag/mostrar >= 1 is
        served; a page beyond the last one is empty.
        """
        query = (
            f'SELECT * FROM c WHERE c.user_id = @user_id ORDER BY c.fecha_calculo {self._check_order(order)} '
            'OFFSET @skip LIMIT @limit'
        )
        try:
            totals = list(self.db.query_items(
                query='SELECT VALUE COUNT(1) FROM c WHERE c.user_id = @user_id',
                parameters=[{"name": "@user_id", "value": user_id}],
                partition_key=user_id
            ))
            total = totals[0] if totals else 0

            skip = (pag - 1) * mostrar
            if skip >= total:
                return [], total

            items = self.db.query_items(
                query=query,
                parameters=[
                    {"name": "@user_id", "value": user_id},
                    {"name": "@skip", "value": skip},
                    {"name": "@limit", "value": min(mostrar, total - skip)}
                ],
                partition_key=user_id
            )
            return [self._to_model(item) for item in items], total
        except exceptions.CosmosHttpResponseError as e:
            log_exception(e, {"operation": "find_page", "user_id": user_id, "pag": pag, "mostrar": mostrar})
            raise InternalServerError("Error while paginating BMI history", context="find_page")

from typing import Any, Dict, List, Optional
from azure.cosmos import ContainerProxy, exceptions
from imc_backend.models.mod_user import User
from imc_backend.configuration.monitor import log_exception
from imc_backend.validators.val_errors import InternalServerError

class UserRepository:
    """Users stored in a Cosmos container partitioned by /id"""

    def __init__(self, db: ContainerProxy):
        self.db = db

    def _fail(self, error: Exception, context: str, **properties) -> InternalServerError:
        log_exception(error, {"operation": context, **properties})
        return InternalServerError(f"Error while {context.replace('_', ' ')}", context=context)

    def find_all(self) -> List[User]:
        try:
            items = self.db.query_items(
                query='SELECT * FROM c WHERE c.type = "user"',
                enable_cross_partition_query=True
            )
            return [User(**item) for item in items]
        except exceptions.CosmosHttpResponseError as e:
            raise self._fail(e, "listing_users")

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            items = list(self.db.query_items(
                query='SELECT * FROM c WHERE c.type = "user" AND c.email = @email',
                parameters=[{"name": "@email", "value": email}],
                enable_cross_partition_query=True
            ))
        except exceptions.CosmosHttpResponseError as e:
            raise self._fail(e, "finding_user_by_email")
        return User(**items[0]) if items else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        try:
            items = list(self.db.query_items(
                query='SELECT * FROM c WHERE c.type = "user" AND c.id = @id',
                parameters=[{"name": "@id", "value": user_id}],
                enable_cross_partition_query=True
            ))
        except exceptions.CosmosHttpResponseError as e:
            raise self._fail(e, "finding_user_by_id", user_id=user_id)
        return User(**items[0]) if items else None

    def save(self, user: User) -> User:
        try:
            self.db.create_item(body={**user.model_dump(), "type": "user"})
            return user
        except exceptions.CosmosHttpResponseError as e:
            raise self._fail(e, "saving_user", user_id=user.id)

    def update(self, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
        """Apply partial changes; returns None when the user does not exist"""
        existing = self.find_by_id(user_id)
        if existing is None:
            return None
        updated = existing.model_copy(update=changes)
        try:
            self.db.upsert_item(body={**updated.model_dump(), "type": "user"})
            return updated
        except exceptions.CosmosHttpResponseError as e:
            raise self._fail(e, "updating_user", user_id=user_id)

    def delete(self, user_id: str) -> bool:
        try:
            self.db.delete_item(item=user_id, partition_key=user_id)
            return True
        except exceptions.CosmosResourceNotFoundError:
            return False
        except exceptions.CosmosHttpResponseError as e:
            raise self._fail(e, "deleting_user", user_id=user_id)

import pytest
from azure.cosmos import exceptions

from imc_backend.repositories.rep_user import UserRepository
from imc_backend.validators.val_errors import InternalServerError

@pytest.fixture
def stored_user():
    return {
        "id": "user123",
        "email": "test@example.com",
        "password": "$2b$04$hash",
        "firstName": "Test",
        "lastName": "User",
        "type": "user",
        "_rid": "abc=="
    }

def test_find_by_email(mock_db, stored_user):
    mock_db.query_items.return_value = iter([stored_user])

    user = UserRepository(mock_db).find_by_email("test@example.com")

    assert user.id == "user123"
    assert mock_db.query_items.call_args.kwargs["parameters"] == [{"name": "@email", "value": "test@example.com"}]

def test_find_by_email_not_found(mock_db):
    mock_db.query_items.return_value = iter([])

    assert UserRepository(mock_db).find_by_email("nobody@example.com") is None

def test_find_by_email_store_failure(mock_db):
    mock_db.query_items.side_effect = exceptions.CosmosHttpResponseError(status_code=503, message="unavailable")

    with pytest.raises(InternalServerError):
        UserRepository(mock_db).find_by_email("test@example.com")

def test_find_all(mock_db, stored_user):
    mock_db.query_items.return_value = iter([stored_user, {**stored_user, "id": "user456", "email": "b@example.com"}])

    users = UserRepository(mock_db).find_all()

    assert [user.id for user in users] == ["user123", "user456"]

def test_save_marks_document_type(mock_db, sample_user):
    UserRepository(mock_db).save(sample_user)

    body = mock_db.create_item.call_args.kwargs["body"]
    assert body["type"] == "user"
    assert body["id"] == "user123"

def test_update_merges_changes(mock_db, stored_user):
    mock_db.query_items.return_value = iter([stored_user])

    updated = UserRepository(mock_db).update("user123", {"firstName": "Nuevo"})

    assert updated.firstName == "Nuevo"
    assert updated.email == "test@example.com"
    body = mock_db.upsert_item.call_args.kwargs["body"]
    assert body["firstName"] == "Nuevo"
    assert body["type"] == "user"

def test_update_missing_user(mock_db):
    mock_db.query_items.return_value = iter([])

    assert UserRepository(mock_db).update("missing", {"firstName": "X"}) is None
    mock_db.upsert_item.assert_not_called()

def test_delete(mock_db):
    assert UserRepository(mock_db).delete("user123") is True
    mock_db.delete_item.assert_called_once_with(item="user123", partition_key="user123")

def test_delete_missing_user(mock_db):
    mock_db.delete_item.side_effect = exceptions.CosmosResourceNotFoundError(status_code=404, message="missing")

    assert UserRepository(mock_db).delete("missing") is False

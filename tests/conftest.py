import pytest

from leave_desk import create_app
from leave_desk.leave_service import Session
from leave_desk.models import Employee
from leave_desk.storage import RecordStore


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path)


@pytest.fixture
def seeded_store(store):
    store.save_employees(
        [
            Employee(id=0, name="admin", password="a"),
            Employee(id=7, name="alice", password="secret", leave_balance=12),
            Employee(id=8, name="bob", password="hunter2", leave_balance=3),
        ]
    )
    return store


@pytest.fixture
def admin():
    return Session(employee_id=0, name="admin", is_admin=True)


@pytest.fixture
def alice():
    return Session(employee_id=7, name="alice")


@pytest.fixture
def app(seeded_store):
    app = create_app({"DATA_DIR": str(seeded_store.data_dir), "TESTING": True})
    return app


@pytest.fixture
def client(app):
    return app.test_client()

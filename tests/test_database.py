"""Tests for the atomic transaction helper."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import ServerException, ValidationException
from app.domain.models.company import Company
from app.infrastructure.database import atomic


def test_commits_on_success(db):
    with atomic(db):
        db.add(Company(name="rak"))

    db.expire_all()
    assert db.query(Company).count() == 1


def test_rolls_back_and_reraises(db):
    with pytest.raises(ValidationException):
        with atomic(db):
            db.add(Company(name="rak"))
            db.flush()
            raise ValidationException("nope")

    assert db.query(Company).count() == 0


def test_driver_failure_becomes_server_error():
    session = Mock()
    session.commit.side_effect = OperationalError("COMMIT", {}, Exception("connection lost"))

    with pytest.raises(ServerException) as excinfo:
        with atomic(session):
            pass

    assert excinfo.value.status_code == 500
    session.rollback.assert_called_once()


def test_bootstrap_seeds_invoice_counter_once(db):
    from app.domain.models.invoice import InvoiceCounter
    from app.main import bootstrap_reference_data

    bootstrap_reference_data(db)
    bootstrap_reference_data(db)

    counters = db.query(InvoiceCounter).all()
    assert len(counters) == 1
    assert counters[0].invoice_number == 1

import uuid
from types import SimpleNamespace

import pytest

from app.core.exceptions import ForbiddenError, NotFoundError
from app.services.ownership import authorize, parse_record_id
from app.services.run_metrics import compute_pace


def test_authorize_allows_owner():
    owner = uuid.uuid4()
    record = SimpleNamespace(user_id=owner)
    assert authorize(record, owner) is record


def test_authorize_missing_record():
    with pytest.raises(NotFoundError) as exc:
        authorize(None, uuid.uuid4(), "Run")
    assert exc.value.status_code == 404
    assert exc.value.message == "Run not found"


def test_authorize_other_owner():
    record = SimpleNamespace(user_id=uuid.uuid4())
    with pytest.raises(ForbiddenError) as exc:
        authorize(record, uuid.uuid4())
    assert exc.value.status_code == 403


def test_parse_record_id():
    rid = uuid.uuid4()
    assert parse_record_id(str(rid)) == rid
    assert parse_record_id(rid) is rid
    assert parse_record_id("abc") is None


@pytest.mark.parametrize(
    "distance, duration, expected",
    [
        (10, 50, 5.0),
        (4, 22, 5.5),
        (0, 30, 0.0),
        (-1, 30, 0.0),
    ],
)
def test_compute_pace(distance, duration, expected):
    assert compute_pace(distance, duration) == pytest.approx(expected)

from datetime import datetime, timezone, timedelta
from fittrack.models.session import Session


def test_session_model_exists():
    """Test Session model can be instantiated."""
    session = Session(
        id="a" * 64,
        user_id=1,
        expires_at=datetime.now(timezone.utc) + timedelta(days=30),
    )
    assert session.user_id == 1
    assert session.id == "a" * 64


def test_session_has_required_fields():
    """Test Session has all required fields."""
    assert hasattr(Session, 'id')
    assert hasattr(Session, 'user_id')
    assert hasattr(Session, 'expires_at')
    assert hasattr(Session, 'created_at')
    assert hasattr(Session, 'user')


def test_session_user_id_is_indexed():
    assert Session.__table__.c.user_id.index is True

"""
Pytest configuration and shared fixtures
"""
import os

# keep the application engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from hotelpms.database import Base, get_db
from hotelpms.models import tables  # noqa: F401
from hotelpms.models.tables import Hotel, RoomType, Room, RoomStatus
from hotelpms.security.auth import create_access_token
from hotelpms.services.media_service import get_media_uploader
from hotelpms.main import app

OPERATOR_ID = "11111111-1111-1111-1111-111111111111"
GUEST_ID = "22222222-2222-2222-2222-222222222222"
NEWCOMER_ID = "33333333-3333-3333-3333-333333333333"


class FakeUploader:
    """Stands in for the media service in router tests"""

    def __init__(self):
        self.uploads = []

    def upload(self, content, filename, content_type=None):
        self.uploads.append((filename, content, content_type))
        return f"https://res.cloudinary.com/demo/image/upload/v1/hotel_images/{filename}"


@pytest.fixture(scope="function")
def db_engine():
    """In-memory database engine"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Database session"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def fake_uploader():
    return FakeUploader()


@pytest.fixture(scope="function")
def client(db_session, fake_uploader):
    """Test client"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_uploader] = lambda: fake_uploader
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Auth fixtures ==============

@pytest.fixture
def operator_token():
    return create_access_token(OPERATOR_ID, email="owner@seaview.test")


@pytest.fixture
def auth_headers(operator_token):
    """Headers of the operator who owns sample_hotel"""
    return {"Authorization": f"Bearer {operator_token}"}


@pytest.fixture
def guest_headers():
    """Headers of a guest booking from the public page"""
    return {"Authorization": f"Bearer {create_access_token(GUEST_ID, email='guest@mail.test')}"}


@pytest.fixture
def newcomer_headers():
    """Headers of an operator without a hotel yet"""
    return {"Authorization": f"Bearer {create_access_token(NEWCOMER_ID, email='new@mail.test')}"}


# ============== Entity fixtures ==============

@pytest.fixture
def sample_hotel(db_session):
    """Published hotel owned by the operator"""
    hotel = Hotel(
        user_id=OPERATOR_ID,
        name="Seaview Hotel",
        description="Rooms by the sea",
        city="Valencia",
        country="Spain",
        amenities=["WiFi"],
        services=[],
        gallery_urls=[],
        public_profile=True,
        chatbot_enabled=True,
        booking_enabled=True
    )
    db_session.add(hotel)
    db_session.commit()
    db_session.refresh(hotel)
    return hotel


@pytest.fixture
def sample_room_type(db_session, sample_hotel):
    room_type = RoomType(
        hotel_id=sample_hotel.id,
        name="Double",
        description="Double room",
        capacity=2,
        base_price=Decimal("120.00")
    )
    db_session.add(room_type)
    db_session.commit()
    db_session.refresh(room_type)
    return room_type


@pytest.fixture
def sample_room_type_family(db_session, sample_hotel):
    room_type = RoomType(
        hotel_id=sample_hotel.id,
        name="Family",
        description="Family suite",
        capacity=4,
        base_price=Decimal("200.00")
    )
    db_session.add(room_type)
    db_session.commit()
    db_session.refresh(room_type)
    return room_type


@pytest.fixture
def sample_room(db_session, sample_hotel, sample_room_type):
    room = Room(
        hotel_id=sample_hotel.id,
        room_number="101",
        floor="1",
        room_type_id=sample_room_type.id,
        status=RoomStatus.AVAILABLE
    )
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room

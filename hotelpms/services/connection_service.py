"""
OTA connection service
Every supported channel is listed whether or not the hotel configured it
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from hotelpms.models.tables import OTAConnection
from hotelpms.models.schemas import ConnectionCreate

logger = logging.getLogger(__name__)

OTA_PROVIDERS = [
    {'name': 'Booking', 'color': '#003580',
     'description': "Connect with Booking.com, one of the world's leading digital travel companies."},
    {'name': 'Trivago', 'color': '#007faf',
     'description': 'Integrate with Trivago, a global hotel search platform.'},
    {'name': 'Airbnb', 'color': '#ff5a5f',
     'description': 'Link your property with Airbnb, the popular online marketplace for lodging and tourism experiences.'},
    {'name': 'Expedia', 'color': '#00355f',
     'description': 'Connect to Expedia Group, which powers major travel booking sites.'},
    {'name': 'Hotels.com', 'color': '#d32f2f',
     'description': 'Integrate with Hotels.com, a leading lodging booking platform.'},
    {'name': 'TripAdvisor', 'color': '#00a680',
     'description': "Connect with TripAdvisor, the world's largest travel guidance platform."},
]

API_KEY_VISIBLE_CHARS = 6


def mask_api_key(api_key: Optional[str]) -> str:
    if not api_key:
        return ""
    return api_key[:API_KEY_VISIBLE_CHARS] + "..."


def get_provider(name: str) -> Optional[dict]:
    return next((p for p in OTA_PROVIDERS if p['name'] == name), None)


class ConnectionService:
    """OTA connection service"""

    def __init__(self, db: Session, hotel_id: str):
        self.db = db
        self.hotel_id = hotel_id

    def get_connection(self, connection_id: str) -> Optional[OTAConnection]:
        return self.db.query(OTAConnection).filter(
            OTAConnection.id == connection_id,
            OTAConnection.hotel_id == self.hotel_id
        ).first()

    def list_connections(self) -> List[dict]:
        """Provider catalog merged with the hotel's stored connections"""
        stored = {
            c.ota_name: c for c in self.db.query(OTAConnection).filter(
                OTAConnection.hotel_id == self.hotel_id
            ).all()
        }

        result = []
        for provider in OTA_PROVIDERS:
            existing = stored.get(provider['name'])
            if existing:
                result.append(self.to_response(existing))
            else:
                result.append({
                    'id': None,
                    'ota_name': provider['name'],
                    'api_key': '',
                    'is_active': False,
                    'color': provider['color'],
                    'description': provider['description'],
                    'is_configured': False,
                })
        return result

    def configure(self, data: ConnectionCreate) -> OTAConnection:
        if not get_provider(data.ota_name):
            raise ValueError(f"Unsupported channel: {data.ota_name}")

        existing = self.db.query(OTAConnection).filter(
            OTAConnection.hotel_id == self.hotel_id,
            OTAConnection.ota_name == data.ota_name
        ).first()
        if existing and existing.api_key:
            raise ValueError(f"{data.ota_name} is already configured")

        if existing:
            existing.api_key = data.api_key
            existing.api_secret = data.api_secret
            connection = existing
        else:
            connection = OTAConnection(
                hotel_id=self.hotel_id,
                ota_name=data.ota_name,
                api_key=data.api_key,
                api_secret=data.api_secret,
                is_active=False
            )
            self.db.add(connection)

        self.db.commit()
        self.db.refresh(connection)
        logger.info(f"OTA connection {data.ota_name} configured for hotel {self.hotel_id}")
        return connection

    def toggle(self, connection_id: str) -> OTAConnection:
        connection = self.get_connection(connection_id)
        if not connection:
            raise LookupError("Connection not found")

        connection.is_active = not connection.is_active
        self.db.commit()
        self.db.refresh(connection)
        return connection

    def to_response(self, connection: OTAConnection) -> dict:
        provider = get_provider(connection.ota_name) or {'color': '', 'description': ''}
        return {
            'id': connection.id,
            'ota_name': connection.ota_name,
            'api_key': mask_api_key(connection.api_key),
            'is_active': bool(connection.is_active),
            'color': provider['color'],
            'description': provider['description'],
            'is_configured': bool(connection.api_key),
        }

"""
OTA connection routes
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import ConnectionCreate, ConnectionResponse, ViewMode
from hotelpms.security.auth import get_current_hotel
from hotelpms.services.connection_service import ConnectionService

router = APIRouter(prefix="/connections", tags=["Connections"])


@router.get("", response_model=List[ConnectionResponse])
def list_connections(
    response: Response,
    view: ViewMode = ViewMode.GRID,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Every supported channel with the hotel's configuration"""
    response.headers["X-View-Mode"] = view.value
    return ConnectionService(db, hotel.id).list_connections()


@router.post("", response_model=ConnectionResponse)
def configure_connection(
    data: ConnectionCreate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    service = ConnectionService(db, hotel.id)
    try:
        return service.to_response(service.configure(data))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{connection_id}/toggle", response_model=ConnectionResponse)
def toggle_connection(
    connection_id: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Activate or deactivate a channel"""
    service = ConnectionService(db, hotel.id)
    try:
        return service.to_response(service.toggle(connection_id))
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

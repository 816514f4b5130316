"""
Room routes
Rooms under /rooms and their types under /room-types
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Response, UploadFile, File
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import (
    RoomCreate, RoomUpdate, RoomResponse,
    RoomTypeCreate, RoomTypeUpdate, RoomTypeResponse, ViewMode
)
from hotelpms.routers.upload import upload_to_media
from hotelpms.security.auth import get_current_hotel
from hotelpms.services.media_service import MediaUploader, get_media_uploader
from hotelpms.services.room_service import RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])
type_router = APIRouter(prefix="/room-types", tags=["Rooms"])


# ============== Rooms ==============

@router.get("", response_model=List[RoomResponse])
def list_rooms(
    response: Response,
    view: ViewMode = ViewMode.GRID,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Rooms ordered by room number"""
    service = RoomService(db, hotel.id)
    response.headers["X-View-Mode"] = view.value
    return [service.get_room_detail(room) for room in service.get_rooms()]


@router.get("/available", response_model=List[RoomResponse])
def list_available_rooms(
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Rooms offered in the reservation form"""
    service = RoomService(db, hotel.id)
    return [service.get_room_detail(room) for room in service.get_available_rooms()]


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(
    room_id: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    service = RoomService(db, hotel.id)
    room = service.get_room(room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return service.get_room_detail(room)


@router.post("", response_model=RoomResponse)
def create_room(
    data: RoomCreate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    service = RoomService(db, hotel.id)
    try:
        room = service.create_room(data)
        return service.get_room_detail(room)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: str,
    data: RoomUpdate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    service = RoomService(db, hotel.id)
    try:
        room = service.update_room(room_id, data)
        return service.get_room_detail(room)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{room_id}/image", response_model=RoomResponse)
def update_room_image(
    room_id: str,
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel),
    uploader: MediaUploader = Depends(get_media_uploader)
):
    """Upload a new room photo"""
    service = RoomService(db, hotel.id)
    if not service.get_room(room_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")

    url = upload_to_media(uploader, file)
    try:
        room = service.set_room_image(room_id, url)
        return service.get_room_detail(room)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{room_id}")
def delete_room(
    room_id: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        RoomService(db, hotel.id).delete_room(room_id)
        return {"message": "Room deleted"}
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ============== Room types ==============

@type_router.get("", response_model=List[RoomTypeResponse])
def list_room_types(
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Room types ordered by name"""
    return RoomService(db, hotel.id).get_room_types()


@type_router.post("", response_model=RoomTypeResponse)
def create_room_type(
    data: RoomTypeCreate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    return RoomService(db, hotel.id).create_room_type(data)


@type_router.put("/{room_type_id}", response_model=RoomTypeResponse)
def update_room_type(
    room_type_id: str,
    data: RoomTypeUpdate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return RoomService(db, hotel.id).update_room_type(room_type_id, data)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@type_router.delete("/{room_type_id}")
def delete_room_type(
    room_type_id: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        RoomService(db, hotel.id).delete_room_type(room_type_id)
        return {"message": "Room type deleted"}
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

"""
Profile and support routes
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.schemas import (
    ProfileResponse, ProfileUpdate, SupportTicketCreate, SupportTicketResponse
)
from hotelpms.routers.upload import upload_to_media
from hotelpms.security.auth import AuthUser, get_current_user
from hotelpms.services.media_service import MediaUploader, get_media_uploader
from hotelpms.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["Profile"])
support_router = APIRouter(prefix="/support", tags=["Support"])


@router.get("", response_model=ProfileResponse)
def get_profile(
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    """Caller's profile"""
    return ProfileService(db).get_or_create(current_user)


@router.put("", response_model=ProfileResponse)
def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    return ProfileService(db).update_profile(current_user, data)


@router.put("/avatar", response_model=ProfileResponse)
def update_avatar(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
    uploader: MediaUploader = Depends(get_media_uploader)
):
    """Upload a new avatar"""
    url = upload_to_media(uploader, file)
    return ProfileService(db).set_avatar(current_user, url)


@support_router.post("/tickets", response_model=SupportTicketResponse)
def create_ticket(
    data: SupportTicketCreate,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    """Open a support ticket"""
    try:
        return ProfileService(db).create_ticket(current_user, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

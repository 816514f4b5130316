"""
Dashboard routes
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import DashboardStats
from hotelpms.security.auth import get_current_hotel
from hotelpms.services.report_service import ReportService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Dashboard statistics"""
    return ReportService(db, hotel).get_dashboard_stats()

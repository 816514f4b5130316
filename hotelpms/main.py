"""
Hotel PMS application entry point
Operator dashboard API plus the public hotel page
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from hotelpms import __version__
from hotelpms.config import settings
from hotelpms.database import init_db
from hotelpms.routers import (
    hotel, rooms, reservations, reviews, connections, gallery, upload, public,
    profile, dashboard
)

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup"""
    init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Hotel property management: operator dashboard and public hotel page",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(hotel.router)
app.include_router(rooms.router)
app.include_router(rooms.type_router)
app.include_router(reservations.router)
app.include_router(reviews.router)
app.include_router(connections.router)
app.include_router(gallery.router)
app.include_router(upload.router)
app.include_router(public.router)
app.include_router(profile.router)
app.include_router(profile.support_router)
app.include_router(dashboard.router)


@app.get("/")
def root():
    return {"name": settings.APP_NAME, "version": __version__}


@app.get("/health")
def health_check():
    return {"status": "healthy"}

from fastapi import APIRouter

from .features.export_guests.router import router as export_guests_router
from .features.get_rsvp.router import router as get_rsvp_router
from .features.guest_summary.router import router as guest_summary_router
from .features.manage_guests.router import router as manage_guests_router
from .features.update_rsvp.router import router as update_rsvp_router

router = APIRouter()

router.include_router(get_rsvp_router, tags=["RSVP"])
router.include_router(update_rsvp_router, tags=["RSVP"])
router.include_router(export_guests_router, tags=["Summary"])
router.include_router(guest_summary_router, tags=["Summary"])
router.include_router(manage_guests_router, tags=["Summary"])

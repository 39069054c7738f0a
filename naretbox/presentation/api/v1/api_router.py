"""
Main API router for version 1 of the Naretbox API.

Aggregates all endpoint routers for this version.
"""

from fastapi import APIRouter

from naretbox.presentation.api.v1.endpoints.appointments import router as appointments_router
from naretbox.presentation.api.v1.endpoints.assessments import router as assessments_router

api_v1_router = APIRouter()

api_v1_router.include_router(assessments_router, prefix="/assessments")
api_v1_router.include_router(appointments_router)

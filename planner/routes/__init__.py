# planner/routes/__init__.py
from fastapi import APIRouter
from planner.routes.trip import trip_routes, invitation, participant


api_router = APIRouter()

# Trip routes
api_router.include_router(trip_routes.router)
api_router.include_router(invitation.router)
api_router.include_router(participant.router)

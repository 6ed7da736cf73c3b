from fastapi import APIRouter
from api.v1.endpoints import writing

api_router = APIRouter()
api_router.include_router(writing.router, tags=["writing"])

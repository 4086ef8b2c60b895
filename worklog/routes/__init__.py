from fastapi import APIRouter

from .attendance import router as attendance_router
from .daily_reports import router as daily_reports_router
from .employees import router as employees_router
from .exports import router as exports_router
from .fuel import router as fuel_router
from .vehicles import router as vehicles_router
from .work_orders import router as work_orders_router

api_router = APIRouter()
api_router.include_router(vehicles_router, tags=["vehicles"])
api_router.include_router(fuel_router, tags=["fuel"])
api_router.include_router(employees_router, tags=["employees"])
api_router.include_router(work_orders_router, tags=["work orders"])
api_router.include_router(daily_reports_router, tags=["daily reports"])
api_router.include_router(attendance_router, tags=["attendance"])
api_router.include_router(exports_router, tags=["exports"])

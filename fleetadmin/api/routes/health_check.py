from fastapi import APIRouter

from fleetadmin.api.utils.response import ApiResponse

router = APIRouter()


@router.get("/health", response_model=ApiResponse[dict])
async def health_check():
    return ApiResponse(message="Service is healthy", data={"status": "ok"})

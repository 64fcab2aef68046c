from datetime import datetime, timezone

from fastapi import APIRouter

from todo_api.api.responses import HealthOut

router = APIRouter(tags=["health"])

@router.get(
    "/",
    summary="Health check",
    response_model=HealthOut,
)
def health():
    return HealthOut(
        message="Authorization-Based TODO API is running!",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )

from fastapi import APIRouter, Depends

from resumekit.api.deps import get_ai_actions
from resumekit.services.ai_actions import AIActions

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check(actions: AIActions = Depends(get_ai_actions)):
    return {"status": "healthy", "ai_available": actions.available}

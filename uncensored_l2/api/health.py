from fastapi import APIRouter
from typing import Dict, Any

from ..providers.rpc import JsonRpcChainReader
from ..services.swap_builder import get_chain_registry

router = APIRouter()


@router.get("/healthz")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint that verifies chain configuration"""

    registry = get_chain_registry()
    reader = JsonRpcChainReader(registry)
    provider_status = {reader.name: await reader.health_check()}

    all_healthy = all(status["status"] == "healthy" for status in provider_status.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "providers": provider_status,
        "supported_chains": registry.supported_chains(),
    }

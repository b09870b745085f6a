from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, HTTPException

from ..core.enforcement.errors import SwapPreparationFailed
from ..services.swap_builder import get_chain_registry
from ..tools.enforcement import SwapEthL2Arguments, execute_swap_eth_l2


router = APIRouter(prefix="/enforcement")
logger = structlog.stdlib.get_logger(__name__)


@router.post("/swap")
async def post_enforcement_swap(req: SwapEthL2Arguments) -> Dict[str, List[Any]]:
    """Prepare L1 enforcement parameters for an ETH → token swap on an L2."""
    try:
        params = await execute_swap_eth_l2(req.model_dump(by_alias=True))
    except SwapPreparationFailed as e:
        logger.warning("enforcement_swap_failed", chain=req.chain_name, cause=type(e.__cause__).__name__)
        raise HTTPException(status_code=502, detail=e.message)
    return {"params": params}


@router.get("/chains")
async def get_enforcement_chains() -> Dict[str, Any]:
    registry = get_chain_registry()
    return {
        "chains": [config.to_dict() for config in registry.configs.values()],
    }

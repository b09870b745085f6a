"""
Tool boundary for the conversational layer.

The LLM layer registers ``SWAP_ETH_L2_TOOL`` and forwards each tool call's
arguments to ``execute_swap_eth_l2``. Only the collapsed
``SwapPreparationFailed`` ever leaves this module for a failed preparation.
"""

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.enforcement.builder import SwapQuoteBuilder
from ..core.enforcement.constants import SUPPORTED_CHAINS
from ..logging_config import swap_log_context
from ..services.swap_builder import get_swap_builder

logger = logging.getLogger(__name__)

TOOL_NAME = "swapEthL2"

ChainName = Literal["optimism", "base", "soneium", "modeNetwork", "ink"]


class SwapEthL2Arguments(BaseModel):
    """Arguments of one ``swapEthL2`` tool call (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    chain_name: ChainName = Field(alias="chainName", description="L2 network to swap on")
    token_address: str = Field(alias="tokenAddress", description="Token the user wants to receive")
    token_amount: str = Field(alias="tokenAmount", description="Amount of tokens to buy, as a decimal string")
    user_address: str = Field(alias="userAddress", description="Recipient of the purchased tokens")


SWAP_ETH_L2_TOOL: Dict[str, Any] = {
    "name": TOOL_NAME,
    "description": "Prepare enforcement transaction parameters for the swap.",
    "parameters": {
        "type": "object",
        "properties": {
            "chainName": {
                "type": "string",
                "enum": list(SUPPORTED_CHAINS),
            },
            "tokenAddress": {"type": "string"},
            "tokenAmount": {"type": "string"},
            "userAddress": {"type": "string"},
        },
        "required": ["chainName", "tokenAddress", "tokenAmount", "userAddress"],
        "additionalProperties": False,
    },
}


async def execute_swap_eth_l2(
    arguments: Dict[str, Any],
    *,
    builder: Optional[SwapQuoteBuilder] = None,
) -> List[Any]:
    """
    Run one ``swapEthL2`` tool call.

    Args:
        arguments: Raw tool-call arguments (validated here)
        builder: Optional builder; defaults to the process-wide instance

    Returns:
        ``[proxy, router, value, gas_limit, is_creation, data]``

    Raises:
        pydantic.ValidationError: If the arguments do not match the tool schema
        SwapPreparationFailed: If any preparation step fails
    """
    args = SwapEthL2Arguments.model_validate(arguments)
    builder = builder or get_swap_builder()

    with swap_log_context(args.chain_name, args.token_address):
        logger.info("Tool %s called for chain %s", TOOL_NAME, args.chain_name)
        params = await builder.prepare_swap(
            args.chain_name,
            args.token_address,
            args.token_amount,
            args.user_address,
        )
    return params.as_list()


__all__ = ["TOOL_NAME", "SWAP_ETH_L2_TOOL", "SwapEthL2Arguments", "execute_swap_eth_l2"]

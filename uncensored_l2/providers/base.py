from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: int = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class ChainReadProvider(Provider):
    """Read-only access to token and pool state on a supported chain"""

    @abstractmethod
    async def get_decimals(self, chain: str, token_address: str) -> int:
        """Return the ERC-20 ``decimals()`` of a token"""
        pass

    @abstractmethod
    async def get_reserves(self, chain: str, token_a: str, token_b: str) -> Tuple[int, int]:
        """Return the pair reserves ordered as ``(reserve_a, reserve_b)``"""
        pass

from providers.base import CheckProvider, ProviderError
from providers.pingdom_provider import PingdomProvider

__all__ = ["CheckProvider", "PingdomProvider", "ProviderError"]

from core.annotator import Annotator
from core.errors import BridgeError, CheckListError, ConfigError, InvalidFilterError
from core.metrics import METRIC_DESCRIPTORS, PingdomCollector
from core.outage_fetcher import OutageFetcher

__all__ = [
    "Annotator",
    "BridgeError",
    "CheckListError",
    "ConfigError",
    "InvalidFilterError",
    "METRIC_DESCRIPTORS",
    "OutageFetcher",
    "PingdomCollector",
]

"""Exchange-rate provider infrastructure package."""

from .ecb_rate_source import ECB_DAILY_URL, ECBRateSource

__all__ = ["ECB_DAILY_URL", "ECBRateSource"]

from .rate_store import RateStore
from .currency_converter import CurrencyConverter
from .asset_ledger import AssetLedger
from .asset_report_service import AssetReportService, AssetValuation, InventorySummary
from .sample_data_service import SampleDataService

__all__ = [
    "RateStore",
    "CurrencyConverter",
    "AssetLedger",
    "AssetReportService",
    "AssetValuation",
    "InventorySummary",
    "SampleDataService",
]

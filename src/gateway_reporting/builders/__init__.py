"""Query builders for the gateway reporting API"""

from .base import BaseBuilder
from .report import TransactionReportBuilder

__all__ = [
    "BaseBuilder",
    "TransactionReportBuilder",
]

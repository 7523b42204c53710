# Schemas package
from .connection_schema import (
    AnalysisRecord,
    ConnectionCreatedResponse,
    ConnectionRecord,
    ConnectionRequest,
)
from .content_schema import ContentGenerateRequest, ContentRecord
from .dashboard_schema import DashboardResponse
from .suggestion_schema import SuggestionRecord
from .url_project_schema import UrlProjectRecord

__all__ = [
    "ConnectionRequest",
    "ConnectionRecord",
    "ConnectionCreatedResponse",
    "AnalysisRecord",
    "ContentGenerateRequest",
    "ContentRecord",
    "SuggestionRecord",
    "UrlProjectRecord",
    "DashboardResponse",
]

from .extractor import EXTRACTION_TABLE, PLACEHOLDER_FIELDS, extract_section, parse_analysis_response
from .prompts import build_analysis_prompt, build_search_query
from .schema import AnalysisFields, SourceDescriptor

__all__ = [
    "EXTRACTION_TABLE",
    "PLACEHOLDER_FIELDS",
    "AnalysisFields",
    "SourceDescriptor",
    "build_analysis_prompt",
    "build_search_query",
    "extract_section",
    "parse_analysis_response",
]

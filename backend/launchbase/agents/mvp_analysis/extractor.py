"""Line-based field extraction from free-text AI analysis.

Matching is line-granular: a line containing the keyword anywhere is
returned whole (labels and bullets included), first match wins. Fields in
``PLACEHOLDER_FIELDS`` have no extraction rule and always get their static
list; callers must not treat those values as derived from the text.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .schema import AnalysisFields


def extract_section(text: str, keyword: str, fallback: str) -> str:
    """Return the first line of ``text`` containing ``keyword`` (case-insensitive), stripped.

    Returns ``fallback`` unchanged when no line matches.
    """
    needle = keyword.lower()
    for line in text.split("\n"):
        if needle in line.lower():
            return line.strip()
    return fallback


# field name -> (keyword, fallback). Declaration order is extraction order.
EXTRACTION_TABLE: Dict[str, Tuple[str, str]] = {
    "business_model": ("business model", "SaaS"),
    "target_audience": ("target audience", "Small to medium businesses"),
    "market_category": ("market", "B2B Software"),
    "industry": ("industry", "Technology"),
    "value_proposition": ("value proposition", "Streamlined workflow automation"),
    "pricing_model": ("pricing", "Subscription-based"),
    "market_size": ("market size", "Large and growing"),
    "go_to_market_strategy": ("go-to-market", "Content marketing and partnerships"),
}

# No extraction heuristic exists for these; static lists are stored as-is.
PLACEHOLDER_FIELDS: Dict[str, List[str]] = {
    "key_features": ["Feature 1", "Feature 2", "Feature 3"],
    "competitors": ["Competitor 1", "Competitor 2"],
    "revenue_streams": ["Subscriptions", "Premium features"],
    "customer_segments": ["SMBs", "Enterprise"],
    "pain_points": ["Manual processes", "Inefficiency"],
    "unique_selling_points": ["AI-powered", "Easy to use"],
}


def parse_analysis_response(text: str) -> AnalysisFields:
    """Apply the extraction table to an AI response."""
    fields: Dict[str, object] = {
        name: extract_section(text, keyword, fallback)
        for name, (keyword, fallback) in EXTRACTION_TABLE.items()
    }
    for name, placeholder in PLACEHOLDER_FIELDS.items():
        fields[name] = list(placeholder)
    return AnalysisFields(**fields)

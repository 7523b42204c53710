"""Prompt template for the go-to-market analysis of a connected MVP."""

from __future__ import annotations

import json

from .schema import SourceDescriptor

ANALYSIS_OUTLINE = """\
Please provide a detailed analysis covering:

1. BUSINESS MODEL ANALYSIS
- Revenue model (SaaS, marketplace, e-commerce, etc.)
- Pricing strategy recommendations
- Revenue streams identification

2. TARGET AUDIENCE & MARKET
- Primary customer segments
- Ideal customer profile (ICP)
- Market size and opportunity
- Industry category and trends

3. VALUE PROPOSITION
- Core value proposition
- Key differentiators
- Unique selling points
- Pain points addressed

4. COMPETITIVE LANDSCAPE
- Direct and indirect competitors
- Competitive advantages
- Market positioning

5. GO-TO-MARKET STRATEGY
- Recommended marketing channels
- Customer acquisition strategy
- Launch sequence recommendations
- Key metrics to track

6. PRODUCT INSIGHTS
- Key features analysis
- Feature prioritization
- User experience considerations

Format the response as a structured analysis with clear sections and actionable insights.
"""


def build_analysis_prompt(source: SourceDescriptor) -> str:
    """Embed the source descriptor fields ahead of the fixed section outline."""
    lines = [
        "Analyze this MVP/startup and provide a comprehensive go-to-market analysis.",
        "",
        f"Source: {source.source}",
    ]
    if source.platform:
        lines.append(f"Platform: {source.platform}")
    if source.url:
        lines.append(f"URL: {source.url}")
    if source.description:
        lines.append(f"Description: {source.description}")
    if source.data:
        lines.append(f"Manual Data: {json.dumps(source.data)}")
    lines.append("")
    lines.append(ANALYSIS_OUTLINE)
    return "\n".join(lines)


def build_search_query(source: SourceDescriptor) -> str:
    """Short web-search query used to ground the analysis."""
    data = source.data or {}
    subject = (
        data.get("project_name")
        or source.description
        or source.url
        or source.platform
        or "startup"
    )
    return f"{subject} market competitors pricing go-to-market"[:380]

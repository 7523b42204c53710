"""Prompt templates for go-to-market content, strategy steps and agent requests.

Each table maps a stable id (sent by the frontend) to a display title and
the prompt text sent to the AI collaborator.
"""

from __future__ import annotations

from typing import Dict, Optional, TypedDict


class PromptSpec(TypedDict):
    title: str
    description: str
    prompt: str


# ── Content generator ────────────────────────────────────────────────────

CONTENT_PROMPTS: Dict[str, PromptSpec] = {
    "landing": {
        "title": "Landing Page Copy",
        "description": "High-converting headlines and copy",
        "prompt": """Generate high-converting landing page copy for a SaaS startup. Include:
- Compelling headline
- Value proposition
- Key benefits (3-4 points)
- Social proof section
- Call-to-action""",
    },
    "email": {
        "title": "Email Sequence",
        "description": "Nurture and sales email campaigns",
        "prompt": """Create a 5-email welcome sequence for new SaaS users. Include:
- Welcome email
- Product tour email
- Value demonstration
- Success stories
- Upgrade prompt""",
    },
    "social": {
        "title": "Social Media Posts",
        "description": "Posts for LinkedIn, Twitter, etc.",
        "prompt": """Generate 10 social media posts for LinkedIn about SaaS startup journey. Include:
- Mix of educational and personal content
- Engagement-driving questions
- Industry insights
- Behind-the-scenes content""",
    },
    "sales": {
        "title": "Sales Copy Templates",
        "description": "Cold outreach and sales materials",
        "prompt": """Create cold outreach email templates for B2B SaaS. Include:
- Subject lines (5 variations)
- Email body templates (3 variations)
- Follow-up sequence (3 emails)
- Personalization guidelines""",
    },
}


def build_content_prompt(content_type: str, custom_input: Optional[str] = None) -> str:
    """Content prompt with the user's extra context appended when given."""
    prompt = CONTENT_PROMPTS[content_type]["prompt"]
    if custom_input and custom_input.strip():
        prompt += f"\n\nAdditional context: {custom_input.strip()}"
    return prompt


# ── Strategy builder ─────────────────────────────────────────────────────
# Order is the order "generate full strategy" walks the steps.

STRATEGY_STEPS: Dict[str, PromptSpec] = {
    "icp": {
        "title": "Ideal Customer Profile Strategy",
        "description": "Define who your perfect customer is",
        "prompt": """Generate a comprehensive Ideal Customer Profile (ICP) strategy for a SaaS startup. Include:
- Detailed demographics and firmographics
- Psychographic profiles and pain points
- Buying behavior and decision-making process
- Communication preferences and channels
- Budget considerations and pricing sensitivity
- Success metrics and KPIs for ICP validation""",
    },
    "positioning": {
        "title": "Market Positioning Strategy",
        "description": "How you differentiate from competitors",
        "prompt": """Create a comprehensive market positioning strategy for a SaaS startup. Include:
- Unique value proposition development
- Competitive differentiation analysis
- Brand messaging framework
- Target market segmentation
- Positioning statement and taglines
- Brand personality and voice guidelines""",
    },
    "pricing": {
        "title": "Pricing Strategy Framework",
        "description": "Optimal pricing for your market",
        "prompt": """Develop a comprehensive pricing strategy for a SaaS startup. Include:
- Pricing model recommendations (freemium, tiered, usage-based)
- Competitive pricing analysis
- Value-based pricing methodology
- Price testing and optimization strategies
- Packaging and feature bundling
- Pricing psychology and anchoring techniques""",
    },
    "channels": {
        "title": "Go-to-Market Channels Strategy",
        "description": "Where to find and reach customers",
        "prompt": """Create a comprehensive go-to-market channels strategy for a SaaS startup. Include:
- Channel mix optimization
- Digital marketing channels (SEO, PPC, social media)
- Content marketing and thought leadership
- Partnership and referral programs
- Sales channel development
- Channel performance measurement and optimization""",
    },
}


# ── Dashboard quick actions ──────────────────────────────────────────────

QUICK_ACTIONS: Dict[str, PromptSpec] = {
    "icp": {
        "title": "Ideal Customer Profile",
        "description": "Create ideal customer profile",
        "prompt": """Generate a comprehensive Ideal Customer Profile (ICP) for a SaaS startup. Include:
- Demographics (age, job title, company size, industry)
- Psychographics (pain points, goals, behavior, values)
- Preferred channels and communication methods
- Budget and decision-making process
- Key characteristics that make them ideal customers""",
    },
    "competitors": {
        "title": "Competitor Analysis",
        "description": "Research your competition",
        "prompt": """Conduct a comprehensive competitor analysis for a SaaS startup. Include:
- Direct and indirect competitors
- Pricing strategies and models
- Key features and differentiators
- Market positioning and messaging
- Strengths and weaknesses
- Market share and growth trends
- Opportunities for differentiation""",
    },
    "outreach": {
        "title": "Cold Outreach Campaign",
        "description": "Start prospecting campaign",
        "prompt": """Create a cold outreach campaign strategy for B2B SaaS. Include:
- Target prospect criteria
- Email templates (initial, follow-up sequence)
- LinkedIn outreach messages
- Personalization strategies
- Timing and frequency recommendations
- Success metrics to track""",
    },
    "copy": {
        "title": "Landing Page Copy",
        "description": "Generate compelling copy",
        "prompt": """Generate high-converting landing page copy for a SaaS startup. Include:
- Compelling headline and subheadline
- Clear value proposition
- Key benefits and features
- Social proof elements
- Strong call-to-action
- FAQ section addressing common objections""",
    },
}


# ── Agent requests ───────────────────────────────────────────────────────

AGENT_PROMPTS: Dict[str, PromptSpec] = {
    "lex": {
        "title": "Legal Document Review",
        "description": "Legal checklist for launch",
        "prompt": """As a legal AI agent, provide a comprehensive legal checklist for a SaaS startup launch. Include:
- Terms of Service requirements
- Privacy Policy essentials
- GDPR compliance checklist
- Business registration steps
- Intellectual property protection
- Liability considerations""",
    },
    "maya": {
        "title": "Marketing Strategy",
        "description": "Marketing plan",
        "prompt": """As a marketing AI agent, create a comprehensive marketing strategy for a SaaS startup. Include:
- Brand positioning and messaging
- Content marketing plan
- Social media strategy
- Email marketing campaigns
- SEO and content optimization
- Conversion optimization tactics""",
    },
    "sam": {
        "title": "Sales Outreach Plan",
        "description": "Sales strategy",
        "prompt": """As a sales AI agent, develop a comprehensive sales strategy for a SaaS startup. Include:
- Lead generation tactics
- Cold outreach templates
- Sales funnel optimization
- Prospect qualification criteria
- Follow-up sequences
- Closing techniques and objection handling""",
    },
    "alex": {
        "title": "Analytics Setup Guide",
        "description": "Analytics setup",
        "prompt": """As an analytics AI agent, provide a comprehensive analytics setup guide for a SaaS startup. Include:
- Key metrics to track
- Analytics tools setup
- Conversion tracking implementation
- Dashboard creation
- Reporting automation
- Performance optimization insights""",
    },
}

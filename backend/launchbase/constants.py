"""Centralized constants shared across services and routes.

Catalog data the dashboard renders: connectable platforms, the launch
checklist, the integrations catalog and the AI agent roster. Ids here are
the stable keys the frontend sends back.
"""

from __future__ import annotations

# ── MVP connection ──────────────────────────────────────────────────────

CONNECTION_KINDS: tuple[str, ...] = ("integration", "manual", "url")

INTEGRATION_PLATFORMS: list[dict[str, str]] = [
    {"id": "replit", "name": "Replit", "description": "Connect your Replit project"},
    {"id": "github", "name": "GitHub", "description": "Import from GitHub repository"},
    {"id": "vercel", "name": "Vercel", "description": "Connect deployed Vercel app"},
    {"id": "netlify", "name": "Netlify", "description": "Connect Netlify deployment"},
    {"id": "heroku", "name": "Heroku", "description": "Connect Heroku application"},
]

INTEGRATION_PLATFORM_IDS: frozenset[str] = frozenset(p["id"] for p in INTEGRATION_PLATFORMS)

# Confidence stored on every completed analysis
ANALYSIS_CONFIDENCE = 0.85

ANALYSIS_MAX_TOKENS = 2000
CONTENT_MAX_TOKENS = 1000
STRATEGY_MAX_TOKENS = 1000
QUICK_ACTION_MAX_TOKENS = 800
AGENT_MAX_TOKENS = 1000


# ── AI agents (dashboard roster) ────────────────────────────────────────

AI_AGENTS: list[dict[str, str]] = [
    {
        "id": "lex",
        "name": "Lex",
        "role": "Legal Agent",
        "description": "Handles TOS, privacy policies, and contracts",
    },
    {
        "id": "maya",
        "name": "Maya",
        "role": "Marketing Agent",
        "description": "Creates copy, campaigns, and content",
    },
    {
        "id": "sam",
        "name": "Sam",
        "role": "Sales Agent",
        "description": "Manages outreach and prospecting",
    },
    {
        "id": "alex",
        "name": "Alex",
        "role": "Analytics Agent",
        "description": "Tracks metrics and suggests optimizations",
    },
]

AGENTS_BY_ID: dict[str, dict[str, str]] = {a["id"]: a for a in AI_AGENTS}

# Shown on the dashboard before the user has any logged activity
DEFAULT_ACTIVITY: list[dict[str, str]] = [
    {"agent": "Sam", "action": "Ready to help with outreach", "type": "outreach"},
    {"agent": "Maya", "action": "Ready to create content", "type": "content"},
    {"agent": "Lex", "action": "Ready to handle legal tasks", "type": "legal"},
    {"agent": "Alex", "action": "Ready to analyze data", "type": "analysis"},
]


# ── Launch checklist ────────────────────────────────────────────────────
# `completed` items are preset and cannot be toggled by the user.

CHECKLIST_SECTIONS: list[dict] = [
    {
        "id": "product",
        "title": "Product Readiness",
        "items": [
            {"id": "mvp-complete", "title": "MVP development complete", "completed": True, "critical": True},
            {"id": "testing-done", "title": "User testing completed", "completed": True, "critical": True},
            {"id": "bugs-fixed", "title": "Critical bugs resolved", "completed": False, "critical": True},
            {"id": "performance", "title": "Performance optimization", "completed": False, "critical": False},
            {"id": "mobile-responsive", "title": "Mobile responsiveness", "completed": True, "critical": True},
        ],
    },
    {
        "id": "legal",
        "title": "Legal & Compliance",
        "items": [
            {"id": "terms-service", "title": "Terms of Service", "completed": True, "critical": True},
            {"id": "privacy-policy", "title": "Privacy Policy", "completed": True, "critical": True},
            {"id": "gdpr-compliance", "title": "GDPR compliance", "completed": False, "critical": True},
            {"id": "business-registration", "title": "Business registration", "completed": False, "critical": False},
            {"id": "trademark", "title": "Trademark application", "completed": False, "critical": False},
        ],
    },
    {
        "id": "marketing",
        "title": "Marketing Assets",
        "items": [
            {"id": "landing-page", "title": "Landing page live", "completed": True, "critical": True},
            {"id": "brand-assets", "title": "Brand assets created", "completed": True, "critical": False},
            {"id": "email-sequences", "title": "Email sequences ready", "completed": False, "critical": True},
            {"id": "social-profiles", "title": "Social media profiles", "completed": True, "critical": False},
            {"id": "content-calendar", "title": "Content calendar", "completed": False, "critical": False},
        ],
    },
    {
        "id": "sales",
        "title": "Sales & Outreach",
        "items": [
            {"id": "icp-defined", "title": "ICP clearly defined", "completed": True, "critical": True},
            {"id": "prospect-list", "title": "Prospect database built", "completed": False, "critical": True},
            {"id": "outreach-templates", "title": "Outreach templates ready", "completed": True, "critical": True},
            {"id": "crm-setup", "title": "CRM system configured", "completed": False, "critical": False},
            {"id": "sales-process", "title": "Sales process documented", "completed": False, "critical": False},
        ],
    },
    {
        "id": "analytics",
        "title": "Analytics & Tracking",
        "items": [
            {"id": "analytics-setup", "title": "Analytics tracking setup", "completed": True, "critical": True},
            {"id": "conversion-tracking", "title": "Conversion tracking", "completed": False, "critical": True},
            {"id": "error-monitoring", "title": "Error monitoring", "completed": False, "critical": False},
            {"id": "user-feedback", "title": "User feedback system", "completed": False, "critical": False},
            {"id": "kpi-dashboard", "title": "KPI dashboard", "completed": False, "critical": False},
        ],
    },
    {
        "id": "launch",
        "title": "Launch Preparation",
        "items": [
            {"id": "launch-plan", "title": "Launch plan finalized", "completed": False, "critical": True},
            {"id": "press-kit", "title": "Press kit prepared", "completed": False, "critical": False},
            {"id": "support-docs", "title": "Support documentation", "completed": False, "critical": True},
            {"id": "backup-plan", "title": "Backup & recovery plan", "completed": False, "critical": False},
            {"id": "team-briefing", "title": "Team launch briefing", "completed": False, "critical": False},
        ],
    },
]


# ── Integrations catalog ────────────────────────────────────────────────

INTEGRATION_CATEGORIES: list[dict] = [
    {
        "id": "development",
        "title": "Development Platforms",
        "description": "Connect your no-code and AI coding tools",
        "integrations": [
            {"id": "replit", "name": "Replit", "description": "Connect your deployed Replit apps for GTM tracking", "status": "featured"},
            {"id": "cursor", "name": "Cursor.sh", "description": "AI-powered code editor integration", "status": "available"},
            {"id": "solar", "name": "Solar.dev", "description": "Solar development platform sync", "status": "available"},
            {"id": "lovable", "name": "Lovable.so", "description": "Connect your Lovable projects", "status": "available"},
        ],
    },
    {
        "id": "productivity",
        "title": "Productivity Tools",
        "description": "Streamline your workflow with these tools",
        "integrations": [
            {"id": "notion", "name": "Notion", "description": "Sync tasks and documentation", "status": "available"},
            {"id": "airtable", "name": "Airtable", "description": "Database and CRM integration", "status": "available"},
            {"id": "zapier", "name": "Zapier", "description": "Automate workflows between apps", "status": "available"},
        ],
    },
    {
        "id": "payments",
        "title": "Payments & Billing",
        "description": "Handle payments and subscriptions",
        "integrations": [
            {"id": "stripe", "name": "Stripe", "description": "Accept payments and manage subscriptions", "status": "available"},
            {"id": "paypal", "name": "PayPal", "description": "Alternative payment processing", "status": "available"},
        ],
    },
    {
        "id": "marketing",
        "title": "Marketing & Analytics",
        "description": "Track and optimize your marketing efforts",
        "integrations": [
            {"id": "google-analytics", "name": "Google Analytics", "description": "Website traffic and user behavior", "status": "available"},
            {"id": "mailchimp", "name": "Mailchimp", "description": "Email marketing automation", "status": "available"},
            {"id": "hubspot", "name": "HubSpot", "description": "CRM and marketing automation", "status": "available"},
        ],
    },
]

INTEGRATIONS_BY_ID: dict[str, dict] = {
    integration["id"]: integration
    for category in INTEGRATION_CATEGORIES
    for integration in category["integrations"]
}

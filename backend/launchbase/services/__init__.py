from .analysis_service import analyze, run_analysis_in_background
from .connection_service import connect, disconnect, list_connections
from .content_service import generate_content
from .openai_client import generate_text
from .page_scraper import scrape_page
from .suggestion_service import generate_full_strategy, generate_strategy_step, run_agent_request, run_quick_action
from .url_project_service import connect_url_project

__all__ = [
    "analyze",
    "run_analysis_in_background",
    "connect",
    "disconnect",
    "list_connections",
    "connect_url_project",
    "generate_content",
    "generate_text",
    "scrape_page",
    "generate_strategy_step",
    "generate_full_strategy",
    "run_quick_action",
    "run_agent_request",
]

from .agent_activity import AgentActivity
from .ai_suggestion import AISuggestion
from .generated_content import GeneratedContent
from .mvp_analysis import MVPAnalysis
from .mvp_connection import MVPConnection
from .notification import Notification
from .url_project import UrlProject
from .user import User
from .user_profile import UserProfile

__all__ = [
    "AgentActivity",
    "AISuggestion",
    "GeneratedContent",
    "MVPAnalysis",
    "MVPConnection",
    "Notification",
    "UrlProject",
    "User",
    "UserProfile",
]

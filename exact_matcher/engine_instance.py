"""Global match engine instance to avoid circular imports."""

from .core.engine import MatchEngine
from .config import get_settings

# Global match engine instance
settings = get_settings()
match_engine = MatchEngine.from_settings(settings)

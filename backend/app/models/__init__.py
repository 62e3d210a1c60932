from app.models.user import User
from app.models.session import ClimbingSession
from app.models.climb import Climb

__all__ = ["User", "ClimbingSession", "Climb"]

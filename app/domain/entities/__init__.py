from app.domain.entities.user import User

__all__ = [
    "User"
]

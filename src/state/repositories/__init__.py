"""State repositories."""
from src.state.repositories.mutes import MuteRegistry
__all__ = ["MuteRegistry"]

from .user import AuthOutcome, UserSummary
from .path_identity import PathIdentity
from .thumbnail import Thumbnail
from .maintenance import OptimizeReport

__all__ = [
    "AuthOutcome",
    "UserSummary",
    "PathIdentity",
    "Thumbnail",
    "OptimizeReport"
]

from dataclasses import dataclass


@dataclass(frozen=True)
class PathIdentity:
    """Mapping between a filesystem path and its opaque identifier"""
    path: str
    id: str
    is_title: bool = False

    def to_row(self) -> tuple:
        """Convert to the parameter tuple of an ``ids`` insert"""
        return (self.path, self.id, 1 if self.is_title else 0)

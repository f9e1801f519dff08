from dataclasses import dataclass


@dataclass
class Thumbnail:
    """Cached thumbnail image"""
    data: bytes
    filename: str
    mime: str
    size: int

    def to_dict(self):
        """Convert to dictionary for database storage"""
        return {
            "data": self.data,
            "filename": self.filename,
            "mime": self.mime,
            "size": self.size
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create Thumbnail from database row"""
        return cls(
            data=bytes(data["data"]),
            filename=data["filename"],
            mime=data["mime"],
            size=data["size"]
        )

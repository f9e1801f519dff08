from dataclasses import dataclass, asdict


@dataclass
class OptimizeReport:
    """Counts of rows removed by a maintenance sweep"""
    dangling_ids: int = 0
    orphaned_thumbnails: int = 0

    def to_dict(self):
        return asdict(self)

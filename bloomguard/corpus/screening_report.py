from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple


@dataclass
class ScreeningReport:
    """Outcome of screening a batch of candidate strings"""
    source: str = "<lines>"
    positives: int = 0
    negatives: int = 0
    flagged: List[str] = field(default_factory=list)
    results: List[Tuple[str, bool]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def total(self) -> int:
        return self.positives + self.negatives

    @property
    def positive_rate(self) -> float:
        return self.positives / max(self.total, 1)

    def record(self, item: str, result: bool):
        self.results.append((item, result))
        if result:
            self.positives += 1
            self.flagged.append(item)
        else:
            self.negatives += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'positives': self.positives,
            'negatives': self.negatives,
            'total': self.total,
            'positive_rate': self.positive_rate,
            'flagged': list(self.flagged),
            'error': self.error
        }

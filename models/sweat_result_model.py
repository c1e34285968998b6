from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

READING_FIELDS = ("glucose", "ph", "cortisol", "salt")


@dataclass
class SweatReadings:
    """The four colour-zone readings taken from one sweat test strip."""
    glucose: str = ""
    ph: str = ""
    cortisol: str = ""
    salt: str = ""

    @classmethod
    def from_mapping(cls, data) -> "SweatReadings":
        values = {}
        for field in READING_FIELDS:
            val = data.get(field) if data else None
            values[field] = str(val).strip() if val is not None else ""
        return cls(**values)

    def missing_fields(self) -> List[str]:
        return [f for f in READING_FIELDS if not getattr(self, f)]

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class SweatResult:
    """One row of the sweat_results table."""
    user_id: Optional[str]
    readings: SweatReadings
    ai_insight: str
    pcos_score: int

    def to_row(self) -> Dict[str, object]:
        row = {"user_id": self.user_id}
        row.update(self.readings.to_dict())
        row["ai_insight"] = self.ai_insight
        row["pcos_score"] = self.pcos_score
        return row

from dataclasses import dataclass

DESTRUCTIVE = "destructive"
DEFAULT = "default"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    severity: str = DEFAULT

    @property
    def flash_category(self) -> str:
        return "danger" if self.severity == DESTRUCTIVE else "success"

    def to_dict(self):
        return {"title": self.title, "description": self.description, "severity": self.severity}


MISSING_FIELDS = Notification("Missing Fields", "Please fill in all test results.", DESTRUCTIVE)
INSIGHT_FAILED = Notification("Save Error", "Could not save the result or fetch AI insight.", DESTRUCTIVE)
SAVED = Notification("Success", "Sweat analysis saved successfully.", DEFAULT)


def save_failed(message: str) -> Notification:
    return Notification("Save Failed", message, DESTRUCTIVE)

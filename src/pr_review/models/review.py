from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator


class Severity(str, Enum):
    P0 = "P0"
    P1 = "P1"


class ReviewIssue(BaseModel):
    path: str
    line: int = Field(gt=0)
    # Requested as P0/P1, but whatever label the model sends is posted as is.
    severity: str
    title: str
    body: str

    @field_validator("severity")
    @classmethod
    def normalize_severity(cls, value: str) -> str:
        value = value.strip()
        known = value.upper()
        return known if known in Severity.__members__ else value

    def format_comment(self) -> str:
        return f"**{self.severity}** {self.title}\n\n{self.body}"


class ReviewOutcome(BaseModel):
    """Either structured issues or the raw model text, never both."""
    issues: list[ReviewIssue] | None = None
    raw_text: str | None = None

    @model_validator(mode="after")
    def check_exclusive(self):
        if (self.issues is None) == (self.raw_text is None):
            raise ValueError("Exactly one of issues or raw_text required")
        return self

    @property
    def is_fallback(self) -> bool:
        return self.raw_text is not None

    @classmethod
    def structured(cls, issues: list[ReviewIssue]) -> "ReviewOutcome":
        return cls(issues=issues)

    @classmethod
    def fallback(cls, raw_text: str) -> "ReviewOutcome":
        return cls(raw_text=raw_text)

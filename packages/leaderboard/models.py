from pydantic import BaseModel, ConfigDict, model_validator

class LeaderboardEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    rank: int

class EpochWindow(BaseModel):
    """Closed epoch interval [start, end] scoping a leaderboard query."""
    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @model_validator(mode="before")
    @classmethod
    def _clamp_start(cls, data):
        if isinstance(data, dict) and isinstance(data.get("start"), int) and data["start"] < 0:
            data = {**data, "start": 0}
        return data

    @model_validator(mode="after")
    def _check_order(self):
        if self.start > self.end:
            raise ValueError(f"epoch window start {self.start} is after end {self.end}")
        return self

    @classmethod
    def trailing(cls, current_epoch: int, span: int = 100) -> "EpochWindow":
        return cls(start=current_epoch - max(span, 0), end=current_epoch)

    def as_params(self) -> dict:
        return {"startEpoch": self.start, "endEpoch": self.end}

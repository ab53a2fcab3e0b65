from pydantic import BaseModel, ConfigDict
from typing import Optional
from .fields import UNKNOWN


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class NetworkSummary(Record):
    current_epoch: Optional[int] = None
    active_validators: Optional[int] = None
    total_validators: Optional[int] = None
    finalized_epoch: Optional[int] = None


class Amount(Record):
    raw: Optional[str] = None
    display: str = UNKNOWN


class ValidatorRecord(Record):
    address: str = UNKNOWN
    status: str = UNKNOWN
    balance: Amount = Amount()
    effective_balance: Amount = Amount()
    attestations_succeeded: int = 0
    attestations_missed: int = 0
    blocks_proposed: int = 0
    blocks_mined: int = 0
    blocks_missed: int = 0
    success_rate: str = UNKNOWN
    total_rewards: Amount = Amount()
    total_attestations: Optional[int] = None
    committee_participation: str = UNKNOWN
    # False when none of the known fields resolved ("no data", not "all zero")
    found: bool = False


class SlashingEvent(Record):
    epoch: Optional[int] = None
    slot: Optional[int] = None
    block: Optional[int] = None
    address: Optional[str] = None
    reason: str = UNKNOWN
    amount: Amount = Amount()


class AccusationEvent(Record):
    epoch: Optional[int] = None
    type: str = UNKNOWN
    accuser: str = UNKNOWN
    address: Optional[str] = None

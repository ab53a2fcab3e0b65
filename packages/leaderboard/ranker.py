from typing import Any, Optional, Union, List, Dict
from packages.normalizer import keys
from packages.normalizer.address import same_address
from packages.normalizer.fields import UNKNOWN, extract_list, resolve
from .models import LeaderboardEntry

NOT_RANKED = "not ranked"

Rank = Union[int, str]

def leaderboard_entries(raw: Any) -> Optional[List[LeaderboardEntry]]:
    """Ranked entries in array order; None if no list could be located."""
    rows = extract_list(raw)
    if rows is None:
        return None
    out: List[LeaderboardEntry] = []
    for i, row in enumerate(rows, 1):
        addr = resolve(row, keys.LEADERBOARD_ADDRESS)
        out.append(LeaderboardEntry(address=str(addr) if addr is not None else UNKNOWN, rank=i))
    return out

def rank_of(raw: Any, address: str) -> Rank:
    entries = leaderboard_entries(raw)
    if entries is None:
        return UNKNOWN
    for e in entries:
        if same_address(e.address, address):
            return e.rank
    return NOT_RANKED

def find_validator_row(raw: Any, address: str) -> Optional[Dict[str, Any]]:
    """The leaderboard row for address, which carries rewards/attestation totals."""
    rows = extract_list(raw)
    for row in rows or []:
        if same_address(resolve(row, keys.LEADERBOARD_ADDRESS), address):
            return row
    return None

# Candidate JSON keys per logical field. Order follows the API revisions the
# dashboard has shipped (newest naming first) and must not be reshuffled.

# network summary (/stats/general)
CURRENT_EPOCH = ("currentEpoch", "latestEpoch", "current_epoch", "latest_epoch", "epoch.current", "epoch")
ACTIVE_VALIDATORS = ("activeValidators", "active_validators", "validators.active", "activeValidatorCount")
TOTAL_VALIDATORS = ("totalValidators", "total_validators", "validators.total", "validatorCount")
FINALIZED_EPOCH = ("finalizedEpoch", "finalized_epoch", "lastFinalizedEpoch", "epoch.finalized")

# validator detail
VALIDATOR_WRAPPERS = ("validator", "data")
ADDRESS = ("address", "validatorAddress", "validator_address", "attester", "attesterAddress")
STATUS = ("status", "state", "validatorStatus", "validator_status")
BALANCE = ("balance", "currentBalance", "current_balance", "stake")
EFFECTIVE_BALANCE = ("effectiveBalance", "effective_balance", "effectiveStake", "effective_stake")
ATTESTATIONS_SUCCEEDED = ("attestationsSucceeded", "attestations_succeeded", "successfulAttestations",
                          "attestations.succeeded", "totalAttestationsSucceeded")
ATTESTATIONS_MISSED = ("attestationsMissed", "attestations_missed", "missedAttestations",
                       "attestations.missed", "totalAttestationsMissed")
BLOCKS_PROPOSED = ("blocksProposed", "blocks_proposed", "proposedBlocks", "blocks.proposed", "totalBlocksProposed")
BLOCKS_MINED = ("blocksMined", "blocks_mined", "minedBlocks", "blocks.mined", "totalBlocksMined")
BLOCKS_MISSED = ("blocksMissed", "blocks_missed", "missedBlocks", "blocks.missed", "totalBlocksMissed")
SUCCESS_RATE = ("attestationSuccessRate", "attestation_success_rate", "successRate", "success_rate")
TOTAL_REWARDS = ("totalRewards", "total_rewards", "rewards")
TOTAL_ATTESTATIONS = ("totalAttestations", "total_attestations", "attestations.total")
COMMITTEE_PARTICIPATION = ("committeeParticipationRate", "committee_participation_rate", "participationRate")

# slashing history
EVENT_ADDRESS = ("validatorAddress", "validator_address", "address", "attester", "slashedValidator")
EVENT_EPOCH = ("epoch", "epochNumber", "epoch_number")
EVENT_SLOT = ("slot", "slotNumber", "slot_number")
EVENT_BLOCK = ("blockNumber", "block_number", "block")
SLASH_REASON = ("reason", "slashReason", "slash_reason", "type")
SLASH_AMOUNT = ("amount", "slashedAmount", "slashed_amount", "penalty")

# accusations
ACCUSATION_TYPE = ("type", "status", "accusationType", "accusation_type", "kind")
ACCUSER = ("accuser", "accuserAddress", "accuser_address", "reporter")

# leaderboard rows
LEADERBOARD_ADDRESS = ("validatorAddress", "validator_address", "address", "attester")

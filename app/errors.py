"""Ledger errors - raised synchronously to the immediate caller."""


class BallotError(Exception):
    """Base class for all ledger errors."""

    def __init__(self, message: str = "Ballot error"):
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(BallotError):
    """Privileged operation attempted by a non-privileged caller."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Caller is not allowed to {operation} sentiment")


class AlreadyVotedError(BallotError):
    """Voter identity has already cast its vote."""

    def __init__(self, voter_id: str):
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id!r} has already voted")


class AlreadyInitializedError(BallotError):
    """Ballot setup ran before."""

    def __init__(self, message: str = "Ballot is already initialized"):
        super().__init__(message)


class NotInitializedError(BallotError):
    """Ballot operation before setup."""

    def __init__(self, message: str = "Ballot is not initialized"):
        super().__init__(message)


class UnknownCandidateError(BallotError):
    """Candidate is not part of the fixed candidate set."""

    def __init__(self, candidate: str):
        self.candidate = candidate
        super().__init__(f"Unknown candidate: {candidate!r}")


class ClockError(BallotError):
    """Supplied instant is earlier than the last recorded update."""

    def __init__(self, now: int, last_update: int):
        self.now = now
        self.last_update = last_update
        super().__init__(f"Time moved backward: now={now} < last_update={last_update}")

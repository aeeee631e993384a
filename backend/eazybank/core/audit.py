"""Current-actor providers used to stamp audit columns."""

from typing import Protocol


class Auditor(Protocol):
    """Supplies the actor name recorded in created_by / updated_by."""

    def current_auditor(self) -> str:
        ...


class FixedAuditor:
    """Auditor that always reports the same service name."""

    def __init__(self, name: str):
        self.name = name

    def current_auditor(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<FixedAuditor(name={self.name!r})>"

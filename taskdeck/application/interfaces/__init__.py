"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from taskdeck.infrastructure or taskdeck.api.
"""

from taskdeck.application.interfaces.repositories import (
    ITaskRepository,
    IUserRepository,
)

__all__ = [
    "ITaskRepository",
    "IUserRepository",
]

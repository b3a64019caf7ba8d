from __future__ import annotations

from typing import Any


class CapabilityEligibility:
    """Eligible when the actor holds a named capability.

    Anonymous actors (``None``) and actors without a ``capabilities``
    collection are never eligible.
    """

    def __init__(self, capability: str) -> None:
        self.capability = capability

    def check(self, actor: Any) -> bool:
        if actor is None:
            return False
        capabilities = getattr(actor, "capabilities", None) or ()
        # A bare string names one capability; membership must be exact.
        if isinstance(capabilities, str):
            capabilities = (capabilities,)
        return self.capability in capabilities

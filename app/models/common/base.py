"""Base entity class for all domain entities."""

import json
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        """Serialize entity for JSON columns."""
        return json.dumps(self.to_dict())

"""Rating domain entity - a user's score on some target."""
import json
from dataclasses import dataclass, asdict
from typing import Any, Optional

DEFAULT_EXTRA = "{}"


@dataclass
class Rating:
    """Rating domain entity.

    Field defaults are the "unset" values. Use ``Rating.new`` to get a record
    carrying the creation defaults.

    Attributes:
        id: Row identifier, assigned by the store when not given
        target: Identifier of the rated entity
        user_id: Identifier of the author
        score: Rating score
        comment: Optional free-text comment
        extra: Raw JSON text with free-form metadata
        active: Visibility flag
        anonymous: Hide the author when listing
        date: Creation timestamp in epoch milliseconds
    """
    id: Optional[int] = None
    target: int = 0
    user_id: int = 0
    score: int = 0
    comment: str = ""
    extra: str = ""
    active: bool = False
    anonymous: bool = False
    date: int = 0

    @classmethod
    def new(cls, **fields) -> "Rating":
        """Build a rating with creation defaults applied."""
        values = {"active": True, "anonymous": True, "extra": DEFAULT_EXTRA}
        values.update(fields)
        return cls(**values)

    def extra_data(self) -> Any:
        """Parse the metadata blob, ``{}`` when empty."""
        return json.loads(self.extra or DEFAULT_EXTRA)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

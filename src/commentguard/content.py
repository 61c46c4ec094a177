"""Comment content passed to Akismet."""

from dataclasses import MISSING, dataclass, fields
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class CommentContent:
    """Submission payload for a single comment."""

    user_ip: str
    user_agent: str  # May be empty, but must be given
    referrer: str  # May be empty, but must be given
    comment_type: str = "comment"
    comment_author: Optional[str] = None
    comment_author_email: Optional[str] = None
    comment_author_url: Optional[str] = None
    comment_content: Optional[str] = None
    is_test: bool = False

    def __post_init__(self):
        if not self.user_ip:
            raise ValueError("user_ip is required")

    def to_params(self) -> Dict[str, str]:
        """Convert to Akismet form parameters, skipping unset fields."""
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "is_test":
                if value:
                    params["is_test"] = "1"
                continue
            if value is not None:
                params[f.name] = str(value)
        return params

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommentContent":
        """
        Build from a request payload. Unknown keys are ignored.

        Raises:
            ValueError: If a required field is missing.
        """
        known = {f.name for f in fields(cls)}
        missing = [
            f.name for f in fields(cls)
            if f.default is MISSING and f.name not in data
        ]
        if missing:
            raise ValueError(f"Missing required field(s): {', '.join(missing)}")
        return cls(**{k: v for k, v in data.items() if k in known})

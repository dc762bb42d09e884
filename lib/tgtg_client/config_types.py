from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://apptoogoodtogo.com/api/"
DEFAULT_USER_AGENT = "TooGoodToGo/21.11.0 (iPhone/iPhone 11 Pro; iOS 14.4.1; Scale/3.00)"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = field(default_factory=dict)
    timeout_s: float = 15.0

"""Feature flag client configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClientConfig:
    """Configuration for the evaluating client.

    app_name and environment fill the matching context fields when the
    caller leaves them empty.
    """

    app_name: str = ""
    environment: str = "default"

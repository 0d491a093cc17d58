"""orderwatch package initialization."""
from __future__ import annotations

# Keep package import lightweight. The CLI entrypoint calls `load_dotenv()`
# and `configure_logging()` as part of startup.

from .core.notification import SHUTDOWN, Notification
from .core.publisher import Publisher
from .core.subscriber import Subscriber

__all__ = ["Notification", "Publisher", "SHUTDOWN", "Subscriber"]

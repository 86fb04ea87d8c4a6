"""Create the messages table (DATABASE_URL set) or the JSON store file, without starting the server."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from nexa_chat.core.config import get_settings
from nexa_chat.storage.factory import create_store

settings = get_settings()
store = create_store(settings)
store.initialize()

health = store.health_check()
if not health.ok:
    print(f"Store not reachable ({store.mode}): {health.error}")
    sys.exit(1)
print(f"Init complete ({store.mode}).")

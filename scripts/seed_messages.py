"""Post a few demo messages into a room. Usage: python scripts/seed_messages.py [room]"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from nexa_chat.core.config import get_settings
from nexa_chat.storage.factory import create_store

room = sys.argv[1] if len(sys.argv) > 1 else "general"

store = create_store(get_settings())
store.initialize()

for sender, text in [("vishnu", "Hi all"), ("sarath", "Hey vishnu"), ("alan", "Welcome to " + room)]:
    row = store.append_message(room, sender, text)
    print(f"Added message {row.id} from {sender}")

print("Seed complete.")

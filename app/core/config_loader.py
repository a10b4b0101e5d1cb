import json
import os
import logging
from typing import Dict, Any, List

logger = logging.getLogger("app")

def load_seed_rooms(path: str) -> List[Dict[str, Any]]:
    """
    Loads the rooms to register at startup from a JSON file.
    Each entry has the same shape as a POST /rooms body.
    A missing file means no seed rooms; a malformed one raises ValueError.
    """
    if not os.path.exists(path):
        logger.warning(f"⚠️ Seed file '{path}' not found, starting without rooms.")
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            rooms = json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ Invalid JSON in seed file '{path}': {e}")
        raise ValueError(f"Invalid JSON in seed file: {e}")

    if not isinstance(rooms, list):
        logger.critical(f"❌ Seed file '{path}' must contain a JSON list of rooms.")
        raise ValueError(f"Seed file {path} must contain a list, got {type(rooms).__name__}")

    logger.info(f"✅ Loaded {len(rooms)} seed rooms from {path}")
    return rooms

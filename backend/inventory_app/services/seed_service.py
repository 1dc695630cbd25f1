import json
import logging
import os

from inventory_app.services.inventory_store import InventoryStore, ValidationError

log = logging.getLogger(__name__)


def _normalize_entry(entry, base_dir):
    """Return a dict with keys: name, quantity, price, picture (bytes or None)"""
    name = entry.get("name") or entry.get("title") or ""
    quantity = entry.get("quantity", entry.get("stock"))
    price = entry.get("price", entry.get("amount"))

    picture = None
    picture_path = entry.get("picture") or entry.get("image")
    if picture_path:
        if not os.path.isabs(picture_path):
            picture_path = os.path.join(base_dir, picture_path)
        with open(picture_path, "rb") as f:
            picture = f.read()

    return {"name": name, "quantity": quantity, "price": price, "picture": picture}


def load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}") from e

    if isinstance(data, dict):
        # object with an items list, or a mapping of entries
        if "items" in data and isinstance(data["items"], list):
            return data["items"]
        return list(data.values())
    if isinstance(data, list):
        return data
    return []


def seed_from_file(path: str, store: InventoryStore) -> int:
    """
    Create one product per entry in the JSON file at `path`.
    Entries that fail validation are logged and skipped. Returns the number
    of products created.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    base_dir = os.path.dirname(os.path.abspath(path))
    created = 0
    for i, entry in enumerate(load_entries(path)):
        if not isinstance(entry, dict):
            log.warning("seed: entry %s is not an object, skipped", i)
            continue
        try:
            fields = _normalize_entry(entry, base_dir)
        except OSError as e:
            log.warning("seed: entry %s skipped: cannot read picture: %s", i, e)
            continue
        try:
            store.create(**fields)
        except ValidationError as e:
            log.warning("seed: entry %s skipped: %s", i, e)
            continue
        created += 1
    log.info("seed: created %s products from %s", created, path)
    return created

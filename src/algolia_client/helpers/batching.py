"""Splitting of indexing operations into fixed-size batches."""

from typing import Any, Iterable, Iterator

from algolia_client.exceptions import MissingObjectIdError
from algolia_client.models.search import Action, BatchOperation

MISSING_OBJECT_ID_MESSAGE = (
    "All objects must have an unique objectID (like a primary key) to be valid."
)

MISSING_OBJECT_ID_HINT = (
    "\n\nIf your records have a unique identifier that isn't called objectID, "
    "map it with `save_objects(objects, object_id_key='primary')`.\n"
    "Algolia can also generate objectIDs, which is not recommended: "
    "`save_objects(objects, auto_generate_object_id=True)`."
)


def chunk(items: Iterable[Any], size: int) -> Iterator[list[Any]]:
    """Yield consecutive lists of at most `size` items.

    Works on any iterable, including generators, without materializing it.
    """
    if size <= 0:
        raise ValueError("Batch size must be positive")
    batch = []
    for item in items:
        batch.append(item)
        if len(batch) == size:
            yield batch
            batch = []
    if batch:
        yield batch


def build_batch(objects: Iterable[dict[str, Any]], action: Action | str) -> list[dict]:
    """Wrap records into batch operations of a single action."""
    action = Action(action)
    return [BatchOperation(action=action, body=obj).to_request() for obj in objects]


def ensure_object_id(objects: Iterable[dict[str, Any]], message: str) -> None:
    """Raise MissingObjectIdError if any record lacks an objectID."""
    for obj in objects:
        if "objectID" not in obj:
            raise MissingObjectIdError(message)


def map_object_ids(key: str, objects: Iterable[dict[str, Any]]) -> list[dict]:
    """Copy each record's `key` field into its objectID.

    Raises:
        MissingObjectIdError: If a record has no `key` field.
    """
    mapped = []
    for obj in objects:
        if key not in obj:
            raise MissingObjectIdError(
                f"At least one object is missing the required {key} key: {obj}"
            )
        mapped.append({**obj, "objectID": str(obj[key])})
    return mapped

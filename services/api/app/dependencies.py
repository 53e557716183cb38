"""FastAPI dependencies shared by route handlers.

The record store is built once in the application lifespan and kept on
`app.state`. Handlers declare `store: RecordStore = Depends(get_store)`.
"""

from fastapi import Request

from .datastore import RecordStore, StoreNotInitializedError


def get_store(request: Request) -> RecordStore:
    """Return the application's record store.

    Raises:
        StoreNotInitializedError: If the lifespan never stored one (app served without startup).
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreNotInitializedError("get_store: record store not initialized")
    return store

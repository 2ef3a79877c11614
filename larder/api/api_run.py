from fastapi import Depends, FastAPI, Query
from typing import Optional
import logging

from larder.api.deps import get_store
from larder.domain.InventoryStore import InventoryStore
from larder.api.routes import shopping, kitchen, recipes
from larder.events.web_observers import start as start_event_observers, get_events as get_web_events

# Logging
logger = logging.getLogger("larder_app")

# Initialize FastAPI app
app = FastAPI(title="Larder Shopping, Kitchen & Recipe API")

# Include routers
app.include_router(shopping.router, prefix="/api/shopping", tags=["shopping"])
app.include_router(kitchen.router, prefix="/api/kitchen", tags=["kitchen"])
app.include_router(recipes.router, prefix="/api/recipes", tags=["recipes"])


@app.on_event("startup")
def _startup():
    """Subscribe the web observers and open the store when the app starts."""
    start_event_observers(get_store().event_bus)
    logger.info("Larder API ready")


@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None)):
    """Recent store events; poll with since=<next_cursor> for newer ones only."""
    return get_web_events(since)


@app.get('/api/summary')
def api_summary(store: InventoryStore = Depends(get_store)):
    return {
        'shopping': len(store.shopping_items),
        'to_buy': len(store.to_buy()),
        'checked': len(store.checked()),
        'kitchen': len(store.kitchen_items),
        'recipes': len(store.recipes),
    }

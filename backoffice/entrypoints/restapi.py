import logging
from typing import Any

import orjson
from fastapi import Depends, FastAPI, Response

from backoffice.adapters import dto
from backoffice.config import get_config
from backoffice.domain import models
from backoffice.entrypoints.dependencies import inventory_store
from backoffice.service_layer.queries import (
    InventoryInitializationError,
    InventoryQueryService,
    InventoryRetrievalError,
)

config = get_config()
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.APP_TITLE)


def _json(content: Any, status_code: int) -> Response:
    return Response(content=orjson.dumps(content), status_code=status_code, media_type="application/json")


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Hello World"}


@app.get("/inventory")
async def get_inventory(store: dict[str, models.InventoryItem] = Depends(inventory_store)) -> Response:
    try:
        items = InventoryQueryService(store).get_inventory()
    except InventoryRetrievalError as e:
        return _json({"message": f"Inventory retrieval error: {e}"}, status_code=400)
    except InventoryInitializationError as e:
        return _json({"message": f"Inventory initialization error: {e}"}, status_code=500)
    except Exception:
        logger.exception("Unexpected error while reading inventory")
        return _json({"message": "Internal server error"}, status_code=500)
    return _json([dto.InventoryItem.model_validate(item).model_dump() for item in items], status_code=200)

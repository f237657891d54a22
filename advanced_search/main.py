"""FastAPI service exposing the advanced search page hooks"""
from fastapi import FastAPI, Header, HTTPException, Request
from pydantic import BaseModel
from typing import Any, Optional
from loguru import logger

from advanced_search.core.hooks import SearchPageHooks
from advanced_search.core.providers import InMemoryPreferenceLookup
from advanced_search.models.config import load_config
from advanced_search.models.search import SearchRequest, UserIdentity


app = FastAPI(title="Advanced Search API")

# Initialized on startup
hooks: Optional[SearchPageHooks] = None
preferences: Optional[InMemoryPreferenceLookup] = None


@app.on_event("startup")
async def startup():
    global hooks, preferences
    logger.info("Starting advanced search service...")
    preferences = InMemoryPreferenceLookup()
    hooks = SearchPageHooks.from_config(load_config(), preferences)


class PreferenceUpdate(BaseModel):
    value: Any


def _search_request(request: Request) -> SearchRequest:
    return SearchRequest(params=dict(request.query_params), full_url=str(request.url))


def _user(user_id: int, user_name: str, temporary: bool) -> UserIdentity:
    return UserIdentity(id=user_id, name=user_name, temporary=temporary)


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/search/prepend")
async def search_results_prepend(
    request: Request,
    x_user_id: int = Header(0),
    x_user_name: str = Header(""),
    x_user_temporary: bool = Header(False),
):
    """Page additions for a search results request"""
    try:
        user = _user(x_user_id, x_user_name, x_user_temporary)
        additions = hooks.on_search_results_prepend(_search_request(request), user)
        if additions is None:
            return {"active": False}
        return {"active": True, **additions.model_dump()}
    except Exception as e:
        logger.error(f"Search prepend error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/search/explicit-url")
async def explicit_namespace_url(
    request: Request,
    x_user_id: int = Header(0),
    x_user_name: str = Header(""),
    x_user_temporary: bool = Header(False),
):
    """Search URL with the default namespaces made explicit"""
    try:
        user = _user(x_user_id, x_user_name, x_user_temporary)
        url = hooks.explicit_namespace_url(_search_request(request), user)
        return {"url": url}
    except Exception as e:
        logger.error(f"Explicit URL error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/preferences")
async def list_preferences():
    """Preference declarations contributed to the host's form"""
    return hooks.on_get_preferences(UserIdentity(), {})


@app.put("/preferences/{user_id}/{key}")
async def set_preference(user_id: int, key: str, update: PreferenceUpdate):
    """Set a user option (process-local)"""
    if user_id == 0:
        raise HTTPException(status_code=400, detail="Anonymous users cannot store preferences")
    preferences.set_option(UserIdentity(id=user_id), key, update.value)
    return {"status": "success"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

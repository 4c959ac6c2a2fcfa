"""
Recipe Data Service client.

This module is the single place that talks HTTP to the recipe service. The
filter core never calls the network itself; the recipe list controller and
the Streamlit page go through RecipeService.

Endpoints:
- GET /api/recipes?search=&tags=&maxCalories=&maxPrepTime=&page=&limit=&sortBy=&sortOrder=
  -> {"recipes": [...], "pagination": {"page", "limit", "total", "totalPages"}}
- GET /api/tags -> {"tags": [{"id", "name", "slug"}, ...]}
- GET /api/recipes/{id} -> recipe detail object

Errors:
- 401 raises AuthenticationRequiredError (the UI sends the user to login)
- other non-2xx, timeouts and connection failures raise RecipeServiceError
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from recipe_browser.config import RecipeApiConfig
from recipe_browser.models import FilterModel, RecipeListResponse, Tag
from recipe_browser.query import build_api_params

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Could not load recipes"


class RecipeServiceError(RuntimeError):
    """Raised when the recipe service cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationRequiredError(RecipeServiceError):
    """Raised on HTTP 401; the session is missing or expired."""


def _error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return DEFAULT_ERROR_MESSAGE


class RecipeService:
    """
    HTTP client for the recipe service.

    Args:
        base_url: Service base URL (default: RECIPES_API_URL)
        timeout: Request timeout in seconds (default: RECIPES_API_TIMEOUT)
        session: requests.Session to reuse, e.g. one carrying auth cookies
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or RecipeApiConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else RecipeApiConfig.get_timeout()
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise RecipeServiceError("Request timed out. The recipe service may be slow or unreachable.") from e
        except requests.exceptions.ConnectionError as e:
            raise RecipeServiceError("Could not connect to the recipe service.") from e
        except requests.exceptions.RequestException as e:
            raise RecipeServiceError(f"Request failed: {e}") from e

        if response.status_code == 401:
            raise AuthenticationRequiredError("Please log in to continue.", status_code=401)
        if not response.ok:
            message = _error_message(response)
            logger.debug("GET %s returned %s: %s", url, response.status_code, message)
            raise RecipeServiceError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise RecipeServiceError("Recipe service returned invalid JSON.", status_code=response.status_code) from e

    def list_recipes(self, filters: FilterModel, limit: int = 20) -> RecipeListResponse:
        """
        Fetch one page of recipes matching the filters.

        Args:
            filters: Current filter model
            limit: Page size

        Returns:
            RecipeListResponse with recipes and pagination metadata
        """
        data = self._get("/api/recipes", params=build_api_params(filters, limit=limit))
        if not isinstance(data, dict):
            raise RecipeServiceError("Unexpected response shape from /api/recipes")
        return RecipeListResponse.from_json(data)

    def list_tags(self) -> List[Tag]:
        """Fetch all tags available for filtering."""
        data = self._get("/api/tags")
        # Response is {"tags": [...]}; a bare list is accepted too
        if isinstance(data, dict):
            data = data.get("tags") or []
        return [Tag.model_validate(item) for item in data]

    def get_recipe(self, recipe_id: str) -> Dict[str, Any]:
        """Fetch the full detail object for a single recipe."""
        return self._get(f"/api/recipes/{recipe_id}")

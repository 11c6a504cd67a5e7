"""Hello Todo API client.

A thin wrapper around the HTTP surface of ``hello_todo_api`` built on
the ``requests`` library.  It exposes one method per route:

* :meth:`hello` – fetch the greeting.
* :meth:`list_todos` – return all todos.
* :meth:`create_todo` – create a todo from a title.
* :meth:`delete_todo` – delete a todo by id.
* :meth:`big` – fetch the hex encoded random payload.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message`` keys.  Network errors are logged
and reported the same way instead of being raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class HelloTodoClient:
    """Client for the hello, todos and big endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
                Include the ``API_PREFIX`` if the server uses one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Dict[str, Any]]]:
        """Perform an HTTP request and return the raw response.

        Returns:
            A tuple ``(response, error)``.  Exactly one of the two is
            ``None``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------
    def hello(self) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        response, error = self._request("GET", "/hello")
        if error:
            return None, error
        return response.text, None

    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all todos.

        Returns:
            A tuple ``(todos, error)``.  ``todos`` is empty on failure.
        """
        response, error = self._request("GET", "/todos")
        if error:
            return [], error
        data = response.json()
        if isinstance(data, list):
            return data, None
        return [], {"status_code": response.status_code, "message": "Unexpected response body"}

    def create_todo(self, title: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a todo.

        Args:
            title: Text of the new todo.
        Returns:
            A tuple ``(todo, error)`` where ``todo`` includes the
            assigned ``id``.
        """
        response, error = self._request("POST", "/todos", json_body={"title": title})
        if error:
            return None, error
        return response.json(), None

    def delete_todo(self, todo_id: Any) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a todo.

        Returns:
            A tuple ``(success, error)``.  A missing todo yields
            ``(False, {"status_code": 404, ...})``.
        """
        _, error = self._request("DELETE", f"/todos/{todo_id}")
        if error:
            return False, error
        return True, None

    def big(self) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Fetch the random payload as hex text."""
        response, error = self._request("GET", "/big")
        if error:
            return None, error
        return response.text, None

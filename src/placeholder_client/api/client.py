"""
API Client Module

Synchronous HTTP client for the JSONPlaceholder API: user CRUD,
open todos, and the last-post comments export.
"""

import logging
from pathlib import Path
from typing import List, Optional

import httpx

from ..config import config
from ..files.manager import FileManager
from .codec import JsonCodec
from .errors import ClientError, ErrorKind
from .models import Comment, Post, Todo, User


class PlaceholderClient:
    """
    HTTP client for the JSONPlaceholder API.

    Every call opens its own short-lived connection, issues its requests
    in order and either returns a result or raises ClientError. The
    client keeps no state between calls.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        codec: Optional[JsonCodec] = None,
        file_manager: Optional[FileManager] = None,
        logger: Optional[logging.Logger] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: API root (uses config default if None).
            codec: JSON codec for request and response bodies.
            file_manager: Writer for the comments export.
            logger: Receives status and body of mutating requests and the
                status of raw-body reads.
            timeout: Request timeout in seconds.
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.codec = codec or JsonCodec(indent=config.file.json_indent)
        self.files = file_manager or FileManager(codec=self.codec)
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.transport = transport
        self.logger.debug(f"PlaceholderClient initialized (base_url: {self.base_url})")

    def create_user(self, user: User) -> None:
        """
        Create a user. Status and body are reported to the logger only.

        Raises:
            ClientError: ENCODING before any request is sent, TRANSPORT
                if the request fails.
        """
        payload = self.codec.encode(user)
        response = self._send("POST", self._users_url(), content=payload)
        self._report(response)

    def update_user(self, user: User, user_id: str) -> None:
        """Replace the user with the given ID. Same contract as create_user."""
        payload = self.codec.encode(user)
        response = self._send("PUT", self._users_url(user_id), content=payload)
        self._report(response)

    def delete_user(self, user_id: str) -> None:
        """Delete the user with the given ID, reporting status and body."""
        response = self._send("DELETE", self._users_url(user_id))
        self._report(response)

    def list_users(self) -> List[User]:
        """
        Fetch all users.

        Returns:
            List of User objects.

        Raises:
            ClientError: TRANSPORT or DECODING.
        """
        response = self._get(self._users_url())
        users = self.codec.decode_list(User, response.text)
        self.logger.info(f"Fetched {len(users)} users")
        return users

    def get_user_by_id(self, user_id: str) -> str:
        """
        Fetch a user by ID and return the undecoded JSON body.

        The body is returned whatever the status; an unknown ID gives
        the service's 404 body (``{}``). The status goes to the logger.
        """
        response = self._send("GET", self._users_url(user_id))
        self.logger.info(f"Status code: {response.status_code}")
        return response.text

    def get_user_by_username(self, username: str) -> str:
        """
        Fetch users filtered by username.

        Returns:
            The undecoded JSON body (an array, possibly empty).
        """
        response = self._send("GET", self._users_url(), params={"username": username})
        self.logger.info(f"Status code: {response.status_code}")
        return response.text

    def list_open_todos(self, user_id: str) -> List[Todo]:
        """
        Fetch the todos of a user that are not completed.

        Source order is preserved.
        """
        response = self._get(f"{self._users_url(user_id)}{config.api.todos_endpoint}")
        todos = self.codec.decode_list(Todo, response.text)
        open_todos = [todo for todo in todos if not todo.completed]
        self.logger.info(f"User {user_id}: {len(open_todos)} open of {len(todos)} todos")
        return open_todos

    def list_user_posts(self, user_id: str) -> List[Post]:
        """Fetch all posts written by a user."""
        response = self._get(f"{self._users_url(user_id)}{config.api.posts_endpoint}")
        return self.codec.decode_list(Post, response.text)

    def list_post_comments(self, post_id: int) -> List[Comment]:
        """Fetch all comments attached to a post."""
        url = f"{self.base_url}{config.api.posts_endpoint}/{post_id}{config.api.comments_endpoint}"
        response = self._get(url)
        return self.codec.decode_list(Comment, response.text)

    def last_post_comments_to_file(self, user_id: str) -> Path:
        """
        Write the comments of a user's most recent post to a JSON file.

        The most recent post is the one with the highest ID. The file is
        named after the user ID and that post ID.

        Args:
            user_id: The user ID.

        Returns:
            Path of the written file.

        Raises:
            ClientError: EMPTY_RESULT if the user has no posts; otherwise
                TRANSPORT, DECODING, ENCODING or FILE_WRITE from the
                failing step. Nothing after a failing step runs.
        """
        posts = self.list_user_posts(user_id)
        if not posts:
            raise ClientError(ErrorKind.EMPTY_RESULT, f"User {user_id} has no posts")

        last_post_id = max(post.id for post in posts)
        self.logger.info(f"User {user_id}: last post is {last_post_id} of {len(posts)}")

        comments = self.list_post_comments(last_post_id)
        return self.files.write_comments(user_id, last_post_id, comments)

    def test_connection(self) -> bool:
        """
        Check that the API is reachable.

        Returns:
            True if a probe request succeeded, False otherwise.
        """
        try:
            self._get(self._users_url("1"))
        except ClientError as e:
            self.logger.warning(f"API connection test failed: {e}")
            return False
        return True

    def _users_url(self, user_id: Optional[str] = None) -> str:
        url = f"{self.base_url}{config.api.users_endpoint}"
        if user_id is not None:
            url = f"{url}/{user_id}"
        return url

    def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        return self._send("GET", url, params=params, check_status=True)

    def _send(
        self,
        method: str,
        url: str,
        content: Optional[str] = None,
        params: Optional[dict] = None,
        check_status: bool = False
    ) -> httpx.Response:
        """
        Issue a single request.

        Raises:
            ClientError: TRANSPORT on connection errors, timeouts and,
                when check_status is set, on 4xx/5xx responses.
        """
        self.logger.debug(f"{method} {url}")
        try:
            with httpx.Client(
                timeout=self.timeout,
                headers=config.api.headers,
                transport=self.transport
            ) as client:
                response = client.request(method, url, content=content, params=params)
                if check_status:
                    response.raise_for_status()
                return response
        except httpx.HTTPError as e:
            raise ClientError(ErrorKind.TRANSPORT, f"{method} {url} failed: {e}", cause=e) from e

    def _report(self, response: httpx.Response) -> None:
        self.logger.info(f"Status code: {response.status_code}")
        self.logger.info(f"Response body: {response.text}")

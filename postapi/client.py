"""
Console client for the PostAPI server. Run:

  python -m postapi.client --base-url http://localhost:8000

When logged out only register/login are offered; after that the post commands.
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SEC = 10.0


class BlogClientError(Exception):
    """Raised when the server answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BlogClient:
    """Thin HTTP wrapper that remembers the current bearer token."""

    def __init__(self, http: httpx.Client) -> None:
        self.http = http
        self.token: str | None = None

    @classmethod
    def connect(cls, base_url: str, timeout: float = DEFAULT_TIMEOUT_SEC) -> "BlogClient":
        return cls(httpx.Client(base_url=base_url, timeout=httpx.Timeout(timeout)))

    @property
    def logged_in(self) -> bool:
        return bool(self.token)

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _request(self, method: str, url: str, params: dict[str, str] | None = None) -> Any:
        """Send one request; inputs travel as query parameters, as the server expects."""
        try:
            response = self.http.request(method, url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            raise BlogClientError(f"Request failed: {e}") from e
        logger.debug("%s %s -> %s", method, url, response.status_code)
        try:
            payload = response.json()
        except json.JSONDecodeError:
            payload = None
        if response.is_success:
            return payload
        detail = payload.get("detail") if isinstance(payload, dict) else None
        raise BlogClientError(
            f"{response.status_code}: {detail or response.text or response.reason_phrase}",
            status_code=response.status_code,
        )

    def register(self, username: str, password: str) -> str:
        data = self._request("POST", "/register", {"username": username, "password": password})
        self.token = data["token"]
        return self.token

    def login(self, username: str, password: str) -> str:
        data = self._request("POST", "/login", {"username": username, "password": password})
        self.token = data["token"]
        return self.token

    def logout(self) -> None:
        """Forget the token locally; the server keeps it until the next login."""
        self.token = None

    def create_post(self, title: str, content: str) -> int:
        data = self._request("POST", "/posts", {"title": title, "content": content})
        return data["postId"]

    def delete_post(self, post_id: int) -> str:
        return self._request("DELETE", f"/posts/{post_id}")["message"]

    def update_post(self, post_id: int, title: str | None = None, content: str | None = None) -> str:
        params = {"title": title or "", "content": content or ""}
        return self._request("PATCH", f"/posts/{post_id}", params)["message"]

    def list_posts(self) -> list[dict[str, Any]]:
        return self._request("GET", "/posts")

    def get_post(self, post_id: int) -> dict[str, Any]:
        return self._request("GET", f"/posts/{post_id}")

    def close(self) -> None:
        self.http.close()


LOGGED_OUT_MENU = """=== Not logged in. Commands: ===
1) register  - create an account
2) login     - log in (get a token)
0) exit      - quit"""

LOGGED_IN_MENU = """=== Logged in. Commands: ===
1) create_post    - new post (title + content)
2) delete_post    - delete a post by id
3) update_post    - edit a post (blank keeps the old value)
4) get_all_posts  - list all posts
5) get_post       - show one post by id
6) logout         - forget the token
0) exit           - quit"""


class ConsoleApp:
    """Interactive menu loop around BlogClient."""

    def __init__(
        self,
        client: BlogClient,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.client = client
        self.read = read
        self.write = write
        self.logged_out_commands: dict[str, Callable[[], None]] = {
            "1": self.do_register, "register": self.do_register,
            "2": self.do_login, "login": self.do_login,
        }
        self.logged_in_commands: dict[str, Callable[[], None]] = {
            "1": self.do_create, "create_post": self.do_create,
            "2": self.do_delete, "delete_post": self.do_delete,
            "3": self.do_update, "update_post": self.do_update,
            "4": self.do_list, "get_all_posts": self.do_list,
            "5": self.do_get, "get_post": self.do_get,
            "6": self.do_logout, "logout": self.do_logout,
        }

    def _ask_id(self) -> int | None:
        raw = self.read("Post id: ").strip()
        try:
            return int(raw)
        except ValueError:
            self.write("Invalid id.")
            return None

    def _dump(self, data: Any) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False)

    def do_register(self) -> None:
        username = self.read("Username: ")
        password = self.read("Password: ")
        self.client.register(username, password)
        self.write(f"Registered. Token: {self.client.token}")

    def do_login(self) -> None:
        username = self.read("Username: ")
        password = self.read("Password: ")
        self.client.login(username, password)
        self.write(f"Logged in. Token: {self.client.token}")

    def do_logout(self) -> None:
        self.client.logout()
        self.write("Logged out (token cleared).")

    def do_create(self) -> None:
        title = self.read("Title: ")
        content = self.read("Content: ")
        post_id = self.client.create_post(title, content)
        self.write(f"Post created with id {post_id}.")

    def do_delete(self) -> None:
        post_id = self._ask_id()
        if post_id is not None:
            self.write(self.client.delete_post(post_id))

    def do_update(self) -> None:
        post_id = self._ask_id()
        if post_id is None:
            return
        title = self.read("New title (blank to keep): ")
        content = self.read("New content (blank to keep): ")
        self.write(self.client.update_post(post_id, title, content))

    def do_list(self) -> None:
        self.write(self._dump(self.client.list_posts()))

    def do_get(self) -> None:
        post_id = self._ask_id()
        if post_id is not None:
            self.write(self._dump(self.client.get_post(post_id)))

    def run(self) -> None:
        while True:
            self.write("")
            if self.client.logged_in:
                self.write(LOGGED_IN_MENU)
                commands = self.logged_in_commands
            else:
                self.write(LOGGED_OUT_MENU)
                commands = self.logged_out_commands
            try:
                command = self.read(">> ").strip().lower()
            except EOFError:
                break
            if command in ("0", "exit"):
                break
            action = commands.get(command)
            if action is None:
                self.write("Unknown command.")
                continue
            try:
                action()
            except BlogClientError as e:
                self.write(f"Error: {e.message}")
        self.write("Bye.")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive PostAPI console client.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Server URL")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_SEC, help="Request timeout (s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s %(message)s")
    client = BlogClient.connect(args.base_url, timeout=args.timeout)
    try:
        ConsoleApp(client).run()
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

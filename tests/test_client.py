"""Tests for postapi.client: BlogClient against the app, and the console menu loop."""

import unittest

import httpx
from fastapi.testclient import TestClient

from postapi.client import BlogClient, BlogClientError, ConsoleApp, main
from postapi.main import app


def _scripted(answers: list[str]):
    """Return a read() replacement that yields answers, then raises EOFError."""
    it = iter(answers)

    def read(_prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read


class TestBlogClient(unittest.TestCase):
    def setUp(self) -> None:
        self.client = BlogClient(TestClient(app))

    def test_register_stores_token(self) -> None:
        token = self.client.register("alice", "pw1")
        self.assertTrue(self.client.logged_in)
        self.assertEqual(self.client.token, token)

    def test_post_lifecycle(self) -> None:
        self.client.register("alice", "pw1")
        post_id = self.client.create_post("Hi", "World")
        self.assertEqual(self.client.get_post(post_id)["title"], "Hi")
        self.assertEqual(self.client.update_post(post_id, "", "World2"), "Post updated")
        self.assertEqual(self.client.get_post(post_id)["content"], "World2")
        self.assertEqual([p["id"] for p in self.client.list_posts()], [post_id])
        self.assertEqual(self.client.delete_post(post_id), "Post deleted")
        self.assertEqual(self.client.list_posts(), [])

    def test_error_carries_status_and_detail(self) -> None:
        self.client.register("alice", "pw1")
        with self.assertRaises(BlogClientError) as ctx:
            self.client.get_post(42)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertIn("Post not found", ctx.exception.message)

    def test_logout_drops_auth_header(self) -> None:
        self.client.register("alice", "pw1")
        self.client.logout()
        self.assertFalse(self.client.logged_in)
        with self.assertRaises(BlogClientError) as ctx:
            self.client.create_post("a", "b")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_transport_failure_wrapped(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = BlogClient(httpx.Client(base_url="http://test", transport=httpx.MockTransport(refuse)))
        with self.assertRaises(BlogClientError) as ctx:
            client.list_posts()
        self.assertIsNone(ctx.exception.status_code)

    def test_inputs_sent_as_query_parameters(self) -> None:
        seen: list[httpx.Request] = []

        def answer(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"message": "Post updated"})

        client = BlogClient(httpx.Client(base_url="http://test", transport=httpx.MockTransport(answer)))
        client.update_post(7, content="New")
        request = seen[0]
        self.assertEqual(request.url.path, "/posts/7")
        self.assertEqual(dict(request.url.params), {"title": "", "content": "New"})
        self.assertEqual(request.content, b"")


class TestConsoleApp(unittest.TestCase):
    def setUp(self) -> None:
        self.output: list[str] = []
        self.client = BlogClient(TestClient(app))

    def run_app(self, answers: list[str]) -> str:
        ConsoleApp(self.client, read=_scripted(answers), write=self.output.append).run()
        return "\n".join(self.output)

    def test_register_then_create_and_list(self) -> None:
        out = self.run_app([
            "register", "alice", "pw1",
            "create_post", "Hi", "World",
            "4",
            "exit",
        ])
        self.assertIn("Registered.", out)
        self.assertIn("Post created with id 1.", out)
        self.assertIn('"title": "Hi"', out)
        self.assertTrue(out.endswith("Bye."))

    def test_post_commands_hidden_until_logged_in(self) -> None:
        out = self.run_app(["create_post", "0"])
        self.assertIn("Unknown command.", out)

    def test_server_errors_are_printed_and_loop_continues(self) -> None:
        out = self.run_app(["2", "ghost", "pw", "0"])
        self.assertIn("Error: 401", out)
        self.assertTrue(out.endswith("Bye."))

    def test_invalid_id(self) -> None:
        out = self.run_app(["1", "alice", "pw1", "5", "abc", "6", "0"])
        self.assertIn("Invalid id.", out)
        self.assertIn("Logged out", out)

    def test_eof_exits(self) -> None:
        out = self.run_app([])
        self.assertTrue(out.endswith("Bye."))


class TestClientMain(unittest.TestCase):
    def test_rejects_bad_timeout(self) -> None:
        with self.assertRaises(SystemExit):
            main(["--timeout", "soon"])

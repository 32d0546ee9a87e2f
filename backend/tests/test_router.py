"""
Haste Store — Request Classification Tests
============================================

What:  Tests for classify(), extract_id() and the raw routing path; no app needed.
"""

import pytest
from starlette.requests import Request

from haste.routes.dispatch import routing_path
from haste.routes.router import Route, RouteKind, classify, extract_id


class TestExtractId:

    @pytest.mark.parametrize(
        "segment, expected",
        [
            ("abc123.txt", "abc123"),
            ("ABC.TXT", "abc"),
            ("", ""),
            ("plainkey", "plainkey"),
            ("key.tar.gz", "key"),
            (".hidden", ""),
        ],
    )
    def test_extract_id(self, segment, expected):
        assert extract_id(segment) == expected


class TestClassify:

    @pytest.mark.parametrize("path", ["/documents", "/DOCUMENTS", "/Documents"])
    def test_post_documents_any_case(self, path):
        assert classify("POST", path) == Route(RouteKind.CREATE_DOCUMENT)

    def test_post_documents_with_trailing_slash_is_static(self):
        assert classify("POST", "/documents/").kind is RouteKind.STATIC_ASSET

    def test_get_document(self):
        assert classify("GET", "/documents/abcdefghij") == Route(
            RouteKind.GET_DOCUMENT, "abcdefghij"
        )

    def test_get_document_with_extension_and_case(self):
        assert classify("GET", "/Documents/ABCdef.py") == Route(RouteKind.GET_DOCUMENT, "abcdef")

    def test_get_raw_strips_extension(self):
        assert classify("GET", "/raw/foo.json") == Route(RouteKind.GET_DOCUMENT_RAW, "foo")

    def test_encoded_slash_is_part_of_the_id(self):
        assert classify("GET", "/documents/a%2Fb") == Route(RouteKind.GET_DOCUMENT, "a%2fb")

    def test_get_documents_trailing_slash_gives_empty_id(self):
        assert classify("GET", "/documents/") == Route(RouteKind.GET_DOCUMENT, "")

    @pytest.mark.parametrize(
        "path",
        [
            "/documents/x/y",
            "/raw/x/y",
            "/documents",
            "/raw",
            "/",
            "/nonexistent-page",
            "/about/index.html",
        ],
    )
    def test_get_other_paths_are_static(self, path):
        assert classify("GET", path) == Route(RouteKind.STATIC_ASSET)

    @pytest.mark.parametrize(
        "method, path",
        [
            ("PUT", "/documents"),
            ("DELETE", "/documents/abc"),
            ("HEAD", "/raw/abc"),
            ("POST", "/raw/abc"),
            ("POST", "/documents/abc"),
            ("OPTIONS", "/documents"),
        ],
    )
    def test_other_methods_are_static(self, method, path):
        assert classify(method, path).kind is RouteKind.STATIC_ASSET


class TestRoutingPath:

    @staticmethod
    def make_request(path, raw_path=None):
        scope = {"type": "http", "method": "GET", "path": path, "query_string": b"", "headers": []}
        if raw_path is not None:
            scope["raw_path"] = raw_path
        return Request(scope)

    def test_uses_undecoded_path(self):
        request = self.make_request("/documents/a/b", b"/documents/a%2Fb")
        assert routing_path(request) == "/documents/a%2Fb"

    def test_strips_query_string(self):
        request = self.make_request("/raw/abc", b"/raw/abc?lang=py")
        assert routing_path(request) == "/raw/abc"

    def test_falls_back_to_decoded_path(self):
        request = self.make_request("/raw/abc")
        assert routing_path(request) == "/raw/abc"

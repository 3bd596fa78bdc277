"""
Unit tests for the endpoint builder.
"""

from enum import Enum

import pytest

from restify import Endpoint, describable
from restify.utils import clean_component, replace_placeholders


@describable({'V1': 'v1', 'V2': 'v2.0'})
class ApiVersion(Enum):
    V1 = 1
    V2 = 2


@describable({'USERS': 'users', 'USER': 'users/{id}'})
class Route(Enum):
    USERS = 'u'
    USER = 'ui'


class Plain(Enum):
    orders = 1


class TestCleanComponent:
    """Test segment cleaning."""

    @pytest.mark.parametrize("value,expected", [
        ("/users/", "users"),
        ("/users", "users"),
        ("users/", "users"),
        ("users", "users"),
        ("/a/b/c/", "a/b/c"),
        ("//users//", "/users/"),
        ("/", ""),
        ("", ""),
    ])
    def test_clean_component(self, value, expected):
        assert clean_component(value) == expected


class TestReplacePlaceholders:
    """Test placeholder substitution."""

    def test_replaces_matching_keys(self):
        assert replace_placeholders("a/{id}/b/{id}", {"id": "7"}) == "a/7/b/7"

    def test_unmatched_placeholder_left_literal(self):
        assert replace_placeholders("a/{id}/{other}", {"id": "7"}) == "a/7/{other}"

    def test_unused_keys_ignored(self):
        assert replace_placeholders("a/b", {"id": "7"}) == "a/b"


class TestEndpoint:
    """Test URL building."""

    def test_path_with_params(self, base_url):
        url = Endpoint().with_path("/users/").with_path("/{id}/orders", {"id": "42"}).build(base_url)

        assert url == "https://api.example.com/users/42/orders"

    def test_chaining_returns_same_instance(self):
        endpoint = Endpoint()

        assert endpoint.with_path("a") is endpoint
        assert endpoint.with_version("v1") is endpoint
        assert endpoint.with_query({"a": "1"}) is endpoint

    def test_version_then_path(self, base_url):
        url = Endpoint().with_version("/v1/").with_path("users").build(base_url)

        assert url == "https://api.example.com/v1/users"

    def test_base_url_trailing_slash(self):
        url = Endpoint().with_path("users").build("https://api.example.com/")

        assert url == "https://api.example.com/users"

    def test_relative_path_without_base(self):
        endpoint = Endpoint().with_path("users").with_path("42")

        assert endpoint.build() == "/users/42"
        assert endpoint.path == "/users/42"

    def test_missing_param_left_untouched(self, base_url):
        url = Endpoint().with_path("users/{id}/{kind}", {"id": "1"}).build(base_url)

        assert url == "https://api.example.com/users/1/{kind}"

    def test_query(self, base_url):
        url = Endpoint().with_path("items").with_query({"a": "1", "b": "2"}).build(base_url)

        path, _, query = url.partition("?")
        assert path == "https://api.example.com/items"
        assert url.count("?") == 1
        assert not url.endswith("&")
        assert sorted(query.split("&")) == ["a=1", "b=2"]

    def test_query_replaces(self, base_url):
        endpoint = Endpoint().with_path("items").with_query({"a": "1"}).with_query({"b": "2"})

        assert endpoint.build(base_url) == "https://api.example.com/items?b=2"
        assert endpoint.query == {"b": "2"}

    def test_empty_query_has_no_suffix(self, base_url):
        url = Endpoint().with_path("items").with_query({}).build(base_url)

        assert url == "https://api.example.com/items"

    def test_query_values_kept_as_given(self, base_url):
        url = Endpoint().with_path("search").with_query({"q": "a%20b", "fields": "id,name"}).build(base_url)

        assert url == "https://api.example.com/search?q=a%20b&fields=id,name"

    def test_query_escapes_illegal_characters(self, base_url):
        url = Endpoint().with_path("search").with_query({"q": "a b"}).build(base_url)

        assert url == "https://api.example.com/search?q=a%20b"

    def test_empty_segments_skipped(self, base_url):
        url = Endpoint().with_path("/").with_path("users").with_version("").build(base_url)

        assert url == "https://api.example.com/users"

    def test_custom_url_ignores_base(self):
        endpoint = Endpoint("https://other.example.org/").with_path("status")

        assert endpoint.custom_url is True
        assert endpoint.build("https://api.example.com") == "https://other.example.org/status"
        assert endpoint.url == "https://other.example.org/status"

    def test_default_is_not_custom(self):
        assert Endpoint().custom_url is False
        assert Endpoint("").custom_url is False

    def test_enum_version_and_path(self, base_url):
        url = (
            Endpoint()
            .with_version(ApiVersion.V2)
            .with_path(Route.USER, {"id": "9"})
            .build(base_url)
        )

        assert url == "https://api.example.com/v2.0/users/9"

    def test_undescribed_enum_falls_back_to_name(self, base_url):
        url = Endpoint().with_path(Plain.orders).build(base_url)

        assert url == "https://api.example.com/orders"

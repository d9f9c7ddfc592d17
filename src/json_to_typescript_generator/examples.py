"""Public endpoints that return JSON, grouped by HTTP method."""

from __future__ import annotations

from .request_types import HttpMethod

EXAMPLE_URLS_BY_METHOD: dict[HttpMethod, tuple[str, ...]] = {
    "GET": (
        "https://jsonplaceholder.typicode.com/users",
        "https://jsonplaceholder.typicode.com/posts",
        "https://api.github.com/users/octocat",
        "https://httpbin.org/get",
        "https://dummyjson.com/products",
        "https://reqres.in/api/users",
        "https://jsonplaceholder.typicode.com/comments",
    ),
    "POST": (
        "https://jsonplaceholder.typicode.com/posts",
        "https://httpbin.org/post",
        "https://reqres.in/api/users",
        "https://dummyjson.com/products/add",
        "https://jsonplaceholder.typicode.com/users",
    ),
    "PUT": (
        "https://jsonplaceholder.typicode.com/posts/1",
        "https://httpbin.org/put",
        "https://reqres.in/api/users/2",
        "https://dummyjson.com/products/1",
        "https://jsonplaceholder.typicode.com/users/1",
    ),
    "PATCH": (
        "https://jsonplaceholder.typicode.com/posts/1",
        "https://httpbin.org/patch",
        "https://reqres.in/api/users/2",
        "https://dummyjson.com/products/1",
    ),
    "DELETE": (
        "https://jsonplaceholder.typicode.com/posts/1",
        "https://httpbin.org/delete",
        "https://reqres.in/api/users/2",
        "https://dummyjson.com/products/1",
        "https://jsonplaceholder.typicode.com/users/1",
    ),
}

EXAMPLE_URLS: tuple[str, ...] = EXAMPLE_URLS_BY_METHOD["GET"]

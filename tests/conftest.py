"""
Shared test fixtures for the Pathwright test suite.
"""

import pytest

from pathwright.config import RouterConfig
from pathwright.routing import RouteRegistry, Resolver
from pathwright.dispatch import Dispatcher


ROUTE_TABLE_YAML = """\
routes:
  - name: home
    methods: [GET]
    template: /
    endpoint: index.html
  - name: user_show
    methods: GET|HEAD
    template: /users/{i:id}
    endpoint: users/show.py
  - name: post_show
    template: /posts/{s:slug}/
    endpoint: posts/show.py
  - name: price
    methods: [GET, POST]
    template: /prices/{f:amount}
    endpoint: prices.py
"""


@pytest.fixture
def registry():
    """Registry with a handful of typical routes (not frozen)."""
    reg = RouteRegistry()
    reg.register("GET", "/", "index.html", "home")
    reg.register("GET|HEAD", "/users/{i:id}", "users/show.py", "user_show")
    reg.register("GET", "/posts/{s:slug}/", "posts/show.py", "post_show")
    reg.register(["GET", "POST"], "/prices/{f:amount}", "prices.py", "price")
    reg.register("GET", "/flags/{b:enabled}", "flags.py", "flag")
    return reg


@pytest.fixture
def config():
    return RouterConfig(app_url="https://example.com", error_400_route="/400", error_404_route="/404")


@pytest.fixture
def resolver(registry, config):
    return Resolver(registry, config)


@pytest.fixture
def pages(tmp_path):
    """Pages directory holding the endpoint files of the ``registry`` fixture."""
    (tmp_path / "users").mkdir()
    (tmp_path / "posts").mkdir()
    (tmp_path / "index.html").write_text("<h1>home</h1>")
    (tmp_path / "users" / "show.py").write_text("print('user')\n")
    (tmp_path / "posts" / "show.py").write_text("print('post')\n")
    (tmp_path / "prices.py").write_text("print('price')\n")
    return tmp_path


@pytest.fixture
def dispatcher(registry, pages):
    config = RouterConfig(
        pages_directory=str(pages),
        error_400_route="/errors/400",
        error_404_route="/errors/404",
    )
    return Dispatcher(Resolver(registry, config))


@pytest.fixture
def routes_file(tmp_path):
    path = tmp_path / "routes.yaml"
    path.write_text(ROUTE_TABLE_YAML)
    return path

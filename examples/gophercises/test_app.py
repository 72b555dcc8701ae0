"""Tests for the gophercises example."""

from urlshort.testing import TestClient


class TestGophercisesApp:
    """Every layer of the example answers through the ASGI pipeline."""

    async def test_yaml_redirect(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/urlshort-final")
            assert response.status == 302
            assert response.location == "https://github.com/gophercises/urlshort/tree/solution"

    async def test_map_redirect_behind_yaml(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/yaml-godoc")
            assert response.status == 302
            assert response.location == "https://godoc.org/gopkg.in/yaml.v2"

    async def test_hello_world_fallback(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "Hello, world!"

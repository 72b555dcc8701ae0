"""Gophercises urlshort — map redirects layered over YAML redirects.

A request is checked against ``paths.yaml`` first, then the in-memory
table, and finally answered with "Hello, world!".

Run:
    python app.py
"""

from pathlib import Path

from urlshort import App, map_handler, text_fallback, yaml_handler

fallback = text_fallback("Hello, world!")

path_handler = map_handler(
    {
        "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
        "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
    },
    fallback,
)

handler = yaml_handler((Path(__file__).parent / "paths.yaml").read_bytes(), path_handler)

app = App(handler)


if __name__ == "__main__":
    app.run()

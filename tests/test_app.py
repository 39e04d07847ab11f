"""Tests for the HTTP layer."""

from fastapi.testclient import TestClient

from app import app


class TestDraw:
    """Tests for the /draw endpoint."""

    def setup_method(self):
        self.client = TestClient(app)

    def test_get_with_query(self):
        resp = self.client.get("/draw", params={"func": "saddle", "cells": "10"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("image/svg+xml")
        assert resp.text.count("<polygon") == 100
        assert resp.text.endswith("</svg>")

    def test_post_form(self):
        resp = self.client.post(
            "/draw",
            data={"width": "200", "height": "100", "cells": "4", "func": "f3", "background": "#000000"},
        )
        assert resp.status_code == 200
        assert "width='200' height='100'" in resp.text
        assert resp.text.count("<polygon") == 12

    def test_defaults(self):
        resp = self.client.get("/draw")
        assert resp.status_code == 200
        assert "width='600' height='320'" in resp.text

    def test_unknown_parameter(self):
        resp = self.client.post("/draw", data={"foo": "1"})
        assert resp.status_code == 400
        assert resp.headers["content-type"].startswith("text/plain")
        assert '"foo"' in resp.text

    def test_malformed_color(self):
        resp = self.client.get("/draw", params={"lowest": "red"})
        assert resp.status_code == 400

    def test_unknown_function(self):
        resp = self.client.get("/draw", params={"func": "bogus"})
        assert resp.status_code == 400
        assert "schaffer" in resp.text

    def test_bad_integer(self):
        resp = self.client.get("/draw", params={"cells": "many"})
        assert resp.status_code == 400


class TestPages:
    """Tests for the front end and health routes."""

    def setup_method(self):
        self.client = TestClient(app)

    def test_index(self):
        resp = self.client.get("/")
        assert resp.status_code == 200
        assert "<form" in resp.text
        for name in ["schaffer", "eggbox", "sinc", "moguls", "saddle"]:
            assert name in resp.text

    def test_static_script(self):
        resp = self.client.get("/static/script.js")
        assert resp.status_code == 200
        assert "/draw" in resp.text

    def test_health(self):
        resp = self.client.get("/health")
        assert resp.json() == {
            "status": "ok",
            "functions": ["schaffer", "eggbox", "sinc", "moguls", "saddle"],
        }

"""Tests for the evaluate endpoint."""

import pytest
from django.urls import reverse
from rest_framework.test import APIClient


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def url():
    return reverse("arithmetic-evaluate")


def test_evaluates_expression(client, url):
    response = client.post(url, {"expression": "(3 + 5) * (2 - 1)"}, format="json")
    assert response.status_code == 200
    assert response.json() == {"status": 200, "data": {"expression": "(3 + 5) * (2 - 1)", "result": 8}}


def test_lexical_error(client, url):
    response = client.post(url, {"expression": "3 & 4"}, format="json")
    assert response.status_code == 400
    assert response.json()["error"] == {
        "stage": "lexical", "kind": "invalid_character", "character": "&", "position": 2,
    }


def test_syntax_error(client, url):
    response = client.post(url, {"expression": "(1 + 2"}, format="json")
    body = response.json()
    assert response.status_code == 400
    assert body["error"]["stage"] == "syntax"
    assert body["error"]["kind"] == "missing_right_paren"
    assert body["error"]["token"] == {"kind": "END", "text": None, "position": 6}


def test_arithmetic_error(client, url):
    response = client.post(url, {"expression": "5 / 0"}, format="json")
    assert response.status_code == 400
    assert response.json()["error"] == {"stage": "arithmetic", "kind": "division_by_zero"}
    assert response.json()["message"].startswith("Division by zero")


@pytest.mark.parametrize("payload", [{}, {"expression": ""}, {"expression": "   "}])
def test_invalid_payload(client, url, payload):
    response = client.post(url, payload, format="json")
    assert response.status_code == 400
    assert "expression" in response.json()


def test_deep_nesting_is_a_syntax_error(client, url):
    expression = "(" * 300 + "1" + ")" * 300
    response = client.post(url, {"expression": expression}, format="json")
    assert response.status_code == 400
    assert response.json()["error"]["kind"] == "too_deeply_nested"


def test_nesting_at_the_limit_evaluates(client, url):
    expression = "(" * 100 + "2 * 3" + ")" * 100
    response = client.post(url, {"expression": expression}, format="json")
    assert response.status_code == 200
    assert response.json()["data"]["result"] == 6

"""Shared fixtures for unit tests."""

import logging

import pytest

from htmx_headers.domain.http_types import HttpRequest, HttpResponse


@pytest.fixture(autouse=True)
def reset_project_handlers():
    """Drop handlers installed by configure_logging after each test."""
    yield
    logger = logging.getLogger("htmx_headers")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Ensure logs propagate to root so caplog can catch them."""
    logger = logging.getLogger("htmx_headers")
    old_propagate = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = old_propagate


@pytest.fixture(name="response")
def response_fixture() -> HttpResponse:
    """Provide an empty response to collect directives."""
    return HttpResponse()


@pytest.fixture(name="hx_request")
def hx_request_fixture() -> HttpRequest:
    """Provide a request issued by an HTMX client."""
    return HttpRequest(
        "POST",
        "/items",
        {"hx-request": "true", "hx-target": "items", "hx-trigger": "add"},
    )

"""Shared dependencies for API routes."""

from fastapi import Request

from services.completion_client import CompletionClient


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client

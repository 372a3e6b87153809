"""
Shared dependencies for routes.
"""

from fastapi import Request

from numerals.core.decompose import Decomposer


def get_decomposer(request: Request) -> Decomposer:
    return request.app.state.decomposer

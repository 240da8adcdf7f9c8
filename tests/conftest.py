"""
Test configuration and fixtures
"""
import pytest

from pager.application.services.pagination import PaginationService
from pager.application.widgets.keyboard import PaginationKeyboard


@pytest.fixture
def service():
    """Provide a PaginationService instance."""
    return PaginationService()


@pytest.fixture
def keyboard(service):
    """Provide a PaginationKeyboard with default window settings."""
    return PaginationKeyboard(service=service)

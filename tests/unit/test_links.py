"""
Unit tests for link building and item path resolution.
"""

import pytest

from pager.common.utils.links import PathTemplateError, build_link, resolve_target
from pager.domain.entities.items import EllipsisItem, NextItem, PageItem, PrevItem


class TestBuildLink:
    def test_template(self):
        link = build_link("/posts/:page")

        assert link(1) == "/posts/1"
        assert link(42) == "/posts/42"

    def test_template_with_query(self):
        assert build_link("/search?q=cats&page=:page")(3) == "/search?q=cats&page=3"

    def test_every_placeholder_is_replaced(self):
        assert build_link("/:page/of/:page")(2) == "/2/of/2"

    def test_callable_is_used_as_is(self):
        def to_page(n: int) -> str:
            return f"#page-{n}"

        assert build_link(to_page) is to_page

    def test_template_without_placeholder(self):
        with pytest.raises(PathTemplateError):
            build_link("/posts")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_link("")


class TestResolveTarget:
    @pytest.fixture
    def link(self):
        return build_link("/p/:page")

    def test_prev(self, link):
        assert resolve_target(link, PrevItem(target_page=4, enabled=True)) == "/p/4"

    def test_next(self, link):
        assert resolve_target(link, NextItem(target_page=6, enabled=True)) == "/p/6"

    def test_page(self, link):
        assert resolve_target(link, PageItem(number=9)) == "/p/9"

    def test_ellipsis_has_no_target(self, link):
        assert resolve_target(link, EllipsisItem()) is None

    def test_resolves_generated_sequence(self, link, service):
        targets = [resolve_target(link, item) for item in service.generate(10, 5)]

        assert targets == ["/p/4", "/p/1", None, "/p/4", "/p/5", "/p/6", None, "/p/10", "/p/6"]

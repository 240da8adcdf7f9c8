"""
Unit tests for the HTML pagination widget.
"""

import pytest

from pager.application.widgets.html import HtmlPaginationRenderer, build_attrs, build_class
from pager.common.utils.links import PathTemplateError

ITEM = "pc-pagination__item"


@pytest.fixture
def renderer(service):
    return HtmlPaginationRenderer(path="/posts/:page", service=service)


class TestDefaultMarkup:
    def test_wrapper(self, renderer):
        html = renderer.render(10, 5)

        assert html.startswith('<div class="pc-pagination">\n<ul class="pc-pagination__inner">')
        assert html.endswith("</ul>\n</div>")

    def test_current_page_is_span(self, renderer):
        html = renderer.render(10, 5)

        assert (
            f'<li><span class="{ITEM} {ITEM}--is-current {ITEM}--rounded-catch-all">5</span></li>'
        ) in html
        assert 'href="/posts/5"' not in html

    def test_page_links_and_box_classes(self, renderer):
        html = renderer.render(10, 5)

        assert (
            f'<li><a href="/posts/1" class="{ITEM} {ITEM}--is-not-current '
            f'{ITEM}--with-multiple-boxes--left">1</a></li>'
        ) in html
        assert (
            f'<li><a href="/posts/10" class="{ITEM} {ITEM}--is-not-current '
            f'{ITEM}--with-multiple-boxes--right">10</a></li>'
        ) in html
        assert (
            f'<li><a href="/posts/4" class="{ITEM} {ITEM}--is-not-current {ITEM}--rounded-catch-all">4</a></li>'
        ) in html

    def test_ellipses(self, renderer):
        html = renderer.render(10, 5)

        assert html.count('<li><span class="pc-pagination__item__ellipsis">...</span></li>') == 2

    def test_prev_and_next_links(self, renderer):
        html = renderer.render(10, 5)

        assert '<a href="/posts/4" class="pc-pagination__item__previous">' in html
        assert '<a href="/posts/6" class="pc-pagination__item__next">' in html
        assert "pc-pagination__item__previous__chevron" in html
        assert "pc-pagination__item__next__chevron" in html

    def test_disabled_markers_are_omitted(self, renderer):
        first = renderer.render(10, 1)
        last = renderer.render(10, 10)

        assert "pc-pagination__item__previous" not in first
        assert '<a href="/posts/2" class="pc-pagination__item__next">' in first
        assert "pc-pagination__item__next" not in last

    def test_single_page(self, renderer):
        html = renderer.render(1, 1)

        assert f'<span class="{ITEM} {ITEM}--is-current {ITEM}--with-single-box">1</span>' in html
        assert "<a " not in html

    def test_no_pagination(self, renderer):
        assert renderer.render(None, None) == (
            '<div class="pc-pagination">\n<ul class="pc-pagination__inner">\n</ul>\n</div>'
        )

    def test_order_of_items(self, renderer):
        html = renderer.render(10, 5)
        positions = [html.index(marker) for marker in (
            "pc-pagination__item__previous",
            'href="/posts/1"',
            "pc-pagination__item__ellipsis",
            'href="/posts/4" class="pc-pagination__item pc',
            "--is-current",
            'href="/posts/10"',
            "pc-pagination__item__next",
        )]

        assert positions == sorted(positions)


class TestOptions:
    def test_default_path(self, service):
        assert 'href="/3"' in HtmlPaginationRenderer(service=service).render(5, 2)

    def test_callable_path_is_escaped(self, service):
        renderer = HtmlPaginationRenderer(path=lambda n: f"/list?page={n}&sort=asc", service=service)

        assert 'href="/list?page=3&amp;sort=asc"' in renderer.render(5, 2)

    def test_path_without_placeholder(self, service):
        with pytest.raises(PathTemplateError):
            HtmlPaginationRenderer(path="/posts", service=service)

    def test_container_class_and_attrs(self, service):
        renderer = HtmlPaginationRenderer(
            class_="mb-5",
            attrs={"id": "pager", "data-label": 'say "hi"', "hidden": True, "skip": None, "class": "ignored"},
            service=service,
        )

        assert renderer.render(3, 1).startswith(
            '<div class="mb-5 pc-pagination" id="pager" data-label="say &quot;hi&quot;" hidden>'
        )

    def test_window_settings(self, service):
        html = HtmlPaginationRenderer(sibling_count=0, boundary_count=0, service=service).render(10, 5)

        assert "pc-pagination__item__ellipsis" not in html
        assert 'href="/1"' not in html
        assert 'href="/4"' in html  # prev


class TestCustomHandlers:
    def test_page_handler_skips_current(self, service):
        renderer = HtmlPaginationRenderer(
            page=lambda n: f'<button data-page="{n}">{n}</button>',
            service=service,
        )
        html = renderer.render(3, 2)

        assert '<li><button data-page="1">1</button></li>' in html
        assert '<li><button data-page="3">3</button></li>' in html
        assert 'data-page="2"' not in html
        assert "--is-current" in html

    def test_prev_and_next_handlers_receive_target(self, service):
        renderer = HtmlPaginationRenderer(
            prev=lambda n: f'<span data-prev="{n}"></span>',
            next=lambda n: f'<span data-next="{n}"></span>',
            service=service,
        )
        html = renderer.render(10, 5)

        assert '<div><span data-prev="4"></span></div>' in html
        assert '<div><span data-next="6"></span></div>' in html
        assert "pc-pagination__item__previous" not in html

    def test_prev_handler_not_called_when_disabled(self, service):
        calls = []
        renderer = HtmlPaginationRenderer(prev=lambda n: calls.append(n) or "", service=service)
        renderer.render(10, 1)

        assert calls == []

    def test_ellipsis_handler(self, service):
        renderer = HtmlPaginationRenderer(ellipsis=lambda: "<em>…</em>", service=service)

        assert renderer.render(10, 5).count("<li><em>…</em></li>") == 2


class TestHelpers:
    def test_build_class_skips_empty(self):
        assert build_class(["", " a ", "b", "  "]) == "a b"

    def test_build_attrs(self):
        assert build_attrs({"a": 1, "b": False, "c": True}) == ' a="1" c'
        assert build_attrs({}) == ""

"""Unit tests for the YAML named-route table."""

import pytest

from cigi_web.domain.exceptions import MissingRouteParameterError, RouteNotFoundError
from cigi_web.infrastructure.routing.route_table import YamlRouteTable


@pytest.fixture
def table():
    return YamlRouteTable(
        {
            "home": "/",
            "admin.news.update": "/admin/news/{news}",
            "admin.media.index": "/admin/media/",
            "club.activity": "/komunitas/{club}/aktivitas/{activity}",
            "news.archive": "/berita/arsip/{year?}",
        }
    )


def test_positional_and_named_parameters(table):
    assert table.resolve("admin.news.update", "rapat-tahunan") == "/admin/news/rapat-tahunan"
    assert table.resolve("club.activity", "futsal", 3) == "/komunitas/futsal/aktivitas/3"
    assert table.resolve("club.activity", 3, club="futsal") == "/komunitas/futsal/aktivitas/3"


def test_values_are_quoted(table):
    assert table.resolve("admin.news.update", "a/b c") == "/admin/news/a%2Fb%20c"


def test_extra_keywords_become_query(table):
    url = table.resolve("admin.media.index", search="logo", tags=["a", "b"], page=None)
    assert url == "/admin/media?search=logo&tags=a&tags=b"


def test_optional_placeholder_and_root(table):
    assert table.resolve("news.archive") == "/berita/arsip"
    assert table.resolve("news.archive", 2024) == "/berita/arsip/2024"
    assert table.resolve("home") == "/"


def test_missing_parameter(table):
    with pytest.raises(MissingRouteParameterError) as exc_info:
        table.resolve("club.activity", "futsal")
    assert exc_info.value.parameter == "activity"


def test_unknown_route(table):
    assert not table.has("nope")
    with pytest.raises(RouteNotFoundError):
        table.resolve("nope")


def test_parameters_and_names(table):
    assert table.parameters("club.activity") == ["club", "activity"]
    assert table.names[0] == "admin.media.index"


def test_base_url_prefix():
    table = YamlRouteTable({"home": "/"}, base_url="https://cigi.test/")
    assert table.resolve("home") == "https://cigi.test/"


def test_shipped_routes_file_flattens_sections(routes):
    assert routes.has("contact.store")
    assert routes.has("admin.contact-messages.bulk-delete")
    assert routes.resolve("admin.media.picker") == "/admin/media-picker"
    assert routes.resolve("business-units.show", "teknologi") == "/unit-bisnis/teknologi"


def test_from_file(tmp_path):
    path = tmp_path / "routes.yaml"
    path.write_text("top: /top\nsection:\n  a.b: /a/{b}\n", encoding="utf-8")

    table = YamlRouteTable.from_file(path)

    assert table.names == ["a.b", "top"]
    assert table.resolve("a.b", "x") == "/a/x"

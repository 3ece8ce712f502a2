import pytest

from catalog import services
from catalog.errors import InvalidEnum, MalformedId, NotFound
from catalog.schemas import FilterState, MaterialIn


def test_parse_id():
    assert services.parse_id("12") == 12
    with pytest.raises(MalformedId):
        services.parse_id("abc")
    with pytest.raises(MalformedId):
        services.parse_id("1.5")


@pytest.mark.parametrize("raw", ["1_0", " 3", "+3", " +3 ", "\u0661\u0662", ""])
def test_parse_id_accepts_only_ascii_digits(raw):
    with pytest.raises(MalformedId):
        services.parse_id(raw)
    assert services.parse_id("-3") == -3


def test_get_unknown_raises_not_found(store):
    svc = services.CatalogService(store)
    with pytest.raises(NotFound):
        svc.get(404)
    with pytest.raises(NotFound):
        svc.record_download(404)


def test_enum_values_are_validated(store):
    svc = services.CatalogService(store)
    with pytest.raises(InvalidEnum):
        svc.by_category("magazine")
    with pytest.raises(InvalidEnum):
        svc.by_subject("biology")
    with pytest.raises(InvalidEnum) as exc_info:
        svc.by_year_level("msc_first_year")
    assert exc_info.value.message == "Invalid year level"


def test_search_applies_minimum_length(store):
    svc = services.CatalogService(store, search_min_length=3)
    assert svc.search("qu") == []
    assert [m.title for m in svc.search("quantum")] == ["Quantum Mechanics - B.Sc. 3rd Year"]
    assert len(services.CatalogService(store, search_min_length=0).search("")) == store.count()


def test_search_trims_before_matching(store):
    svc = services.CatalogService(store, search_min_length=3)
    assert [m.id for m in svc.search("  quantum  ")] == [10]
    assert svc.search(" qu ") == []


def test_featured_default_limit(store):
    svc = services.CatalogService(store)
    assert [m.id for m in svc.featured()] == [1, 2, 3, 4]
    assert [m.id for m in svc.featured(2)] == [1, 2]


def test_browse_combines_search_filters_and_sort(store):
    svc = services.CatalogService(store)
    store.increment_downloads(12)
    filters = services.build_filter_state([], "mathematics", ["bsc_third_year"])
    result = svc.browse(filters, sort="popular")
    assert [m.id for m in result] == [12, 9]
    result = svc.browse(FilterState(), sort="relevance", text="chemistry")
    assert result[0].title.lower().find("chemistry") >= 0


def test_build_filter_state_rejects_unknown_values():
    with pytest.raises(InvalidEnum):
        services.build_filter_state(["book", "poster"], "all", [])
    with pytest.raises(InvalidEnum):
        services.build_filter_state([], "biology", [])
    with pytest.raises(InvalidEnum):
        services.build_filter_state([], "all", ["fourth_year"])


def test_create_assigns_next_id(store):
    svc = services.CatalogService(store)
    payload = MaterialIn(
        title="Group Theory Research",
        description="Survey paper",
        category="research",
        subject="mathematics",
        file_path="/files/group-theory.pdf",
        cover_image="/covers/group-theory.jpg",
    )
    created = svc.create(payload)
    assert created.id == 13
    assert svc.category_counts()["research"] == 1

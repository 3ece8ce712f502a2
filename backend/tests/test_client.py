import pytest

from catalog.client import CatalogClient, refilter
from catalog.errors import InvalidEnum, MalformedId, MaterialValidationError, NotFound
from catalog.schemas import FilterState, MaterialIn


@pytest.fixture
def api(client):
    return CatalogClient(http=client)


def test_list_and_get(api):
    materials = api.list_materials()
    assert len(materials) == 12
    quantum = api.get(10)
    assert quantum.title == "Quantum Mechanics - B.Sc. 3rd Year"
    assert quantum.year_level == "bsc_third_year"
    assert quantum.created_at == materials[9].created_at


def test_errors_are_translated(api):
    with pytest.raises(NotFound):
        api.get(999)
    with pytest.raises(InvalidEnum) as exc_info:
        api.by_category("magazine")
    assert exc_info.value.kind == "category"
    assert exc_info.value.value == "magazine"
    with pytest.raises(InvalidEnum) as exc_info:
        api.by_year_level("msc first year")
    assert exc_info.value.value == "msc first year"
    with pytest.raises(MalformedId) as exc_info:
        api.get("abc")
    assert exc_info.value.raw == "abc"


def test_search_and_enum_lookups(api):
    assert [m.id for m in api.search("QUANTUM")] == [10]
    assert [m.id for m in api.by_subject("physics")] == [1, 4, 7, 10]
    assert [m.id for m in api.by_year_level("bsc_first_year")] == [1, 2, 3]
    assert api.category_counts()["book"] == 6


def test_download_and_featured(api):
    assert api.record_download(2).downloads == 1
    assert [m.id for m in api.featured(3)] == [1, 2, 3]


def test_create_and_validation(api):
    draft = MaterialIn(
        title="Spectroscopy Research",
        description="Notes on spectroscopy methods.",
        category="research",
        subject="chemistry",
        file_path="/files/spectro.pdf",
        cover_image="/covers/spectro.jpg",
    )
    created = api.create(draft)
    assert created.id == 13
    assert created.category == "research"
    with pytest.raises(MaterialValidationError) as exc_info:
        api.create({"title": "x"})
    assert any(e["field"] == "category" for e in exc_info.value.errors)


def test_client_side_browse_matches_server(api, client):
    api.record_download(5)
    api.record_download(5)
    api.record_download(8)
    cases = [
        (FilterState(subject="chemistry"), "popular", None),
        (FilterState(categories={"book", "notes"}, year_levels={"bsc_third_year"}), "za", None),
        (FilterState(), "relevance", "chemistry"),
        (FilterState(categories=set()), "newest", None),
    ]
    for filters, sort, text in cases:
        params = {
            "category": sorted(filters.categories),
            "subject": filters.subject,
            "yearLevel": sorted(filters.year_levels),
            "sort": sort,
        }
        if text:
            params["q"] = text
        server_ids = [m["id"] for m in client.get("/materials/browse", params=params).json()]
        local_ids = [m.id for m in api.browse(filters, sort=sort, text=text)]
        assert local_ids == server_ids


def test_refilter_is_pure(api):
    materials = api.list_materials()
    before = [m.id for m in materials]
    result = refilter(materials, FilterState(subject="physics"), "az")
    assert [m.id for m in materials] == before
    assert {m.subject for m in result} == {"physics"}

import pytest

from billingo import BillingoApi, ConfigurationError, Credentials, NotFoundError, RateLimitError
from tests.helpers import respond, respond_pages

RESOURCES = [
    ("documents", "/documents"),
    ("partners", "/partners"),
    ("products", "/products"),
    ("bank_accounts", "/bank-accounts"),
    ("document_blocks", "/document-blocks"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("name, path", RESOURCES)
async def test_list_without_data_returns_empty_list(make_client, name, path) -> None:
    recorder = respond(200, {"current_page": 1, "last_page": 1})

    async with make_client(recorder) as client:
        result = await getattr(BillingoApi(client), name).list()

    assert result == []
    assert recorder.last.url.path.endswith(path)
    assert recorder.last_params() == {"page": "1", "per_page": "25"}


@pytest.mark.asyncio
@pytest.mark.parametrize("name, path", RESOURCES)
async def test_get_404_raises_not_found(make_client, name, path) -> None:
    async with make_client(respond(404, {"message": "Not found"})) as client:
        with pytest.raises(NotFoundError):
            await getattr(BillingoApi(client), name).get(99)


@pytest.mark.asyncio
@pytest.mark.parametrize("name, path", RESOURCES)
async def test_get_with_empty_envelope_returns_none(make_client, name, path) -> None:
    recorder = respond(200, {})

    async with make_client(recorder) as client:
        result = await getattr(BillingoApi(client), name).get(99)

    assert result is None
    assert recorder.last.url.path.endswith(f"{path}/99")


@pytest.mark.asyncio
@pytest.mark.parametrize("name, path", RESOURCES)
async def test_missing_api_key_makes_no_requests(make_client, name, path) -> None:
    recorder = respond(200, {"data": []})

    async with make_client(recorder, Credentials(api_key="")) as client:
        with pytest.raises(ConfigurationError):
            await getattr(BillingoApi(client), name).list()

    assert len(recorder.requests) == 0


@pytest.mark.asyncio
async def test_list_maps_per_page_to_query_param(make_client) -> None:
    recorder = respond(200, {"data": [{"id": 1}]})

    async with make_client(recorder) as client:
        await BillingoApi(client).products.list(page=2, per_page=10)

    assert recorder.last_params() == {"page": "2", "per_page": "10"}


@pytest.mark.asyncio
async def test_document_list_filters(make_client) -> None:
    recorder = respond(200, {"data": []})

    async with make_client(recorder) as client:
        await BillingoApi(client).documents.list(page=2, per_page=10, type="invoice", status="paid")

    assert recorder.last_params() == {
        "page": "2",
        "per_page": "10",
        "type": "invoice",
        "status": "paid",
    }


@pytest.mark.asyncio
async def test_partner_list_query_filter_skips_empty_values(make_client) -> None:
    recorder = respond(200, {"data": []})

    async with make_client(recorder) as client:
        api = BillingoApi(client)
        await api.partners.list(query="acme")
        with_query = recorder.last_params()
        await api.partners.list(query="")
        without_query = recorder.last_params()

    assert with_query == {"page": "1", "per_page": "25", "query": "acme"}
    assert without_query == {"page": "1", "per_page": "25"}


@pytest.mark.asyncio
async def test_create_passes_payload_through(make_client) -> None:
    payload = {"name": "Acme Kft.", "emails": ["info@acme.hu"], "taxcode": "12345678-1-42"}
    recorder = respond(201, {"data": {"id": "X", **payload}})

    async with make_client(recorder) as client:
        created = await BillingoApi(client).partners.create(payload)

    assert recorder.last.method == "POST"
    assert recorder.last_json() == payload
    assert created["id"] == "X"
    assert {k: v for k, v in created.items() if k != "id"} == payload


@pytest.mark.asyncio
async def test_update_puts_to_item_path(make_client) -> None:
    recorder = respond(200, {"data": {"id": 5, "name": "New"}})

    async with make_client(recorder) as client:
        updated = await BillingoApi(client).bank_accounts.update(5, {"name": "New"})

    assert recorder.last.method == "PUT"
    assert recorder.last.url.path.endswith("/bank-accounts/5")
    assert updated == {"id": 5, "name": "New"}


@pytest.mark.asyncio
async def test_delete_returns_true_without_parsing_body(make_client) -> None:
    recorder = respond(204)

    async with make_client(recorder) as client:
        assert await BillingoApi(client).products.delete(3) is True

    assert recorder.last.method == "DELETE"
    assert recorder.last.url.path.endswith("/products/3")


@pytest.mark.asyncio
async def test_document_send_posts_emails(make_client) -> None:
    recorder = respond(200, {"emails": ["a@example.com"]})

    async with make_client(recorder) as client:
        result = await BillingoApi(client).documents.send(12, ["a@example.com", "b@example.com"])

    assert recorder.last.method == "POST"
    assert recorder.last.url.path.endswith("/documents/12/send")
    assert recorder.last_json() == {"emails": ["a@example.com", "b@example.com"]}
    assert result == {"emails": ["a@example.com"]}


@pytest.mark.asyncio
async def test_document_download_returns_opaque_payload(make_client) -> None:
    recorder = respond(200, {"data": {"url": "https://example.com/doc.pdf"}})

    async with make_client(recorder) as client:
        result = await BillingoApi(client).documents.download(12)

    assert recorder.last.url.path.endswith("/documents/12/download")
    assert result == {"data": {"url": "https://example.com/doc.pdf"}}


@pytest.mark.asyncio
async def test_currency_conversion_lookup(make_client) -> None:
    recorder = respond(200, {"from_currency": "HUF", "to_currency": "EUR", "conversation_rate": 0.0025})

    async with make_client(recorder) as client:
        result = await BillingoApi(client).currencies.conversion_rate("huf", "eur")

    assert recorder.last.url.path.endswith("/currencies")
    assert recorder.last_params() == {"from": "HUF", "to": "EUR"}
    assert result["conversation_rate"] == 0.0025


@pytest.mark.asyncio
async def test_iterate_follows_last_page(make_client) -> None:
    recorder = respond_pages([
        {"data": [{"id": 1}, {"id": 2}], "current_page": 1, "last_page": 3},
        {"data": [{"id": 3}, {"id": 4}], "current_page": 2, "last_page": 3},
        {"data": [{"id": 5}], "current_page": 3, "last_page": 3},
    ])

    async with make_client(recorder) as client:
        ids = [p["id"] async for p in BillingoApi(client).partners.iterate(per_page=2)]

    assert ids == [1, 2, 3, 4, 5]
    assert [r.url.params["page"] for r in recorder.requests] == ["1", "2", "3"]


@pytest.mark.asyncio
async def test_iterate_without_metadata_stops_on_short_page(make_client) -> None:
    recorder = respond_pages([
        {"data": [{"id": 1}, {"id": 2}]},
        {"data": [{"id": 3}]},
    ])

    async with make_client(recorder) as client:
        ids = [p["id"] async for p in BillingoApi(client).products.iterate(per_page=2)]

    assert ids == [1, 2, 3]
    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_iterate_respects_limit_and_filters(make_client) -> None:
    recorder = respond_pages([
        {"data": [{"id": 1}, {"id": 2}], "last_page": 5},
        {"data": [{"id": 3}, {"id": 4}], "last_page": 5},
    ])

    async with make_client(recorder) as client:
        ids = [
            d["id"]
            async for d in BillingoApi(client).documents.iterate(per_page=2, limit=3, type="invoice")
        ]

    assert ids == [1, 2, 3]
    assert len(recorder.requests) == 2
    assert recorder.last_params()["type"] == "invoice"


@pytest.mark.asyncio
async def test_errors_pass_through_facade_unchanged(make_client) -> None:
    async with make_client(respond(429, {})) as client:
        with pytest.raises(RateLimitError):
            await BillingoApi(client).documents.create({"partner_id": 1})


@pytest.mark.asyncio
async def test_iterate_with_zero_limit_yields_nothing(make_client) -> None:
    recorder = respond_pages([{"data": [{"id": 1}, {"id": 2}], "last_page": 1}])

    async with make_client(recorder) as client:
        ids = [p["id"] async for p in BillingoApi(client).partners.iterate(limit=0)]

    assert ids == []
    assert recorder.requests == []

"""Tests for the mounted product dashboard and its card rendering."""

import asyncio

import httpx
import pytest

from shopsmart.client.dashboard import Dashboard, format_price, render_card
from shopsmart.client.state import Error, Loading, Success


def _card(view, product_id):
    return next(card for card in view["cards"] if card["id"] == product_id)


@pytest.mark.asyncio
async def test_six_item_catalog_renders_six_cards(make_fake_api):
    api = make_fake_api()
    dashboard = Dashboard(api)
    await dashboard.mount()

    view = dashboard.render()
    assert view["view"] == "products"
    assert view["title"] == "Product Dashboard"
    assert view["count_label"] == "6 Products Available"
    assert view["empty_message"] is None
    assert [card["id"] for card in view["cards"]] == [1, 2, 3, 4, 5, 6]
    assert api.product_calls == 1


@pytest.mark.asyncio
async def test_empty_catalog_renders_zero_count_and_empty_message(make_fake_api):
    dashboard = Dashboard(make_fake_api(products={"success": True, "data": []}))
    await dashboard.mount()

    view = dashboard.render()
    assert view["view"] == "products"
    assert view["count_label"] == "0 Products Available"
    assert view["empty_message"] == "No products available"
    assert view["cards"] == []


@pytest.mark.asyncio
async def test_success_false_renders_failed_to_fetch(make_fake_api):
    dashboard = Dashboard(make_fake_api(products={"success": False, "message": "nope"}))
    state = await dashboard.mount()

    assert state.render == Error("Failed to fetch products")
    assert dashboard.render() == {"view": "error", "message": "Error: Failed to fetch products"}


@pytest.mark.asyncio
async def test_network_failure_renders_wrapped_error(make_fake_api):
    dashboard = Dashboard(make_fake_api(products=httpx.ConnectError("Connection refused")))
    state = await dashboard.mount()

    assert isinstance(state.render, Error)
    assert state.render.message == "Error fetching products: Connection refused"
    assert dashboard.render()["message"] == "Error: Error fetching products: Connection refused"


@pytest.mark.asyncio
async def test_undecodable_body_is_treated_as_fetch_failure(make_fake_api):
    dashboard = Dashboard(make_fake_api(products=ValueError("Expecting value: line 1 column 1 (char 0)")))
    state = await dashboard.mount()
    assert state.render.message.startswith("Error fetching products: ")
    assert "Expecting value" in state.render.message


@pytest.mark.asyncio
async def test_loading_is_rendered_while_request_is_in_flight(make_fake_api):
    gate = asyncio.Event()
    dashboard = Dashboard(make_fake_api(gate=gate))

    task = dashboard.start()
    await asyncio.sleep(0)
    assert dashboard.state.render == Loading()
    assert dashboard.render() == {"view": "loading", "message": "Loading products..."}

    gate.set()
    await task
    assert isinstance(dashboard.state.render, Success)


@pytest.mark.asyncio
async def test_count_label_matches_item_count(make_fake_api):
    for n in (0, 1, 3, 10):
        items = [
            {"id": i, "name": f"P{i}", "price": i, "description": "", "image": "", "inStock": True}
            for i in range(1, n + 1)
        ]
        dashboard = Dashboard(make_fake_api(products={"success": True, "data": items, "count": n}))
        await dashboard.mount()
        view = dashboard.render()
        assert view["count_label"] == f"{n} Products Available"
        assert len(view["cards"]) == n


@pytest.mark.asyncio
async def test_stock_drives_badge_and_action(make_fake_api):
    dashboard = Dashboard(make_fake_api())
    await dashboard.mount()
    view = dashboard.render()

    for card in view["cards"]:
        if card["id"] == 4:
            assert card["out_of_stock"] is True
            assert card["badge"]["label"] == "Out of Stock"
            assert card["action"] == {"label": "Unavailable", "disabled": True}
        else:
            assert card["out_of_stock"] is False
            assert card["badge"]["label"] == "In Stock"
            assert card["action"] == {"label": "Add to Cart", "disabled": False}


@pytest.mark.asyncio
async def test_image_failure_only_changes_that_card(make_fake_api):
    dashboard = Dashboard(make_fake_api())
    await dashboard.mount()
    before = dashboard.render()

    dashboard.handle_image_error(2)
    after = dashboard.render()

    failed = _card(after, 2)
    assert failed["image"] is None
    assert failed["placeholder"] == {"text": "Image Not Available"}
    for card_before, card_after in zip(before["cards"], after["cards"]):
        if card_before["id"] != 2:
            assert card_after == card_before
    assert after["count_label"] == before["count_label"]


@pytest.mark.asyncio
async def test_image_failure_is_permanent_and_reset_on_remount(make_fake_api):
    api = make_fake_api()
    dashboard = Dashboard(api)
    await dashboard.mount()
    dashboard.handle_image_error(1)
    dashboard.handle_image_error(1)
    assert dashboard.state.image_failures == frozenset({1})
    assert _card(dashboard.render(), 1)["placeholder"] is not None

    dashboard.unmount()
    await dashboard.mount()
    assert dashboard.state.image_failures == frozenset()
    assert _card(dashboard.render(), 1)["image"]["src"] == "https://via.placeholder.com/200?text=Headphones"
    assert api.product_calls == 2


@pytest.mark.asyncio
async def test_image_failure_does_not_affect_error_state(make_fake_api):
    dashboard = Dashboard(make_fake_api(products={"success": False}))
    await dashboard.mount()
    dashboard.handle_image_error(1)
    assert dashboard.render() == {"view": "error", "message": "Error: Failed to fetch products"}


@pytest.mark.asyncio
async def test_add_to_cart_is_a_no_op(make_fake_api):
    dashboard = Dashboard(make_fake_api())
    await dashboard.mount()
    before = dashboard.render()

    assert dashboard.click_add_to_cart(1) is True
    assert dashboard.click_add_to_cart(4) is False
    assert dashboard.click_add_to_cart(999) is False
    assert dashboard.render() == before


@pytest.mark.asyncio
async def test_response_after_unmount_is_ignored(make_fake_api):
    gate = asyncio.Event()
    dashboard = Dashboard(make_fake_api(gate=gate))

    mounting = asyncio.ensure_future(dashboard.mount())
    await asyncio.sleep(0)
    dashboard.unmount()
    gate.set()
    state = await mounting

    assert state.mounted is False
    assert state.render == Loading()


@pytest.mark.asyncio
async def test_unmount_cancels_started_fetch(make_fake_api):
    gate = asyncio.Event()
    dashboard = Dashboard(make_fake_api(gate=gate))

    task = dashboard.start()
    await asyncio.sleep(0)
    dashboard.unmount()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert dashboard.state.mounted is False
    assert dashboard.state.render == Loading()


@pytest.mark.asyncio
async def test_separate_dashboards_are_independent(make_fake_api):
    first = Dashboard(make_fake_api())
    second = Dashboard(make_fake_api(products={"success": False}))
    await asyncio.gather(first.mount(), second.mount())

    first.handle_image_error(3)
    assert isinstance(first.state.render, Success)
    assert isinstance(second.state.render, Error)
    assert second.state.image_failures == frozenset()


def test_render_card_formats_price_and_uses_name_as_alt():
    card = render_card({"id": 7, "name": "Lamp", "price": 10, "description": "Warm", "image": "l.png", "inStock": True})
    assert card["price"] == "$10.00"
    assert card["image"] == {"src": "l.png", "alt": "Lamp"}
    assert card["placeholder"] is None
    assert card["badge"]["icon"] == "✓"


@pytest.mark.parametrize(
    "price,expected",
    [(79.99, "$79.99"), (9.9, "$9.90"), (0, "$0.00"), (2.5, "$2.50"), (1000, "$1000.00")],
)
def test_format_price_two_decimals(price, expected):
    assert format_price(price) == expected

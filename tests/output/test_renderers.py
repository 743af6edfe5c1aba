"""Tests for operation-specific Rich renderers."""

from decimal import Decimal

from pieshop.output.renderers import render_quiet, render_result
from pieshop.services.result import ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _line(pie_id: int, name: str, price: str, quantity: int) -> dict[str, object]:
    return {
        "id": pie_id,
        "name": name,
        "price": Decimal(price),
        "quantity": quantity,
        "line_total": Decimal(price) * quantity,
    }


def _summary(pie_id: int, name: str, price: str, *, in_stock: bool, week: bool) -> dict:
    return {
        "id": pie_id,
        "name": name,
        "price": Decimal(price),
        "in_stock": in_stock,
        "is_pie_of_the_week": week,
    }


CART = "3f2c9a4e-8b1d-4c7a-9e5f-0a1b2c3d4e5f"


# ── Errors ────────────────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(ServiceResult.failure("add_item", "NOT_FOUND", "No pie found"))
        assert "ERROR" in output
        assert "add_item" in output
        assert "No pie found" in output

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult.failure("add_item", "NOT_FOUND", "No pie", pie_id=9)
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "pie_id: 9" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="total"))


# ── Cart ──────────────────────────────────────────────────────────────


class TestCartRenderers:
    def test_add_item(self) -> None:
        output = render_result(
            _ok("add_item", cart_id=CART, pie_id=1, name="Strawberry Pie", quantity=2)
        )
        assert "OK" in output
        assert "add_item" in output
        assert "Strawberry Pie" in output
        assert "quantity: 2" in output

    def test_remove_item_shows_removed(self) -> None:
        output = render_result(
            _ok(
                "remove_item",
                cart_id=CART,
                pie_id=1,
                name="Strawberry Pie",
                quantity=0,
                removed=True,
            )
        )
        assert "removed: True" in output

    def test_empty_cart(self) -> None:
        output = render_result(_ok("list_items", cart_id=CART, items=[], count=0))
        assert "Your cart is empty." in output

    def test_cart_table(self) -> None:
        items = [_line(1, "Strawberry Pie", "15.95", 2), _line(2, "Cheese Cake", "18.95", 1)]
        output = render_result(_ok("list_items", cart_id=CART, items=items, count=2))
        assert "Strawberry Pie" in output
        assert "31.90" in output
        assert "2 lines" in output

    def test_summary_shows_total(self) -> None:
        items = [_line(1, "Strawberry Pie", "15.95", 2), _line(2, "Cheese Cake", "18.95", 1)]
        output = render_result(
            _ok(
                "cart_summary",
                cart_id=CART,
                items=items,
                count=2,
                quantity=3,
                total=Decimal("50.85"),
                currency="USD",
            )
        )
        assert "3 pies" in output
        assert "total 50.85 USD" in output

    def test_total(self) -> None:
        output = render_result(_ok("total", cart_id=CART, total=Decimal("0.00"), currency="USD"))
        assert output == "0.00 USD"

    def test_verbose_total_shows_cart_id(self) -> None:
        output = render_result(
            _ok("total", cart_id=CART, total=Decimal("1.00"), currency="USD"), verbose=True
        )
        assert CART in output

    def test_cart_id(self) -> None:
        output = render_result(_ok("cart_id", cart_id=CART, session="default", minted=True))
        assert CART in output
        assert "minted: True" in output


# ── Catalog ───────────────────────────────────────────────────────────


class TestCatalogRenderers:
    def test_pie_table_flags(self) -> None:
        items = [
            _summary(1, "Strawberry Pie", "15.95", in_stock=True, week=True),
            _summary(4, "Pumpkin Pie", "12.95", in_stock=False, week=False),
        ]
        output = render_result(_ok("list_pies", items=items, count=2))
        assert "pie of the week" in output
        assert "sold out" in output
        assert "12.95" in output
        assert "2 pies" in output

    def test_pie_panel(self) -> None:
        output = render_result(
            _ok(
                "get_pie",
                id=6,
                name="Cranberry Pie",
                price=Decimal("17.95"),
                short_description="A Christmas favorite",
                long_description="Lorem Ipsum",
                allergy_information="",
                in_stock=True,
                is_pie_of_the_week=False,
            )
        )
        assert "Cranberry Pie" in output
        assert "A Christmas favorite" in output
        assert "17.95" in output
        assert "in stock" in output

    def test_categories(self) -> None:
        items = [{"id": 1, "name": "Fruit pies", "description": "All-fruity pies"}]
        output = render_result(_ok("list_categories", items=items, count=1))
        assert "Fruit pies" in output
        assert "All-fruity pies" in output


# ── Shop lifecycle / generic ──────────────────────────────────────────


class TestOtherRenderers:
    def test_upgrade_pending_verbose(self) -> None:
        result = _ok(
            "upgrade",
            pending_count=1,
            pending=[{"revision": "002_seed_data_update", "description": "Rename"}],
            current="001_baseline",
            head="002_seed_data_update",
        )
        output = render_result(result, verbose=True)
        assert "pending_count: 1" in output
        assert "002_seed_data_update: Rename" in output

    def test_upgrade_unstamped_is_called_out(self) -> None:
        result = _ok("upgrade", pending_count=0, pending=[], current=None, unstamped=True)
        output = render_result(result)
        assert "pending_count: 0" in output
        assert "unstamped: built at head" in output

    def test_upgrade_not_unstamped_is_quiet(self) -> None:
        output = render_result(_ok("upgrade", pending_count=1, unstamped=False))
        assert "unstamped" not in output

    def test_init(self) -> None:
        output = render_result(_ok("init", name="Corner Pies", shop_root="/srv/shop", pies=6))
        assert "Corner Pies" in output
        assert "pies: 6" in output

    def test_generic_fallback(self) -> None:
        output = render_result(_ok("forget_cart", session="default", forgotten=None))
        assert "forget_cart" in output
        assert "session: default" in output

    def test_verbose_renders_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="forget_cart",
            data={},
            meta={"telemetry": {"name": "CartService.clear", "duration_ms": 1.5}},
        )
        output = render_result(result, verbose=True)
        assert "CartService.clear" in output
        assert "1.50ms" in output


# ── Quiet mode ────────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_error(self) -> None:
        output = render_quiet(ServiceResult.failure("add_item", "NOT_FOUND", "No pie"))
        assert output.startswith("ERROR: add_item")

    def test_items_ids(self) -> None:
        items = [_line(1, "Strawberry Pie", "15.95", 2), _line(3, "Rhubarb Pie", "15.95", 1)]
        assert render_quiet(_ok("list_items", items=items, count=2)) == "1\n3"

    def test_total(self) -> None:
        assert render_quiet(_ok("total", total=Decimal("34.90"))) == "34.90"

    def test_cart_id(self) -> None:
        assert render_quiet(_ok("cart_id", cart_id=CART)) == CART

    def test_fallback(self) -> None:
        assert render_quiet(_ok("clear", removed=2)) == "OK: clear"

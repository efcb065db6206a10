"""Unit tests for OrderService and ProductService."""

import pytest

from src.core.errors import ValidationError
from src.domain.services.order_service import OrderService
from src.domain.services.product_service import ProductService
from tests.conftest import (
    create_customer,
    create_order,
    create_order_item,
    create_product,
)


@pytest.mark.unit
class TestOrderServiceTotal:
    """Test OrderService.total."""

    def test_total_of_all_orders(self):
        order_1 = create_order("o1", items=[create_order_item("i1", price=100, quantity=1)])
        order_2 = create_order(
            "o2",
            items=[
                create_order_item("i2", price=200, quantity=2),
                create_order_item("i3", price=50, quantity=1),
            ],
        )

        assert OrderService.total([order_1, order_2]) == 550

    def test_total_of_no_orders(self):
        assert OrderService.total([]) == 0


@pytest.mark.unit
class TestOrderServicePlaceOrder:
    """Test OrderService.place_order."""

    def test_place_order_credits_half_total_as_reward_points(self):
        customer = create_customer()
        items = [create_order_item("i1", price=10, quantity=1)]

        order = OrderService.place_order(customer, items)

        assert customer.reward_points == 5
        assert order.total == 10
        assert order.customer_id == customer.id

    def test_reward_points_accumulate_across_orders(self):
        customer = create_customer()

        OrderService.place_order(customer, [create_order_item("i1", price=10, quantity=1)])
        OrderService.place_order(customer, [create_order_item("i2", price=20, quantity=1)])

        assert customer.reward_points == 15

    def test_generated_order_id(self):
        order = OrderService.place_order(create_customer(), [create_order_item()])

        assert order.id

    def test_explicit_order_id(self):
        order = OrderService.place_order(
            create_customer(), [create_order_item()], order_id="o42"
        )

        assert order.id == "o42"

    def test_place_order_without_items_raises(self):
        customer = create_customer()

        with pytest.raises(ValidationError, match="Items are required"):
            OrderService.place_order(customer, [])

        assert customer.reward_points == 0


@pytest.mark.unit
class TestProductService:
    """Test ProductService.increase_price."""

    def test_increase_price_of_all_products(self):
        product_1 = create_product("p1", price=10)
        product_2 = create_product("p2", price=20)

        result = ProductService.increase_price([product_1, product_2], 100)

        assert result == [product_1, product_2]
        assert product_1.price == 20
        assert product_2.price == 40

    def test_increase_by_zero_percent(self):
        product = create_product(price=10)

        ProductService.increase_price([product], 0)

        assert product.price == 10

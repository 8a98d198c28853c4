from assetpath.services.ordering import OrderAssigner


def test_orders_are_gapless_from_one():
    orders = OrderAssigner()
    assert [orders.next_order() for _ in range(5)] == [1, 2, 3, 4, 5]
    assert orders.produced == 5


def test_assigners_are_independent():
    first, second = OrderAssigner(), OrderAssigner()
    first.next_order()
    first.next_order()
    assert second.next_order() == 1

from saba.geometry import LayoutPoint, LayoutSize


def test_point_holds_coordinates():
    point = LayoutPoint(3, 7)
    assert (point.x, point.y) == (3, 7)


def test_point_defaults_to_origin():
    assert LayoutPoint() == LayoutPoint(0, 0)


def test_point_can_be_moved():
    point = LayoutPoint(0, 0)
    point.x = 10
    point.y = 20
    assert point == LayoutPoint(10, 20)


def test_size_holds_dimensions():
    size = LayoutSize(100, 50)
    assert (size.width, size.height) == (100, 50)


def test_size_can_be_resized():
    size = LayoutSize()
    size.width = 40
    size.height = 30
    assert size == LayoutSize(40, 30)


def test_sizes_with_different_values_differ():
    assert not LayoutSize(1, 2) == LayoutSize(2, 1)
from stagecraft.domain.controllers import ViewController, is_view_controller
from stagecraft.domain.views import ViewId
from stagecraft.domain.window import Anchors, Container, WindowHandle, new_window_id


def test_fill_anchors_are_zero_on_all_sides():
    anchors = Anchors.fill()
    assert (anchors.top, anchors.right, anchors.bottom, anchors.left) == (0.0, 0.0, 0.0, 0.0)


def test_containers_wrapping_same_tree_are_distinct():
    tree = object()
    first = Container(child=tree)
    second = Container(child=tree)

    assert first is not second
    assert first != second
    assert first.container_id != second.container_id
    assert first.children == (tree,)
    assert first.anchors == Anchors.fill()


def test_window_handle_identity_ignores_native_object():
    window_id = new_window_id()
    a = WindowHandle(window_id=window_id, view_id=ViewId.HELLO, title="Hello!", native=object())
    b = WindowHandle(window_id=window_id, view_id=ViewId.HELLO, title="Other", native=object())
    c = WindowHandle(window_id=new_window_id(), view_id=ViewId.HELLO, title="Hello!", native=a.native)

    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_is_view_controller_checks_capability():
    class Marked(ViewController):
        pass

    class Plain:
        pass

    assert is_view_controller(Marked) is True
    assert is_view_controller(Plain) is False
    assert is_view_controller("not-a-type") is False

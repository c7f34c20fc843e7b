from stagecraft.domain.errors import MalformedDefinition, ResourceNotFound, ViewLoadError
from stagecraft.domain.ports import UseCaseError
from stagecraft.usecases.error_mapping import map_view_error


def test_resource_not_found_maps_to_view_not_found():
    err = map_view_error(ResourceNotFound("missing hello-view.xml"), view_name="HELLO")
    assert err.code == "VIEW_NOT_FOUND"
    assert "HELLO" in err.message
    assert "missing hello-view.xml" in err.message


def test_malformed_definition_maps_to_view_malformed():
    err = map_view_error(MalformedDefinition("bad xml"), view_name="HELLO")
    assert err.code == "VIEW_MALFORMED"


def test_other_errors_map_to_unavailable():
    assert map_view_error(ViewLoadError("x"), view_name="HELLO").code == "VIEW_UNAVAILABLE"
    err = map_view_error(RuntimeError(""), view_name="HELLO")
    assert err.code == "VIEW_UNAVAILABLE"
    assert err.message == "View HELLO unavailable."


def test_use_case_error_passes_through():
    original = UseCaseError("X", "y")
    assert map_view_error(original, view_name="HELLO") is original

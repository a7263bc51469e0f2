# tests/test_graph.py

from config.form import FormConfig
from registration.graph import SubmitGraphFactory
from registration.schema import RegistrationSchema
from registration.state import FormStatus, SubmitState


def build(navigate):
    return SubmitGraphFactory(RegistrationSchema(), navigate, FormConfig())


def test_invalid_record_ends_in_editing(navigator):
    graph = build(navigator).compile()

    out = SubmitState.model_validate(graph.invoke({"record": {"username": "alice"}}))

    assert out.status is FormStatus.EDITING
    assert "username" not in out.errors
    assert out.errors["email"] == "Email is invalid"
    assert navigator.calls == []


def test_valid_record_navigates_once(navigator, scenario_a):
    graph = build(navigator).compile()

    out = SubmitState.model_validate(graph.invoke({"record": scenario_a}))

    assert out.status is FormStatus.SUBMITTED
    assert out.validated is None
    assert navigator.calls == [("/welcome", {"name": "alice"})]


def test_navigation_error_sets_notice(failing_navigator, scenario_a):
    graph = build(failing_navigator).compile()

    out = SubmitState.model_validate(graph.invoke({"record": scenario_a}))

    assert out.status is FormStatus.EDITING
    assert out.notice == "Form submission failed. Please try again."
    assert out.errors == {}


def test_should_navigate_routes_on_validated_record(scenario_a):
    factory = build(lambda path, params: None)
    validated = factory.schema.validate(scenario_a).record

    assert factory.should_navigate(SubmitState(validated=validated)) == "navigate"
    assert factory.should_navigate(SubmitState()) == "editing"

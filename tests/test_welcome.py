# tests/test_welcome.py

from registration.welcome import greeting


def test_greets_by_name():
    assert greeting({"name": "alice"}) == "Hi, alice!"


def test_name_is_rendered_verbatim():
    assert greeting({"name": "<b>Bob</b>"}) == "Hi, <b>Bob</b>!"


def test_missing_name_renders_empty_placeholder():
    assert greeting({}) == "Hi, !"
    assert greeting({"name": None}) == "Hi, !"


def test_custom_param():
    assert greeting({"user": "carol"}, name_param="user") == "Hi, carol!"

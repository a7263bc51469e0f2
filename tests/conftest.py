import pytest


class RecordingNavigator:
    def __init__(self, failures: int = 0):
        self.calls = []
        self.failures = failures

    def __call__(self, path, params):
        self.calls.append((path, dict(params)))
        if self.failures:
            self.failures -= 1
            raise RuntimeError("router unavailable")


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def scenario_a():
    return {
        "username": "alice",
        "email": "a@b.com",
        "password": "password1",
        "confirmPassword": "password1",
        "dateOfBirth": "1990-01-01",
        "bio": "hi",
        "gender": "female",
        "termsAndConditions": True,
    }


@pytest.fixture
def failing_navigator():
    return RecordingNavigator(failures=1)

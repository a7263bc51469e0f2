import logging
from typing import Mapping

from config.form import FormConfig
from registration.controller import RegistrationFormController
from registration.welcome import greeting


def main():
    patches = [
        {"username": "", "email": "alice", "password": "short", "gender": "cat"},
        {
            "username": "alice",
            "email": "alice@gmail.com",
            "password": "password1",
            "confirmPassword": "password1",
            "dateOfBirth": "1990-01-01",
            "bio": "hi",
            "gender": "female",
        },
        {"termsAndConditions": True},
    ]

    # load form config
    config = FormConfig.from_env()
    logging.basicConfig(level=config.log_level)

    def navigate(path: str, params: Mapping[str, str]) -> None:
        print(f"\nnavigate {path} {dict(params)}")
        print(greeting(params, config.name_param))

    form = RegistrationFormController(navigate, config=config)

    # edit and submit
    snapshot = form.snapshot
    for i, patch in enumerate(patches, 1):
        for name, value in patch.items():
            form.set_field(name, value)
        snapshot = form.submit()
        print(f"\nSUBMIT #{i}: {snapshot.status.value}")
        for element_id, message in form.errors_by_element_id().items():
            print(f"  {element_id}: {message}")
        if snapshot.notice:
            print("  notice:", snapshot.notice)

    print("\nfinal status:", snapshot.status.value)


if __name__ == "__main__":
    main()
